"""Queries for normalised Move packages, modules, structs and functions."""

from __future__ import annotations

from typing import Any

from suikit.rpc import RpcError, BaseAPI, _raise_for_error


class MoveAPI(BaseAPI):
    """Reads Move package structure.

    A failed transport yields ``None`` rather than an exception; an error
    answer from the node is raised.
    """

    def _fetch(self, method: str, params: list[Any]) -> Any:
        try:
            body = self._conn.request(method, params)
        except RpcError:
            return None
        _raise_for_error(body)
        result = body.get("result")
        if result is None:
            raise RpcError(f"{method}: response carries no result")
        return result

    def get_move_function_arg_types(self, package: str, module: str, function: str) -> Any:
        """Argument types of a Move function."""
        return self._fetch("sui_getMoveFunctionArgTypes", [package, module, function])

    def get_normalized_move_modules_by_package(self, package: str) -> Any:
        """Structured representations of every module in ``package``."""
        return self._fetch("sui_getNormalizedMoveModulesByPackage", [package])

    def get_normalized_move_module(self, package: str, module_name: str) -> Any:
        """Structured representation of one Move module."""
        return self._fetch("sui_getNormalizedMoveModule", [package, module_name])

    def get_normalized_move_struct(
        self, package: str, module_name: str, struct_name: str
    ) -> Any:
        """Structured representation of one Move struct."""
        return self._fetch(
            "sui_getNormalizedMoveStruct", [package, module_name, struct_name]
        )

    def get_normalized_move_function(
        self, package: str, module_name: str, function_name: str
    ) -> Any:
        """Structured representation of one Move function."""
        return self._fetch(
            "sui_getNormalizedMoveFunction", [package, module_name, function_name]
        )