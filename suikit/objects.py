"""Object queries: current, owned, dynamic-field and past versions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from suikit.rpc import BaseAPI, RpcError
from suikit.validate import validate_range


def _past_object(entry: Any) -> Any:
    if isinstance(entry, Mapping):
        return dict(entry)
    object_id, version = entry
    return {"objectId": object_id, "version": version}


class ObjectAPI(BaseAPI):
    """Reads objects and their versions from a node."""

    def _fetch(self, method: str, params: list[Any], check_error: bool = True) -> Any:
        result = self._result(method, params, check_error)
        if result is None:
            raise RpcError(f"{method}: response carries no result")
        return result

    def get_object(self, object_id: str, options: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """The object with ``object_id``.

        An error field in the answer is not checked; only a missing result fails.
        """
        return self._fetch(
            "sui_getObject",
            [object_id, dict(options) if options is not None else {}],
            check_error=False,
        )

    def get_owned_objects(
        self,
        address: str,
        query: Mapping[str, Any] | None = None,
        cursor: Any = None,
        limit: int | None = None,
    ) -> dict[str, Any]:
        """One page of objects owned by ``address``."""
        validate_range("Limit", limit, lower=0)
        return self._fetch(
            "suix_getOwnedObjects",
            [address, dict(query) if query is not None else {}, cursor, limit],
        )

    def multi_get_objects(
        self, object_ids: Iterable[str], options: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """Object data for each of ``object_ids``, in order."""
        return self._fetch(
            "sui_multiGetObjects",
            [list(object_ids), dict(options) if options is not None else {}],
        )

    def get_dynamic_fields(
        self, object_id: str, cursor: Any = None, limit: int | None = None
    ) -> dict[str, Any]:
        """One page of dynamic fields owned by ``object_id``."""
        validate_range("Limit", limit, lower=0)
        return self._fetch("suix_getDynamicFields", [object_id, cursor, limit])

    def get_dynamic_field_object(self, object_id: str, dynamic_field_name: Any) -> dict[str, Any]:
        """The dynamic field object named ``dynamic_field_name`` under ``object_id``."""
        return self._fetch("suix_getDynamicFieldObject", [object_id, dynamic_field_name])

    def try_get_past_object(
        self, object_id: str, version: int, options: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """The object at ``version``; nodes may have pruned it."""
        return self._fetch(
            "sui_tryGetPastObject",
            [object_id, version, dict(options) if options is not None else {}],
        )

    def get_loaded_child_objects(self, digest: str) -> dict[str, Any]:
        """Child objects loaded by the transaction with ``digest``."""
        return self._fetch("sui_getLoadedChildObjects", [digest])

    def try_multi_get_past_objects(
        self, past_objects: Iterable[Any], options: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """Past versions of several objects.

        Each entry is a mapping with ``objectId`` and ``version`` or an
        ``(object_id, version)`` pair.
        """
        return self._fetch(
            "sui_tryMultiGetPastObjects",
            [
                [_past_object(entry) for entry in past_objects],
                dict(options) if options is not None else {},
            ],
        )