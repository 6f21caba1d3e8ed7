"""JSON-RPC transport over HTTP and the raw call API."""

from __future__ import annotations

import itertools
import json
from collections.abc import Iterable
from typing import Any

import httpx


class RpcError(Exception):
    """Raised when a node call fails or answers with an error."""

    def __init__(self, message: str, error: Any = None) -> None:
        super().__init__(message)
        self.error = error


class JsonRpcConnection:
    """Sends JSON-RPC 2.0 requests to one node endpoint."""

    def __init__(self, url: str, client: httpx.Client | None = None, timeout: float = 30.0) -> None:
        self.url = url
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)
        self._ids = itertools.count(1)

    def request(self, method: str, params: Iterable[Any] = ()) -> dict[str, Any]:
        """Send one call and return the decoded response envelope."""
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": list(params),
        }
        try:
            response = self._client.post(self.url, json=payload)
        except httpx.HTTPError as exc:
            raise RpcError(f"request {method} failed: {exc}") from exc
        try:
            body = response.json()
        except ValueError as exc:
            raise RpcError(
                f"invalid response to {method} (status {response.status_code})"
            ) from exc
        if not isinstance(body, dict):
            raise RpcError(f"unexpected response to {method}: {body!r}")
        return body

    def close(self) -> None:
        """Close the underlying HTTP client if this connection created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "JsonRpcConnection":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


def _raise_for_error(body: dict[str, Any]) -> None:
    if "error" in body:
        error = body["error"]
        message = error if isinstance(error, str) else json.dumps(error)
        raise RpcError(message, error)


class BaseAPI:
    """Base for node API groups sharing one connection."""

    def __init__(self, conn: JsonRpcConnection) -> None:
        self._conn = conn

    def sui_call(self, method: str, *args: Any) -> dict[str, Any]:
        """Send an arbitrary method call and return the whole response envelope."""
        body = self._conn.request(method, args)
        _raise_for_error(body)
        return body

    def _result(self, method: str, params: Iterable[Any], check_error: bool = True) -> Any:
        body = self._conn.request(method, params)
        if check_error:
            _raise_for_error(body)
        return body.get("result")