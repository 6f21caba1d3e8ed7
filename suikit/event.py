"""Event queries."""

from __future__ import annotations

from typing import Any

from suikit.rpc import BaseAPI, RpcError
from suikit.validate import validate_range


class EventAPI(BaseAPI):
    """Reads events emitted by transactions."""

    def _fetch(self, method: str, params: list[Any]) -> Any:
        result = self._result(method, params)
        if result is None:
            raise RpcError(f"{method}: response carries no result")
        return result

    def get_events(self, digest: str) -> list[dict[str, Any]]:
        """Events emitted by the transaction with ``digest``."""
        return self._fetch("sui_getEvents", [digest])

    def query_events(
        self,
        event_filter: Any,
        cursor: Any = None,
        limit: int | None = None,
        descending_order: bool = False,
    ) -> dict[str, Any]:
        """One page of events matching ``event_filter``."""
        validate_range("Limit", limit, lower=0)
        return self._fetch(
            "suix_queryEvents", [event_filter, cursor, limit, descending_order]
        )