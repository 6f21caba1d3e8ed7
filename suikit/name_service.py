"""Name service resolution."""

from __future__ import annotations

import json
from typing import Any

from suikit.rpc import BaseAPI, RpcError
from suikit.validate import validate_range


class NameServiceAPI(BaseAPI):
    """Resolves names to addresses and addresses to names."""

    def resolve_name_service_address(self, name: str) -> str:
        """Address a name resolves to, or an empty string when none."""
        result = self._result("suix_resolveNameServiceAddress", [name])
        if result is None:
            return ""
        if isinstance(result, str):
            return result
        return json.dumps(result, separators=(",", ":"))

    def resolve_name_service_names(
        self, address: str, cursor: Any = None, limit: int | None = None
    ) -> dict[str, Any]:
        """One page of names for ``address``; the first is the primary name."""
        validate_range("Limit", limit, lower=0)
        result = self._result("suix_resolveNameServiceNames", [address, cursor, limit])
        if result is None:
            raise RpcError("suix_resolveNameServiceNames: response carries no result")
        return result