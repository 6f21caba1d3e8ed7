"""Coin and balance queries."""

from __future__ import annotations

from typing import Any

from suikit.rpc import BaseAPI, RpcError
from suikit.validate import validate_range


def _decoded(method: str, result: Any) -> Any:
    if result is None:
        raise RpcError(f"{method}: response carries no result")
    return result


class CoinAPI(BaseAPI):
    """Reads coin objects, balances and coin metadata."""

    def _fetch(self, method: str, params: list[Any]) -> Any:
        return _decoded(method, self._result(method, params))

    def get_balance(self, owner: str, coin_type: str | None = None) -> dict[str, Any]:
        """Total balance of one coin type owned by ``owner``."""
        return self._fetch("suix_getBalance", [owner, coin_type])

    def get_all_balances(self, owner: str) -> list[dict[str, Any]]:
        """Balances of every coin type owned by ``owner``."""
        return self._fetch("suix_getAllBalances", [owner])

    def get_coins(
        self,
        owner: str,
        coin_type: str | None = None,
        cursor: str | None = None,
        limit: int | None = None,
    ) -> dict[str, Any]:
        """One page of coin objects of ``coin_type`` owned by ``owner``."""
        validate_range("Limit", limit, lower=0)
        return self._fetch("suix_getCoins", [owner, coin_type, cursor, limit])

    def get_all_coins(
        self, owner: str, cursor: str | None = None, limit: int | None = None
    ) -> dict[str, Any]:
        """One page of all coin objects owned by ``owner``."""
        validate_range("Limit", limit, lower=0)
        return self._fetch("suix_getAllCoins", [owner, cursor, limit])

    def get_coin_metadata(self, coin_type: str) -> dict[str, Any]:
        """Metadata (symbol, decimals and so on) for ``coin_type``."""
        return self._fetch("suix_getCoinMetadata", [coin_type])

    def get_total_supply(self, coin_type: str) -> dict[str, Any]:
        """Total supply of ``coin_type``."""
        return self._fetch("suix_getTotalSupply", [coin_type])