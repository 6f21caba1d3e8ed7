"""Transaction block queries, dry runs and dev-inspect runs."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from suikit.rpc import BaseAPI, RpcError, _raise_for_error
from suikit.validate import validate_range


def _to_uint(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        return max(int(value), 0)
    if isinstance(value, str):
        for convert in (int, float):
            try:
                return max(int(convert(value)), 0)
            except ValueError:
                continue
    return 0


class TransactionReadAPI(BaseAPI):
    """Reads transaction blocks and runs them without committing."""

    def _fetch(self, method: str, params: list[Any], empty: Any) -> Any:
        body = self._conn.request(method, params)
        _raise_for_error(body)
        if "result" not in body:
            raise RpcError(f"{method}: response carries no result")
        result = body["result"]
        return empty if result is None else result

    def get_total_transaction_blocks(self) -> int:
        """Total number of transactions known to the node, 0 if not reported."""
        body = self._conn.request("sui_getTotalTransactionBlocks", [])
        return _to_uint(body.get("result"))

    def get_transaction_block(
        self, digest: str, options: Mapping[str, Any] | None = None
    ) -> dict[str, Any]:
        """The transaction block with ``digest``."""
        return self._fetch(
            "sui_getTransactionBlock",
            [digest, dict(options) if options is not None else {}],
            {},
        )

    def multi_get_transaction_blocks(
        self, digests: Iterable[str], options: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        """Transaction blocks for each of ``digests``, in order."""
        return self._fetch(
            "sui_multiGetTransactionBlocks",
            [list(digests), dict(options) if options is not None else {}],
            [],
        )

    def query_transaction_blocks(
        self,
        query: Mapping[str, Any] | None = None,
        cursor: Any = None,
        limit: int | None = None,
        descending_order: bool = False,
    ) -> dict[str, Any]:
        """One page of transaction blocks matching ``query``."""
        validate_range("Limit", limit, lower=0)
        return self._fetch(
            "suix_queryTransactionBlocks",
            [dict(query) if query is not None else {}, cursor, limit, descending_order],
            {},
        )

    def dry_run_transaction_block(self, tx_bytes: str) -> dict[str, Any]:
        """Effects of running ``tx_bytes`` without committing them."""
        return self._fetch("sui_dryRunTransactionBlock", [tx_bytes], {})

    def dev_inspect_transaction_block(
        self, sender: str, tx_bytes: str, gas_price: Any = None, epoch: Any = None
    ) -> dict[str, Any]:
        """Run ``tx_bytes`` in dev-inspect mode as ``sender``."""
        return self._fetch(
            "sui_devInspectTransactionBlock", [sender, tx_bytes, gas_price, epoch], {}
        )