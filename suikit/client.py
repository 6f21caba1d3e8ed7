"""A node client that groups every API over one shared connection."""

from __future__ import annotations

from typing import Any

import httpx

from suikit.coin import CoinAPI
from suikit.event import EventAPI
from suikit.move import MoveAPI
from suikit.name_service import NameServiceAPI
from suikit.objects import ObjectAPI
from suikit.rpc import BaseAPI, JsonRpcConnection
from suikit.system import SystemAPI
from suikit.transaction import TransactionReadAPI
from suikit.write import WriteTransactionAPI


class SuiClient:
    """Entry point to a node's JSON-RPC API.

    Each group of calls is an attribute (``coin``, ``event``, ``move``,
    ``name_service``, ``objects``, ``transaction``, ``system``, ``write``),
    and ``base`` sends arbitrary calls. All groups share one connection.
    Pass ``http_client`` to use a custom HTTP client; it is then left open
    by :meth:`close`.
    """

    def __init__(
        self,
        rpc_url: str,
        http_client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._conn = JsonRpcConnection(rpc_url, client=http_client, timeout=timeout)
        self.base = BaseAPI(self._conn)
        self.coin = CoinAPI(self._conn)
        self.write = WriteTransactionAPI(self._conn)
        self.event = EventAPI(self._conn)
        self.objects = ObjectAPI(self._conn)
        self.transaction = TransactionReadAPI(self._conn)
        self.system = SystemAPI(self._conn)
        self.move = MoveAPI(self._conn)
        self.name_service = NameServiceAPI(self._conn)

    @property
    def url(self) -> str:
        """The node endpoint this client talks to."""
        return self._conn.url

    def close(self) -> None:
        """Close the connection, unless it runs over a caller-supplied HTTP client."""
        self._conn.close()

    def __enter__(self) -> "SuiClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()