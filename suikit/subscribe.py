"""Websocket subscriptions to event and transaction streams."""

from __future__ import annotations

import itertools
import json
from collections.abc import Callable, Iterator
from typing import Any

import websocket


class SubscriptionError(Exception):
    """Raised when a subscription cannot be set up or delivers an error."""


def _error_text(error: Any) -> str:
    return error if isinstance(error, str) else json.dumps(error)


def _decode(raw: Any) -> dict[str, Any]:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    try:
        message = json.loads(raw)
    except ValueError as exc:
        raise SubscriptionError(f"invalid message: {raw!r}") from exc
    if not isinstance(message, dict):
        raise SubscriptionError(f"unexpected message: {message!r}")
    return message


class WebsocketClient:
    """Opens subscriptions on a node's websocket endpoint.

    Each subscription uses its own connection and is returned as an iterator
    over the decoded notification results.
    """

    def __init__(
        self,
        url: str,
        connect: Callable[[str], Any] | None = None,
        timeout: float | None = None,
    ) -> None:
        self.url = url
        self._timeout = timeout
        self._connect = connect if connect is not None else self._open
        self._sockets: list[Any] = []
        self._ids = itertools.count(1)

    def _open(self, url: str) -> Any:
        return websocket.create_connection(url, timeout=self._timeout)

    def _subscribe(self, method: str, params: list[Any]) -> Iterator[Any]:
        try:
            sock = self._connect(self.url)
        except (websocket.WebSocketException, OSError) as exc:
            raise SubscriptionError(f"connect to {self.url} failed: {exc}") from exc
        self._sockets.append(sock)
        request = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        try:
            sock.send(json.dumps(request))
            reply = _decode(sock.recv())
        except (websocket.WebSocketException, OSError) as exc:
            self._discard(sock)
            raise SubscriptionError(f"{method} failed: {exc}") from exc
        except SubscriptionError:
            self._discard(sock)
            raise
        if "error" in reply:
            self._discard(sock)
            raise SubscriptionError(_error_text(reply["error"]))
        return self._stream(sock)

    def _discard(self, sock: Any) -> None:
        if sock in self._sockets:
            self._sockets.remove(sock)
        sock.close()

    @staticmethod
    def _stream(sock: Any) -> Iterator[Any]:
        while True:
            try:
                raw = sock.recv()
            except websocket.WebSocketConnectionClosedException:
                return
            if not raw:
                return
            message = _decode(raw)
            if "error" in message:
                raise SubscriptionError(_error_text(message["error"]))
            params = message.get("params")
            if not isinstance(params, dict) or params.get("result") is None:
                raise SubscriptionError(f"notification carries no result: {message!r}")
            yield params["result"]

    def subscribe_event(self, event_filter: Any) -> Iterator[Any]:
        """Subscribe to events matching ``event_filter``."""
        return self._subscribe("suix_subscribeEvent", [event_filter])

    def subscribe_transaction(self, transaction_filter: Any) -> Iterator[Any]:
        """Subscribe to effects of transactions matching ``transaction_filter``."""
        return self._subscribe("suix_subscribeTransaction", [transaction_filter])

    def close(self) -> None:
        """Close every open subscription connection."""
        sockets, self._sockets = self._sockets, []
        for sock in sockets:
            sock.close()

    def __enter__(self) -> "WebsocketClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()