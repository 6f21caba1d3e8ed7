import json

import pytest
import websocket

from suikit.subscribe import SubscriptionError, WebsocketClient

EVENT_FILTER = {"MoveEventType": "0x3::validator::StakingRequestEvent"}


class FakeSocket:
    def __init__(self, incoming):
        self.incoming = [json.dumps(m) if not isinstance(m, str) else m for m in incoming]
        self.sent = []
        self.closed = False

    def send(self, data):
        self.sent.append(json.loads(data))

    def recv(self):
        if not self.incoming:
            raise websocket.WebSocketConnectionClosedException("closed")
        return self.incoming.pop(0)

    def close(self):
        self.closed = True


def make_client(*sockets):
    pending = list(sockets)
    urls = []

    def connect(url):
        urls.append(url)
        return pending.pop(0)

    return WebsocketClient("ws://node.test", connect=connect), urls


def notification(result):
    return {"jsonrpc": "2.0", "method": "suix_subscribeEvent", "params": {"subscription": 7, "result": result}}


def test_subscribe_event_sends_request_and_yields_results():
    sock = FakeSocket([{"id": 1, "result": 7}, notification({"n": 1}), notification({"n": 2})])
    client, urls = make_client(sock)
    stream = client.subscribe_event(EVENT_FILTER)
    assert urls == ["ws://node.test"]
    assert sock.sent[0]["method"] == "suix_subscribeEvent"
    assert sock.sent[0]["params"] == [EVENT_FILTER]
    assert list(stream) == [{"n": 1}, {"n": 2}]


def test_subscribe_transaction_method():
    sock = FakeSocket([{"id": 1, "result": 3}])
    client, _ = make_client(sock)
    stream = client.subscribe_transaction({"FromAddress": "0x1"})
    assert sock.sent[0]["method"] == "suix_subscribeTransaction"
    assert sock.sent[0]["params"] == [{"FromAddress": "0x1"}]
    assert list(stream) == []


def test_error_reply_raises_and_closes():
    sock = FakeSocket([{"id": 1, "error": {"code": -32602, "message": "bad filter"}}])
    client, _ = make_client(sock)
    with pytest.raises(SubscriptionError, match="bad filter"):
        client.subscribe_event(EVENT_FILTER)
    assert sock.closed is True


def test_error_notification_raises():
    sock = FakeSocket([{"id": 1, "result": 7}, notification({"n": 1}), {"error": "boom"}])
    client, _ = make_client(sock)
    stream = client.subscribe_event(EVENT_FILTER)
    assert next(stream) == {"n": 1}
    with pytest.raises(SubscriptionError, match="boom"):
        next(stream)


def test_notification_without_result_raises():
    sock = FakeSocket([{"id": 1, "result": 7}, notification({"n": 1}), {"params": {"subscription": 7}}])
    client, _ = make_client(sock)
    stream = client.subscribe_event(EVENT_FILTER)
    assert next(stream) == {"n": 1}
    with pytest.raises(SubscriptionError):
        next(stream)


def test_invalid_json_raises():
    sock = FakeSocket([{"id": 1, "result": 7}, notification({"n": 5}), "not json"])
    client, _ = make_client(sock)
    stream = client.subscribe_event(EVENT_FILTER)
    assert next(stream) == {"n": 5}
    with pytest.raises(SubscriptionError):
        next(stream)


def test_connect_failure_raises():
    def connect(url):
        raise OSError("refused")

    client = WebsocketClient("ws://node.test", connect=connect)
    with pytest.raises(SubscriptionError, match="refused"):
        client.subscribe_event(EVENT_FILTER)


def test_close_closes_all_connections():
    first = FakeSocket([{"id": 1, "result": 1}])
    second = FakeSocket([{"id": 2, "result": 2}])
    with make_client(first, second)[0] as client:
        client.subscribe_event(EVENT_FILTER)
        client.subscribe_transaction({"All": []})
        assert second.sent[0]["id"] == 2
    assert first.closed is True
    assert second.closed is True