"""Unit tests for the relay module."""
import json
import pickle

import httpx
import pytest

from lmchat.bridge import HttpMethod, RelayResult, RequestDescriptor
from lmchat.relay import (
    HttpRelay,
    NetworkError,
    ProtocolError,
    Relay,
    RelayError,
    TransportError,
)


def _relay_for(handler) -> HttpRelay:
    return HttpRelay(transport=httpx.MockTransport(handler))


class TestRelayInterface:
    def test_relay_is_abstract(self):
        """Test that Relay cannot be instantiated directly."""
        with pytest.raises(TypeError):
            Relay()  # type: ignore


class TestHttpRelay:
    """Tests for HttpRelay against a mocked transport."""

    async def test_post_sends_json_body(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"choices": [{"message": {"content": "hi"}}]})

        descriptor = RequestDescriptor(
            endpoint="http://x/v1/chat/completions",
            method=HttpMethod.POST,
            body={"model": "m", "messages": [{"role": "user", "content": "hello"}]},
        )
        async with _relay_for(handler) as relay:
            result = await relay.execute(descriptor)

        assert result == RelayResult(kind="json", data={"choices": [{"message": {"content": "hi"}}]})
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "http://x/v1/chat/completions"
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == descriptor.body

    async def test_get_has_no_body(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": []})

        descriptor = RequestDescriptor(endpoint="http://x/v1/models", method=HttpMethod.GET)
        async with _relay_for(handler) as relay:
            result = await relay.execute(descriptor)

        assert result.kind == "json"
        assert result.data == {"data": []}
        assert seen[0].method == "GET"
        assert seen[0].content == b""

    @pytest.mark.parametrize("status", [400, 404, 500, 503])
    async def test_error_status_raises_transport_error(self, status: int):
        relay = _relay_for(lambda request: httpx.Response(status, json={"error": "nope"}))
        descriptor = RequestDescriptor(endpoint="http://x/v1/models", method=HttpMethod.GET)

        with pytest.raises(TransportError) as excinfo:
            await relay.execute(descriptor)
        await relay.close()

        assert excinfo.value.status == status
        assert str(excinfo.value) == f"HTTP error! status: {status}"

    async def test_malformed_json_raises_protocol_error(self):
        relay = _relay_for(lambda request: httpx.Response(200, content=b"<html>not json"))
        descriptor = RequestDescriptor(endpoint="http://x/v1/models", method=HttpMethod.GET)

        with pytest.raises(ProtocolError):
            await relay.execute(descriptor)
        await relay.close()

    async def test_connection_failure_raises_network_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        relay = _relay_for(handler)
        descriptor = RequestDescriptor(endpoint="http://x/v1/models", method=HttpMethod.GET)

        with pytest.raises(NetworkError, match="Connection refused"):
            await relay.execute(descriptor)
        await relay.close()

    async def test_debug_callback_receives_trace(self):
        lines = []
        relay = _relay_for(lambda request: httpx.Response(200, json={"ok": True}))
        relay.set_debug_callback(lambda level, component, message: lines.append((level, component, message)))

        await relay.execute(RequestDescriptor(endpoint="http://x/v1/models", method=HttpMethod.GET))
        await relay.close()

        assert ("info", "Relay", "Calling LM Studio API: http://x/v1/models GET") in lines

    async def test_does_not_close_borrowed_client(self):
        client = httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(200, json={})))
        relay = HttpRelay(client=client)

        await relay.close()

        assert not client.is_closed
        await client.aclose()


class TestRelayErrors:
    """Errors must survive the process bridge unchanged."""

    @pytest.mark.parametrize(
        "error",
        [TransportError(502), ProtocolError("bad json"), NetworkError("refused")],
    )
    def test_errors_pickle(self, error: RelayError):
        restored = pickle.loads(pickle.dumps(error))

        assert type(restored) is type(error)
        assert str(restored) == str(error)

    def test_transport_error_keeps_status(self):
        restored = pickle.loads(pickle.dumps(TransportError(418)))
        assert restored.status == 418


class TestRequestDescriptor:
    def test_get_with_body_is_rejected(self):
        with pytest.raises(ValueError):
            RequestDescriptor(endpoint="http://x", method=HttpMethod.GET, body={"a": 1})

    def test_method_from_string(self):
        descriptor = RequestDescriptor.model_validate(
            {"endpoint": "http://x", "method": "POST", "body": {"a": 1}}
        )
        assert descriptor.method == HttpMethod.POST
