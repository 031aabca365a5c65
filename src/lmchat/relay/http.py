"""httpx-backed relay implementation."""

import json
from typing import Any

import httpx

from ..bridge.models import RelayResult, RequestDescriptor
from .base import Relay
from .errors import NetworkError, ProtocolError, TransportError

JSON_HEADERS = {"Content-Type": "application/json"}


class HttpRelay(Relay):
    """Relay that performs calls with an httpx AsyncClient.

    Hidden design decisions:
    - HTTP client construction and lifetime
    - JSON encoding of request bodies
    - Mapping of httpx failures onto the relay error taxonomy

    No timeout is set: a hung server keeps the call pending until the
    transport gives up.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **client_kwargs: Any
    ):
        """Initialize the relay.

        Args:
            client: Pre-built client to use (not closed by this relay)
            transport: Optional transport for the owned client (tests pass
                an ``httpx.MockTransport`` here)
            **client_kwargs: Additional kwargs for the owned AsyncClient
        """
        super().__init__()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            transport=transport,
            timeout=None,
            **client_kwargs
        )

    async def execute(self, descriptor: RequestDescriptor) -> RelayResult:
        method = descriptor.method.value
        self._debug("info", f"Calling LM Studio API: {descriptor.endpoint} {method}")

        content = None
        if descriptor.body is not None:
            content = json.dumps(descriptor.body)

        try:
            response = await self._client.request(
                method,
                descriptor.endpoint,
                headers=JSON_HEADERS,
                content=content,
            )
        except httpx.HTTPError as e:
            self._debug("error", f"API call failed: {e!r}")
            raise NetworkError(str(e) or type(e).__name__) from e

        if not response.is_success:
            self._debug("error", f"API call failed: status {response.status_code}")
            raise TransportError(response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            self._debug("error", f"API call failed: undecodable body ({e})")
            raise ProtocolError(str(e)) from e

        self._debug("debug", f"Received {len(response.content)} bytes from {descriptor.endpoint}")
        return RelayResult(kind="json", data=data)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
