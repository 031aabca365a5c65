from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from ..bridge.models import RelayResult, RequestDescriptor

DebugCallback = Callable[[str, str, str], None]


class Relay(ABC):
    """Abstract base class for the privileged network relay.

    This module hides the design decision of how outbound calls are made.
    Implementations must:
    - Perform the request exactly as described (no rewriting)
    - Map non-success statuses to TransportError
    - Map undecodable bodies to ProtocolError
    - Never retry, cache or impose their own timeout

    Supports async context manager protocol:
        async with HttpRelay() as relay:
            result = await relay.execute(descriptor)
    """

    def __init__(self) -> None:
        self._debug_callback: DebugCallback | None = None

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Route trace messages as ``callback(level, component, message)``."""
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, "Relay", message)

    @abstractmethod
    async def execute(self, descriptor: RequestDescriptor) -> RelayResult:
        """Perform one HTTP call.

        Args:
            descriptor: Target URL, method and optional JSON body

        Returns:
            RelayResult tagged as JSON with the decoded body

        Raises:
            RelayError: TransportError, ProtocolError or NetworkError
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections."""

    async def __aenter__(self) -> "Relay":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
