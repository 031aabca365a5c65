from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from .models import RelayResult, RequestDescriptor


class Bridge(ABC):
    """The single channel between the conversation side and the relay.

    This module hides where the relay actually runs (same process or a
    separate one). A bridge exposes exactly one verb, ``invoke``, and
    passes descriptors and results through untouched: no inspection,
    no rewriting, no queueing.

    Supports async context manager protocol for proper resource cleanup:
        async with create_bridge("process") as bridge:
            result = await bridge.invoke(descriptor)
    """

    def __init__(self) -> None:
        self._debug_callback: Callable[[str, str, str], None] | None = None

    def set_debug_callback(self, callback: Callable[[str, str, str], None] | None) -> None:
        """Route trace messages as ``callback(level, component, message)``."""
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, "Bridge", message)

    @abstractmethod
    async def invoke(self, descriptor: RequestDescriptor) -> RelayResult:
        """Hand a descriptor to the relay and await its result.

        Raises:
            Exception: Whatever the relay raised, unchanged
        """

    @abstractmethod
    async def close(self) -> None:
        """Release the relay and anything hosting it."""

    async def __aenter__(self) -> "Bridge":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
