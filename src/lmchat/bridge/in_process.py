"""Bridge that calls a relay living in the same process.

Used when no real privilege separation is needed, and in tests where
the relay is replaced by a fake.
"""

from typing import TYPE_CHECKING

from .base import Bridge
from .models import RelayResult, RequestDescriptor

if TYPE_CHECKING:
    from ..relay.base import Relay


class InProcessBridge(Bridge):
    """Direct pass-through to a relay object."""

    def __init__(self, relay: "Relay") -> None:
        super().__init__()
        self._relay = relay

    def set_debug_callback(self, callback) -> None:
        super().set_debug_callback(callback)
        if hasattr(self._relay, "set_debug_callback"):
            self._relay.set_debug_callback(callback)

    async def invoke(self, descriptor: RequestDescriptor) -> RelayResult:
        self._debug("debug", f"invoke {descriptor.method.value} {descriptor.endpoint}")
        return await self._relay.execute(descriptor)

    async def close(self) -> None:
        await self._relay.close()
