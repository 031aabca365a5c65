"""Bridge module for lmchat.

The narrow channel through which the conversation side reaches the
network relay. Exposes a single verb: ``invoke(descriptor)``.
"""

from .models import HttpMethod, RelayResult, RequestDescriptor
from .base import Bridge
from .factory import create_bridge
from .in_process import InProcessBridge
from .process import ProcessBridge

__all__ = [
    "Bridge",
    "HttpMethod",
    "InProcessBridge",
    "ProcessBridge",
    "RelayResult",
    "RequestDescriptor",
    "create_bridge",
]
