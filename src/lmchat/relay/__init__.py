from .base import DebugCallback, Relay
from .errors import NetworkError, ProtocolError, RelayError, TransportError
from .http import HttpRelay

__all__ = [
    "DebugCallback",
    "HttpRelay",
    "NetworkError",
    "ProtocolError",
    "Relay",
    "RelayError",
    "TransportError",
]
