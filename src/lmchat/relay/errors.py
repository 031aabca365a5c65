"""Relay error taxonomy.

Every error carries its final message in ``args`` and rebuilds itself
from its constructor arguments, so it survives pickling across the
process bridge.
"""


class RelayError(Exception):
    """Base class for relay failures."""


class TransportError(RelayError):
    """The server answered with a non-success HTTP status."""

    def __init__(self, status: int):
        super().__init__(f"HTTP error! status: {status}")
        self.status = status

    def __reduce__(self):
        return (type(self), (self.status,))


class ProtocolError(RelayError):
    """The server answered successfully but the body is not usable JSON."""

    def __init__(self, message: str):
        super().__init__(f"Invalid response: {message}")
        self.detail = message

    def __reduce__(self):
        return (type(self), (self.detail,))


class NetworkError(RelayError):
    """The request never produced a response (refused, DNS, reset)."""

    def __init__(self, message: str):
        super().__init__(f"Network error: {message}")
        self.detail = message

    def __reduce__(self):
        return (type(self), (self.detail,))
