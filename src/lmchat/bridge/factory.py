from typing import Any

from .base import Bridge


def create_bridge(kind: str = "process", **config: Any) -> Bridge:
    """Create a bridge to the network relay.

    This factory function hides where the relay runs.

    Args:
        kind: Bridge type ('process' or 'inprocess')
        **config: Bridge-specific configuration
            For process:
                - max_workers: int (default: 1)
            For inprocess:
                - relay: Relay (default: a fresh HttpRelay)

    Returns:
        Initialized bridge instance

    Raises:
        ValueError: If bridge type is not supported

    Examples:
        >>> bridge = create_bridge("process")

        >>> bridge = create_bridge("inprocess", relay=HttpRelay())
    """
    kind_lower = kind.lower()

    if kind_lower == "process":
        from .process import ProcessBridge
        return ProcessBridge(**config)

    if kind_lower in ("inprocess", "in-process"):
        from .in_process import InProcessBridge
        relay = config.pop("relay", None)
        if relay is None:
            from ..relay.http import HttpRelay
            relay = HttpRelay()
        return InProcessBridge(relay, **config)

    raise ValueError(
        f"Unsupported bridge: {kind}. "
        f"Supported bridges: 'process', 'inprocess'"
    )
