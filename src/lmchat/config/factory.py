"""Factory for creating configuration stores."""

from typing import Any

from .base import ConfigStore


def create_config_store(backend: str = "file", **kwargs: Any) -> ConfigStore:
    """Create a configuration store.

    Args:
        backend: Store type ("file" or "memory")
        **kwargs: Backend-specific configuration
            For file:
                - path: str | Path (default: ~/.config/lmchat/settings.json)
                - key: str (default: 'lm_studio_config')
            For memory:
                - initial: ChatConfig | None
                - fail_saves: bool

    Returns:
        ConfigStore instance

    Raises:
        ValueError: If backend type is not supported
    """
    if backend == "file":
        from .json_file import JsonFileConfigStore
        return JsonFileConfigStore(**kwargs)

    elif backend == "memory":
        from .in_memory import InMemoryConfigStore
        return InMemoryConfigStore(**kwargs)

    raise ValueError(
        f"Unsupported config store: {backend}. "
        f"Supported backends: file, memory"
    )
