"""Connection configuration module for lmchat.

Provides the configuration model and the store that persists it.
"""

from .base import (
    CONFIG_STORAGE_KEY,
    ConfigError,
    ConfigLoadError,
    ConfigPersistenceError,
    ConfigStore,
)
from .factory import create_config_store
from .in_memory import InMemoryConfigStore
from .json_file import JsonFileConfigStore
from .models import (
    CHAT_COMPLETIONS_PATH,
    DEFAULT_BASE_URL,
    DEFAULT_CONFIG,
    DEFAULT_MODEL,
    MODELS_PATH,
    ChatConfig,
    build_endpoint,
)

__all__ = [
    "CHAT_COMPLETIONS_PATH",
    "CONFIG_STORAGE_KEY",
    "ChatConfig",
    "ConfigError",
    "ConfigLoadError",
    "ConfigPersistenceError",
    "ConfigStore",
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG",
    "DEFAULT_MODEL",
    "InMemoryConfigStore",
    "JsonFileConfigStore",
    "MODELS_PATH",
    "build_endpoint",
    "create_config_store",
]
