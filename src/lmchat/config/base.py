"""Abstract base class for configuration stores.

This module defines the interface for persisting the connection
configuration. The abstraction hides:
- Storage location (file, memory)
- Serialization format
- How a missing or damaged copy is detected
"""

from abc import ABC, abstractmethod

from .models import ChatConfig

CONFIG_STORAGE_KEY = "lm_studio_config"


class ConfigError(Exception):
    """Base class for configuration persistence errors."""


class ConfigLoadError(ConfigError):
    """The persisted configuration exists but cannot be read."""

    def __init__(self, message: str):
        super().__init__(f"Failed to load settings: {message}")


class ConfigPersistenceError(ConfigError):
    """Writing or removing the persisted configuration failed."""

    def __init__(self, message: str):
        super().__init__(f"Failed to save settings: {message}")


class ConfigStore(ABC):
    """Persisted home of the single configuration key.

    The whole ``{baseUrl, model}`` object is written at once on save and
    removed at once on reset; it is never updated field by field.
    """

    @abstractmethod
    def load(self) -> ChatConfig | None:
        """Return the persisted configuration, or None if nothing is stored.

        Raises:
            ConfigLoadError: If stored content is malformed
        """

    @abstractmethod
    def save(self, config: ChatConfig) -> None:
        """Persist the configuration wholesale.

        Raises:
            ConfigPersistenceError: If the write fails
        """

    @abstractmethod
    def remove(self) -> None:
        """Delete the persisted configuration (no-op if absent).

        Raises:
            ConfigPersistenceError: If the deletion fails
        """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of where the configuration lives."""
