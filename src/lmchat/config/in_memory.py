"""In-memory configuration store.

Session-only storage; nothing survives the process.
"""

from .base import ConfigPersistenceError, ConfigStore
from .models import ChatConfig


class InMemoryConfigStore(ConfigStore):
    """Single-slot configuration store.

    Suitable for tests and throwaway sessions. ``fail_saves`` makes every
    save raise, which is how a read-only location behaves.
    """

    def __init__(self, initial: ChatConfig | None = None, fail_saves: bool = False):
        self._config = initial
        self.fail_saves = fail_saves
        self.save_count = 0

    def load(self) -> ChatConfig | None:
        return self._config

    def save(self, config: ChatConfig) -> None:
        if self.fail_saves:
            raise ConfigPersistenceError("storage is read-only")
        self._config = config
        self.save_count += 1

    def remove(self) -> None:
        self._config = None

    @property
    def location(self) -> str:
        return "memory"
