"""JSON file configuration store.

Keeps the configuration under a single key of a small JSON document,
so other keys written by future versions survive a save or reset.
"""

import json
from pathlib import Path
from typing import Any

from .base import (
    CONFIG_STORAGE_KEY,
    ConfigLoadError,
    ConfigPersistenceError,
    ConfigStore,
)
from .models import ChatConfig

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "lmchat" / "settings.json"


class JsonFileConfigStore(ConfigStore):
    """File-backed configuration store.

    Document layout::

        {"lm_studio_config": {"baseUrl": "...", "model": "..."}}
    """

    def __init__(
        self,
        path: str | Path = DEFAULT_CONFIG_PATH,
        key: str = CONFIG_STORAGE_KEY,
    ):
        self._path = Path(path).expanduser()
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return f"{self._path} [{self._key}]"

    def _read_document(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigLoadError(f"{self._path}: {e}") from e
        if not isinstance(document, dict):
            raise ConfigLoadError(f"{self._path}: top-level value is not an object")
        return document

    def _write_document(self, document: dict[str, Any]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        except OSError as e:
            raise ConfigPersistenceError(f"{self._path}: {e}") from e

    def load(self) -> ChatConfig | None:
        document = self._read_document()
        if self._key not in document:
            return None
        try:
            return ChatConfig.from_persisted(document[self._key])
        except ValueError as e:
            raise ConfigLoadError(str(e)) from e

    def save(self, config: ChatConfig) -> None:
        try:
            document = self._read_document()
        except ConfigLoadError:
            # A damaged document is replaced rather than blocking the save
            document = {}
        document[self._key] = config.to_persisted()
        self._write_document(document)

    def remove(self) -> None:
        try:
            document = self._read_document()
        except ConfigLoadError:
            document = {}
        document.pop(self._key, None)

        if document:
            self._write_document(document)
            return

        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            raise ConfigPersistenceError(f"{self._path}: {e}") from e
