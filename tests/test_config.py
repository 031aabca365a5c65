"""Unit tests for the config module."""
import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lmchat.config import (
    CONFIG_STORAGE_KEY,
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    ChatConfig,
    ConfigLoadError,
    ConfigPersistenceError,
    InMemoryConfigStore,
    JsonFileConfigStore,
    build_endpoint,
    create_config_store,
)


class TestChatConfig:
    """Tests for the ChatConfig model."""

    def test_defaults(self):
        config = ChatConfig()
        assert config.base_url == "http://localhost:1234"
        assert config.model == "local-model"
        assert config.chat_completions_url == "http://localhost:1234/v1/chat/completions"
        assert config.models_url == "http://localhost:1234/v1/models"

    def test_trailing_slash_is_not_doubled(self):
        config = ChatConfig(base_url="http://host:8080/")
        assert config.chat_completions_url == "http://host:8080/v1/chat/completions"
        assert config.models_url == "http://host:8080/v1/models"

    @given(st.text(alphabet="abcdefghijklmnopqrstuvwxyz:/.0123456789", min_size=1))
    def test_endpoint_has_single_separator(self, base_url: str):
        """Property test: Exactly one separator is added, and only when missing."""
        endpoint = build_endpoint(base_url, "v1/models")
        assert endpoint.startswith(base_url)
        joined = endpoint[len(base_url):]
        assert joined == ("v1/models" if base_url.endswith("/") else "/v1/models")

    def test_normalized_trims_and_defaults(self):
        config = ChatConfig(base_url="  http://x  ", model="   ").normalized()
        assert config == ChatConfig(base_url="http://x", model=DEFAULT_MODEL)

    def test_config_is_frozen(self):
        with pytest.raises(Exception):
            ChatConfig().model = "other"  # type: ignore

    def test_persisted_form_uses_camel_case(self):
        assert ChatConfig(base_url="http://x", model="m").to_persisted() == {
            "baseUrl": "http://x",
            "model": "m",
        }

    @pytest.mark.parametrize(
        "data, expected",
        [
            ({"baseUrl": "http://x", "model": "m"}, ChatConfig(base_url="http://x", model="m")),
            ({"model": "m"}, ChatConfig(base_url=DEFAULT_BASE_URL, model="m")),
            ({"baseUrl": "", "model": 7}, ChatConfig()),
            ({"baseUrl": "   ", "model": " m "}, ChatConfig(base_url=DEFAULT_BASE_URL, model="m")),
            ({"baseUrl": " http://x/ ", "model": "\t"}, ChatConfig(base_url="http://x/", model=DEFAULT_MODEL)),
            ({}, ChatConfig()),
        ],
    )
    def test_from_persisted_fills_gaps(self, data, expected):
        assert ChatConfig.from_persisted(data) == expected

    @pytest.mark.parametrize("data", [None, "text", [1, 2], 3])
    def test_from_persisted_rejects_non_objects(self, data):
        with pytest.raises(ValueError):
            ChatConfig.from_persisted(data)


class TestJsonFileConfigStore:
    """Tests for JsonFileConfigStore."""

    def test_load_missing_file_returns_none(self, tmp_path):
        store = JsonFileConfigStore(tmp_path / "settings.json")
        assert store.load() is None

    def test_save_then_load(self, tmp_path):
        path = tmp_path / "nested" / "settings.json"
        store = JsonFileConfigStore(path)

        store.save(ChatConfig(base_url="http://x", model="m"))

        assert json.loads(path.read_text()) == {
            CONFIG_STORAGE_KEY: {"baseUrl": "http://x", "model": "m"}
        }
        assert store.load() == ChatConfig(base_url="http://x", model="m")

    def test_other_keys_survive_save_and_remove(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"theme": "dark"}))
        store = JsonFileConfigStore(path)

        store.save(ChatConfig())
        store.remove()

        assert json.loads(path.read_text()) == {"theme": "dark"}

    def test_remove_deletes_empty_document(self, tmp_path):
        path = tmp_path / "settings.json"
        store = JsonFileConfigStore(path)
        store.save(ChatConfig())

        store.remove()

        assert not path.exists()
        store.remove()

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", json.dumps({CONFIG_STORAGE_KEY: "x"})])
    def test_malformed_content_raises_load_error(self, tmp_path, content):
        path = tmp_path / "settings.json"
        path.write_text(content)

        with pytest.raises(ConfigLoadError, match="Failed to load settings"):
            JsonFileConfigStore(path).load()

    def test_save_replaces_damaged_document(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        store = JsonFileConfigStore(path)

        store.save(ChatConfig(model="m"))

        assert store.load() == ChatConfig(model="m")

    def test_unwritable_location_raises_persistence_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        store = JsonFileConfigStore(blocker / "settings.json")

        with pytest.raises(ConfigPersistenceError, match="Failed to save settings"):
            store.save(ChatConfig())

    def test_custom_key(self, tmp_path):
        path = tmp_path / "settings.json"
        store = JsonFileConfigStore(path, key="profile")

        store.save(ChatConfig())

        assert "profile" in json.loads(path.read_text())
        assert "profile" in store.location


class TestInMemoryConfigStore:
    def test_round_trip_and_remove(self):
        store = InMemoryConfigStore()
        store.save(ChatConfig(model="m"))
        assert store.load() == ChatConfig(model="m")
        assert store.save_count == 1

        store.remove()
        assert store.load() is None

    def test_failing_saves(self):
        store = InMemoryConfigStore(fail_saves=True)
        with pytest.raises(ConfigPersistenceError):
            store.save(ChatConfig())
        assert store.load() is None


class TestConfigStoreFactory:
    """Tests for the create_config_store factory function."""

    def test_create_file_store(self, tmp_path):
        store = create_config_store("file", path=tmp_path / "s.json")
        assert isinstance(store, JsonFileConfigStore)
        assert store.path == tmp_path / "s.json"

    def test_create_memory_store(self):
        store = create_config_store("memory", initial=ChatConfig(model="m"))
        assert isinstance(store, InMemoryConfigStore)
        assert store.load().model == "m"

    def test_unknown_backend_raises(self):
        with pytest.raises(ValueError, match="Unsupported config store"):
            create_config_store("registry")


def test_blank_persisted_base_url_gives_default_endpoint(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({CONFIG_STORAGE_KEY: {"baseUrl": "   ", "model": "m"}}))

    config = JsonFileConfigStore(path).load()

    assert config.chat_completions_url == "http://localhost:1234/v1/chat/completions"
