"""Connection configuration for the language-model server.

Hides how connection parameters are represented, normalized and
turned into endpoint URLs.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "http://localhost:1234"
DEFAULT_MODEL = "local-model"

CHAT_COMPLETIONS_PATH = "v1/chat/completions"
MODELS_PATH = "v1/models"


def build_endpoint(base_url: str, suffix: str) -> str:
    """Join a base URL and an API path without doubling the separator.

    Args:
        base_url: Server root, with or without a trailing slash
        suffix: API path such as ``v1/models``

    Returns:
        Fully-qualified endpoint URL
    """
    if base_url.endswith("/"):
        return f"{base_url}{suffix}"
    return f"{base_url}/{suffix}"


class ChatConfig(BaseModel):
    """Connection parameters for the local language-model server."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        alias="baseUrl",
        description="Root URL of the OpenAI-compatible server",
    )
    model: str = Field(
        default=DEFAULT_MODEL,
        description="Model identifier sent with each chat request",
    )

    def normalized(self) -> "ChatConfig":
        """Trim both fields and substitute defaults for blank ones."""
        return ChatConfig(
            base_url=self.base_url.strip() or DEFAULT_BASE_URL,
            model=self.model.strip() or DEFAULT_MODEL,
        )

    @classmethod
    def from_persisted(cls, data: Any) -> "ChatConfig":
        """Build a configuration from a decoded persisted object.

        Missing, blank or non-string fields fall back to their defaults, and
        the rest are trimmed.

        Raises:
            ValueError: If ``data`` is not a JSON object
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

        base_url = data.get("baseUrl")
        model = data.get("model")
        return cls(
            base_url=base_url if isinstance(base_url, str) else "",
            model=model if isinstance(model, str) else "",
        ).normalized()

    def to_persisted(self) -> dict[str, str]:
        """Serialize to the persisted ``{baseUrl, model}`` object."""
        return self.model_dump(by_alias=True)

    @property
    def chat_completions_url(self) -> str:
        return build_endpoint(self.base_url, CHAT_COMPLETIONS_PATH)

    @property
    def models_url(self) -> str:
        return build_endpoint(self.base_url, MODELS_PATH)


DEFAULT_CONFIG = ChatConfig()
