"""Data models for the conversation transcript.

Hides the internal representation of transcript entries.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from uuid_extensions import uuid7str


class Role(str, Enum):
    """Who authored a transcript entry."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """One transcript entry. Never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        default_factory=uuid7str,
        description="Time-ordered unique identifier (UUIDv7)"
    )
    role: Role = Field(description="Author of the message")
    content: str = Field(description="Message text, preserved verbatim")
    timestamp: datetime = Field(default_factory=datetime.now)

    def to_payload(self) -> dict[str, str]:
        """Wire form for the chat-completions request (no id, no timestamp)."""
        return {"role": self.role.value, "content": self.content}
