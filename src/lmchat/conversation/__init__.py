"""Conversation module for lmchat.

Owns the transcript and configuration and drives the user operations.
"""

from .controller import (
    EMPTY_RESPONSE_PLACEHOLDER,
    MAX_TOKENS,
    TEMPERATURE,
    ControllerEvent,
    ConversationController,
    extract_model_ids,
    extract_reply,
)
from .models import Message, Role

__all__ = [
    "ControllerEvent",
    "ConversationController",
    "EMPTY_RESPONSE_PLACEHOLDER",
    "MAX_TOKENS",
    "Message",
    "Role",
    "TEMPERATURE",
    "extract_model_ids",
    "extract_reply",
]
