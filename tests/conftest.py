"""Pytest configuration and shared fixtures."""
import asyncio
import os
from typing import Any

import pytest

from lmchat.bridge import Bridge, RelayResult, RequestDescriptor
from lmchat.config import InMemoryConfigStore
from lmchat.conversation import ConversationController


class FakeBridge(Bridge):
    """Scripted bridge: records descriptors, replays queued outcomes.

    Each queued outcome is either data (wrapped in a JSON RelayResult),
    a RelayResult, or an exception instance to raise. Setting ``gate``
    holds every invoke until the event is set.
    """

    def __init__(self, *outcomes: Any) -> None:
        super().__init__()
        self.outcomes = list(outcomes)
        self.descriptors: list[RequestDescriptor] = []
        self.gate: asyncio.Event | None = None
        self.closed = False

    async def invoke(self, descriptor: RequestDescriptor) -> RelayResult:
        self.descriptors.append(descriptor)
        if self.gate is not None:
            await self.gate.wait()
        outcome = self.outcomes.pop(0) if self.outcomes else {}
        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, RelayResult):
            return outcome
        return RelayResult(kind="json", data=outcome)

    async def close(self) -> None:
        self.closed = True


def chat_reply(content: Any) -> dict[str, Any]:
    """Chat-completions body with a single choice."""
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.fixture(scope="session")
def live_server_url():
    """Base URL of a live server for integration tests."""
    return os.getenv("LMCHAT_TEST_BASE_URL", "http://localhost:1234")


@pytest.fixture
def store():
    return InMemoryConfigStore()


@pytest.fixture
def bridge():
    return FakeBridge()


@pytest.fixture
def controller(bridge, store):
    return ConversationController(bridge, store)
