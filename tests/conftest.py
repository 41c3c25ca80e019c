"""
Shared fixtures: a fake OpenAI client that records calls instead of using the network.
"""
import asyncio
from typing import Any, Dict, List, Optional

import pytest
from openai.types.chat import ChatCompletion

COMPLETION: Dict[str, Any] = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "gpt-3.5-turbo",
    "choices": [
        {
            "index": 0,
            "finish_reason": "stop",
            "message": {"role": "assistant", "content": "Hello! How can I help?"},
        }
    ],
    "usage": {"prompt_tokens": 8, "completion_tokens": 7, "total_tokens": 15},
}


class FakeCompletions:
    def __init__(self, owner: "FakeOpenAI"):
        self.owner = owner

    async def create(self, **kwargs):
        self.owner.calls.append(kwargs)
        if self.owner.delay:
            await asyncio.sleep(self.owner.delay)
        if self.owner.error is not None:
            raise self.owner.error
        return ChatCompletion.model_validate(COMPLETION)


class FakeChat:
    def __init__(self, owner: "FakeOpenAI"):
        self.completions = FakeCompletions(owner)


class FakeOpenAI:
    """Stands in for AsyncOpenAI; only chat.completions.create and close are used."""

    def __init__(self, delay: float = 0, error: Optional[Exception] = None):
        self.delay = delay
        self.error = error
        self.calls: List[Dict[str, Any]] = []
        self.factory_args: List[tuple] = []
        self.closed = False
        self.chat = FakeChat(self)

    def factory(self, api_key: str, timeout: float) -> "FakeOpenAI":
        self.factory_args.append((api_key, timeout))
        return self

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_openai() -> FakeOpenAI:
    return FakeOpenAI()


@pytest.fixture
def answer_payload() -> Dict[str, Any]:
    return {
        "api_key": "sk-test-secret",
        "model": "gpt-3.5-turbo",
        "max_tokens": 10,
        "temperature": 0,
        "messages": [{"role": "user", "content": "hello"}],
    }
