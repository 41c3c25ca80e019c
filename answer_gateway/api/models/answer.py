"""
Request and response models for the answer endpoint.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, SecretStr


class Role(str, Enum):
    """Conversation roles accepted by the upstream chat API."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    FUNCTION = "function"


class ChatMessage(BaseModel):
    """A single conversation turn."""

    role: Role
    content: str


class AnswerRequest(BaseModel):
    """Payload for a chat completion forwarded upstream.

    - api_key: caller's OpenAI key, used once as the bearer credential
    - timeout: seconds allotted to the upstream call (defaults to 120)
    - messages: conversation in order; an empty list is rejected by the controller
    """

    api_key: SecretStr
    model: str = Field(..., examples=["gpt-3.5-turbo"])
    max_tokens: int
    temperature: float
    timeout: Optional[int] = None
    messages: List[ChatMessage]


@dataclass(frozen=True)
class AnswerSuccess:
    """Upstream call completed; result is the full completion object."""

    result: Dict[str, Any]


@dataclass(frozen=True)
class AnswerFailure:
    """Request failed before or during the upstream call."""

    error: str


AnswerOutcome = Union[AnswerSuccess, AnswerFailure]


class AnswerResponse(BaseModel):
    """Envelope returned for every answer request.

    Exactly one of openai_answer/error is set, selected by success.
    """

    success: bool
    openai_answer: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @classmethod
    def from_outcome(cls, outcome: AnswerOutcome) -> "AnswerResponse":
        if isinstance(outcome, AnswerSuccess):
            return cls(success=True, openai_answer=outcome.result)
        return cls(success=False, error=outcome.error)
