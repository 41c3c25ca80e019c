from .answer import (
    AnswerFailure,
    AnswerOutcome,
    AnswerRequest,
    AnswerResponse,
    AnswerSuccess,
    ChatMessage,
    Role,
)
from .error import ErrorResponse

__all__ = [
    "ErrorResponse",
    "AnswerRequest",
    "AnswerResponse",
    "AnswerOutcome",
    "AnswerSuccess",
    "AnswerFailure",
    "ChatMessage",
    "Role",
]
