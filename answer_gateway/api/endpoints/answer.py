"""
Answer endpoint.

Forwards a conversation to OpenAI and returns the completion in a uniform envelope.
"""
from fastapi import APIRouter, Depends, Request, status

from answer_gateway.api.models import AnswerRequest, AnswerResponse
from answer_gateway.controllers.answer_controller import AnswerController

# ============================================================================
# Dependency Injection
# ============================================================================


def get_answer_controller(http_request: Request) -> AnswerController:
    """Dependency injection for AnswerController, configured from app settings."""
    settings = http_request.app.state.settings
    return AnswerController(base_url=settings.openai_base_url)


# ============================================================================
# Router
# ============================================================================

router = APIRouter()


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/answer",
    status_code=status.HTTP_200_OK,
    response_model=AnswerResponse,
)
async def answer(
    request: AnswerRequest,
    controller: AnswerController = Depends(get_answer_controller),
) -> AnswerResponse:
    """
    Forward a chat completion request upstream.

    Always responds 200. Failures (empty messages, upstream errors, timeouts)
    are reported through success=false and the error field.
    """
    outcome = await controller.handle_answer(request)
    return AnswerResponse.from_outcome(outcome)
