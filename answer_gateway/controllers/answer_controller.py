"""
Controller for the answer endpoint.

Forwards a chat completion request to OpenAI with the caller's API key and
maps the outcome to an AnswerOutcome. Each call is bounded by a deadline.
"""
import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

import openai
from openai import AsyncOpenAI

from answer_gateway.api.models.answer import (
    AnswerFailure,
    AnswerOutcome,
    AnswerRequest,
    AnswerSuccess,
    ChatMessage,
)

logger = logging.getLogger(__name__)

# Bound applied when the request carries no usable timeout
DEFAULT_TIMEOUT_SECONDS = 120

ClientFactory = Callable[[str, float], AsyncOpenAI]


def resolve_timeout(timeout: Optional[int]) -> int:
    """Return the request timeout if it is a positive number of seconds, else the default."""
    if timeout is None or timeout <= 0:
        return DEFAULT_TIMEOUT_SECONDS
    return timeout


def translate_messages(messages: List[ChatMessage]) -> List[Dict[str, str]]:
    # Only role and content are forwarded; name and function-call data are not.
    return [{"role": m.role.value, "content": m.content} for m in messages]


class AnswerController:
    """Controller for upstream chat completion calls."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        """
        Initialize the controller.

        Args:
            base_url: Optional override of the OpenAI API base URL
            client_factory: Builds a client from (api_key, timeout). Defaults to AsyncOpenAI.
        """
        self.base_url = base_url
        self.client_factory = client_factory or self._default_client

    def _default_client(self, api_key: str, timeout: float) -> AsyncOpenAI:
        # Retries are disabled: exactly one outbound call per request.
        return AsyncOpenAI(
            api_key=api_key,
            base_url=self.base_url,
            timeout=timeout,
            max_retries=0,
        )

    async def handle_answer(self, request: AnswerRequest) -> AnswerOutcome:
        """
        Forward the request upstream and map the result.

        Args:
            request: AnswerRequest with key, model parameters and messages

        Returns:
            AnswerSuccess with the full completion, or AnswerFailure with a
            human-readable error. Never raises.
        """
        if not request.messages:
            return AnswerFailure(error="messages cannot be empty")

        timeout = resolve_timeout(request.timeout)
        logger.info(
            f"Forwarding completion: model={request.model} "
            f"messages={len(request.messages)} timeout={timeout}s"
        )

        try:
            completion = await self._create_completion(request, timeout)
        except (asyncio.TimeoutError, openai.APITimeoutError):
            logger.warning(f"Upstream call timed out after {timeout}s")
            return AnswerFailure(error=f"Request to OpenAI timed out after {timeout} seconds")
        except openai.APIStatusError as e:
            logger.warning(f"Upstream returned status {e.status_code}")
            return AnswerFailure(error=f"OpenAI API error ({e.status_code}): {e.message}")
        except openai.APIConnectionError as e:
            logger.warning(f"Upstream connection failed: {e}")
            return AnswerFailure(error=f"Could not reach OpenAI: {e}")
        except Exception as e:
            logger.error(f"Upstream call failed: {type(e).__name__}: {e}")
            return AnswerFailure(error=f"{type(e).__name__}: {e}")

        return AnswerSuccess(result=completion)

    async def _create_completion(self, request: AnswerRequest, timeout: int) -> Dict[str, Any]:
        client = self.client_factory(request.api_key.get_secret_value(), float(timeout))
        try:
            completion = await asyncio.wait_for(
                client.chat.completions.create(
                    model=request.model,
                    max_tokens=request.max_tokens,
                    temperature=request.temperature,
                    messages=translate_messages(request.messages),
                ),
                timeout=timeout,
            )
        finally:
            await client.close()

        return completion.model_dump(mode="json", exclude_unset=True)
