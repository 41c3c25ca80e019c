"""
Error handling middleware.
Catches faults that escape the endpoints and formats them as ErrorResponse.
"""
import logging
import traceback
from typing import Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.middleware.base import BaseHTTPMiddleware

from answer_gateway.api.models.error import ErrorResponse

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for centralized error handling and logging."""

    def __init__(self, app, is_production: bool = False):
        super().__init__(app)
        self.is_production = is_production

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)

        except ValidationError as e:
            logger.warning(
                "Validation error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "errors": e.errors(),
                },
            )
            content = ErrorResponse(
                error="Validation Error",
                message="Invalid input data",
                details={"errors": e.errors(include_input=False, include_context=False)},
            )
            return JSONResponse(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                content=content.model_dump(exclude_none=True),
            )

        except Exception as e:
            tb_str = traceback.format_exc()

            logger.error(
                "Unhandled error",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
                exc_info=True,
            )

            # Don't expose internal errors in production
            if self.is_production:
                content = ErrorResponse(
                    error="Internal Server Error",
                    message="An internal error occurred. Please try again later.",
                )
            else:
                content = ErrorResponse(
                    error="Internal Server Error",
                    message=f"{type(e).__name__}: {str(e)}",
                    traceback=tb_str,
                )

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=content.model_dump(exclude_none=True),
            )
