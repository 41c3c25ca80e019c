"""
Request logging middleware.
Logs HTTP requests and responses for monitoring and debugging.
"""
import json
import logging
import time
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

SENSITIVE_FIELDS = {"api_key", "password", "token", "secret"}
REDACTED = "***REDACTED***"


def redact(body_data):
    """Mask sensitive top-level fields of a JSON body."""
    if isinstance(body_data, dict):
        return {
            k: REDACTED if k.lower() in SENSITIVE_FIELDS else v
            for k, v in body_data.items()
        }
    return body_data


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses."""

    def __init__(self, app, ignore_paths: tuple = ()):
        super().__init__(app)
        self.ignore_paths = ignore_paths or (
            "/ping",
            "/docs",
            "/openapi.json",
            "/redoc",
            "/favicon.ico",
        )

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.ignore_paths:
            return await call_next(request)

        start_time = time.time()

        request_log = {
            "type": "request",
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client_ip": self._get_client_ip(request),
            "user_agent": request.headers.get("user-agent"),
            "timestamp": start_time,
        }

        if request.method in ("POST", "PUT", "PATCH", "DELETE"):
            body = await self._get_request_body(request)
            if body:
                request_log["body"] = body

        logger.info(json.dumps(request_log))

        response = await call_next(request)

        process_time = time.time() - start_time

        response_log = {
            "type": "response",
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "process_time_ms": round(process_time * 1000, 2),
            "client_ip": self._get_client_ip(request),
            "timestamp": time.time(),
        }

        # Log level based on status code
        if response.status_code >= 500:
            logger.error(json.dumps(response_log))
        elif response.status_code >= 400:
            logger.warning(json.dumps(response_log))
        else:
            logger.info(json.dumps(response_log))

        response.headers["X-Process-Time"] = str(process_time)

        return response

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address from request."""
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()

        real_ip = request.headers.get("x-real-ip")
        if real_ip:
            return real_ip

        if request.client:
            return request.client.host

        return "unknown"

    async def _get_request_body(self, request: Request) -> Optional[dict]:
        """
        Safely extract and parse request body with sensitive fields redacted.
        Returns None if body cannot be read or parsed.
        """
        try:
            body_bytes = await request.body()
            if not body_bytes:
                return None
            return redact(json.loads(body_bytes.decode("utf-8")))
        except (UnicodeDecodeError, ValueError):
            # Malformed bodies are rejected downstream
            return None
