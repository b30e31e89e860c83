"""
car_registry.observability.middleware

HTTP middleware for request-scoped logging context and timing.

Responsibilities:
- Generate/propagate request IDs.
- Bind request metadata into structlog contextvars.
- Log one `request_completed` event per request with its duration.
"""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from car_registry.observability.logging import get_logger

log = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    - Ensures every request has a request id
    - Binds request-scoped contextvars for structured logs
    - Times every request end to end
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        # Prefer a caller-provided request id for trace continuity; otherwise generate one.
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        started = time.perf_counter()
        try:
            response: Response = await call_next(request)
            log.info(
                "request_completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 3),
            )
        finally:
            # Avoid leaking context across requests under async concurrency.
            structlog.contextvars.clear_contextvars()

        response.headers["x-request-id"] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# Unhandled errors are not logged here; they propagate to Starlette's
# ServerErrorMiddleware which renders the 500.
