"""Request logging with a per-request id."""

import time
import uuid

import structlog
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from structlog.contextvars import bind_contextvars, clear_contextvars

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag every log line of a request with its id and log one summary event.

    The id comes from the caller's ``X-Request-ID`` header when present and
    is echoed back on the response.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        clear_contextvars()
        bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        log = logger.error if response.status_code >= 500 else logger.info
        log(
            "request",
            method=request.method,
            path=request.url.path,
            query=request.url.query or None,
            status=response.status_code,
            duration_ms=elapsed_ms,
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
