"""
Middleware for the resource gateway.

- CORSHeadersMiddleware: static CORS headers on every response, and the
  OPTIONS preflight short-circuit.
- RequestLoggingMiddleware: request ID propagation, timing, slow-request
  warnings.
"""

import logging
import time
from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Stamp the configured CORS headers on every response.

    Unlike Starlette's CORSMiddleware the headers do not depend on the
    request carrying an Origin header: error responses, routing 404/405s
    and preflights all get the same set.
    """

    def __init__(self, app: ASGIApp, headers: dict[str, str]) -> None:
        super().__init__(app)
        self.headers = headers

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            # Preflight: empty body, CORS headers only
            return Response(status_code=200, headers=self.headers)

        response = await call_next(request)
        response.headers.update(self.headers)
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log request start/completion with a request ID."""

    def __init__(self, app: ASGIApp, slow_request_ms: int = 1000) -> None:
        super().__init__(app)
        self.slow_request_ms = slow_request_ms

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()

        logger.info(f"[{request_id}] {request.method} {request.url.path} started")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"[{request_id}] {request.method} {request.url.path} "
            f"-> {response.status_code} ({duration_ms:.0f}ms)"
        )
        if duration_ms > self.slow_request_ms:
            logger.warning(
                f"[{request_id}] Slow request: {request.method} {request.url.path} "
                f"took {duration_ms:.0f}ms"
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
