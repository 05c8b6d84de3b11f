"""Request logging middleware for FastAPI.

Logs every request with method, path, status and duration. Relay failures
show up here as 5xx lines alongside the service-level error log.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("vote_tracker.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """ASGI middleware that logs one line per request.

    4xx responses log at WARNING, 5xx at ERROR, everything else at INFO.
    """

    def _format_path(self, request: Request) -> str:
        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        return path

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process the request and log its outcome."""
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = (time.monotonic() - start) * 1000

        status = response.status_code
        if status >= 500:
            log = logger.error
        elif status >= 400:
            log = logger.warning
        else:
            log = logger.info

        log(
            "%s %s -> %d (%.0fms)",
            request.method,
            self._format_path(request),
            status,
            duration_ms,
        )
        return response
