# File: users_api/core/logging.py

"""
Logging setup for the API process.

Handlers log through module level loggers; configure_logging() wires a
single stream handler on the package logger so uvicorn's own loggers are
left alone.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger("users_api.access")


def configure_logging(level: str = "INFO") -> logging.Logger:
    root = logging.getLogger("users_api")
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level.upper())
    return root


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One log line per request: method, path, status and duration."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %d %.2fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response
