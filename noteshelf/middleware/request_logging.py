"""
Request logging middleware for NoteShelf.
Logs every request and flags error responses.
"""

import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from loguru import logger

from .. import config


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log method, path, status and duration for all requests."""

    async def dispatch(self, request: Request, call_next):
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        if 400 <= response.status_code < 600:
            logger.warning(
                f"Response: {response.status_code} {method} {path} | "
                f"Client: {client_ip} | {elapsed_ms:.1f} ms"
            )
        elif config.REQUEST_LOGGING_ENABLED:
            logger.info(
                f"Request: {method} {path} -> {response.status_code} | "
                f"Client: {client_ip} | {elapsed_ms:.1f} ms"
            )

        return response
