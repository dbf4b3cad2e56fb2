"""
Album Service Backend: Access Log Middleware
============================================

What:  One line per album request on the `album_api.access` logger.
How:   Times the downstream call, then reads which album operation served it
       from the routed scope.

Example lines:
    GET /albums/2 200 0.4ms get_album album=2 [a1b2c3d4] from 127.0.0.1
    POST /albums 500 1.2ms add_album [a1b2c3d4] from 127.0.0.1

Request bodies are never logged; a rejected POST is described by the
decode-error handler in main.py instead.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from album_api.middleware.request_id import request_id_var

logger = logging.getLogger("album_api.access")

# Probes hit these every few seconds
SKIPPED_PATHS = {"/health"}


def operation_name(request: Request) -> str:
    """Name of the route handler that served the request, or "-" if unrouted."""
    endpoint = request.scope.get("endpoint")
    return getattr(endpoint, "__name__", "-")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each album request with its operation, status and duration.

    Level follows the status class, so a missing album (404) shows up as a
    WARNING and a rejected payload (500) as an ERROR.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in SKIPPED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        operation = operation_name(request)
        album_id = (request.scope.get("path_params") or {}).get("album_id")
        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")

        logger.log(
            log_level,
            "%s %s %d %.1fms %s%s [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            operation,
            f" album={album_id}" if album_id is not None else "",
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "operation": operation,
                "album_id": album_id,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )

        return response
