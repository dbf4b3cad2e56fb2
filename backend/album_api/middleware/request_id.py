"""
Album Service Backend: Request ID Middleware
============================================

What:  Tags every request with a correlation ID.
How:   Reuses a client-sent X-Request-ID or takes the first 8 characters of a
       UUID4, and echoes it in the X-Request-ID response header.

The ID is read back through `request_id_var` by the access log line, by the
not-found and decode-error log lines in main.py, and by the catch-all 500
body, so one `grep` finds everything a single album request did.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return str(uuid.uuid4())[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # An empty header counts as absent
        rid = request.headers.get("X-Request-ID") or new_request_id()
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        return response
