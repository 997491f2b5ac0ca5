"""
Tuiter Backend — Request ID Middleware
========================================

Every request carries a correlation id: the client's X-Request-ID when it is
a plausible token, a fresh 8-character id otherwise. The id is exposed
through `request_id_var` to log lines and error bodies, and echoed in the
X-Request-ID response header.
"""

import re
import uuid
from contextvars import ContextVar
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

HEADER = "X-Request-ID"

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

_VALID_ID = re.compile(r"^[A-Za-z0-9._-]{1,64}$")


def accept_request_id(candidate: Optional[str]) -> str:
    """Returns `candidate` if it is safe to log and echo, else a new id."""
    if candidate and _VALID_ID.match(candidate):
        return candidate
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = accept_request_id(request.headers.get(HEADER))
        # Left set after an unhandled error: the outermost 500 handler reads it
        request_id_var.set(rid)
        request.state.request_id = rid
        response = await call_next(request)
        response.headers[HEADER] = rid
        return response
