"""
Tuiter Backend — Access Log Middleware
========================================

One line per request on the `tuiter.access` logger:

    GET /tuits/3f2a… (/tuits/{tid}) 200 1.4ms [a1b2c3d4]

The route template groups requests for different ids under one key; it is
"-" when no route matched (404 from routing). Level follows the status
class: 5xx ERROR, 4xx WARNING, else INFO. Bodies are never logged since user
passwords travel in them. /health is not logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from tuiter.middleware.request_id import request_id_var

logger = logging.getLogger("tuiter.access")

QUIET_PATHS = frozenset({"/health"})


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        route = request.scope.get("route")
        template = getattr(route, "path", "-")
        logger.log(
            _level_for(response.status_code),
            "%s %s (%s) %d %.1fms [%s]",
            request.method, request.url.path, template,
            response.status_code, elapsed_ms, request_id_var.get(),
            extra={
                "request_id": request_id_var.get(),
                "route": template,
                "status": response.status_code,
                "duration_ms": round(elapsed_ms, 2),
            },
        )
        return response
