"""
ScholarHub Backend — Request Logging Middleware
=================================================

What:  One log record per HTTP request: method, path, query string, path
       parameters, request body, status and duration.
How:   Reads (and caches) the body before the handler runs, lets the
       request through, then logs once the response is ready. Path
       parameters are only known after routing, so they are read from the
       scope afterwards.
When:  Runs inside RequestIDMiddleware, so every record carries the id.

Log line:
    POST /scholarships 200 12.3ms [a1b2c3d4] query={} params={} body={"university_name": ...}

Levels follow the status class: 5xx ERROR, 4xx WARNING, otherwise INFO,
except successful liveness checks (/ and /health), which log at DEBUG.
Bodies longer than settings.log_body_max_chars are truncated; the
Authorization header is never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.middleware.request_id import request_id_var

logger = logging.getLogger("scholarhub.access")

# Liveness checks are polled constantly; their successes log at DEBUG
QUIET_PATHS = {"/", "/health"}


def _truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}...(+{len(text) - limit} chars)"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs request details and outcome for every request."""

    def __init__(self, app: ASGIApp, body_max_chars: int = 2048):
        super().__init__(app)
        self.body_max_chars = body_max_chars

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        start_time = time.perf_counter()
        method = request.method
        rid = request_id_var.get("")
        client_ip = request.client.host if request.client else "unknown"
        query = dict(request.query_params)

        raw_body = await request.body()
        body = _truncate(raw_body.decode("utf-8", errors="replace"), self.body_max_chars)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        params = request.scope.get("path_params", {})

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        elif path in QUIET_PATHS:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] query=%s params=%s body=%s",
            method,
            path,
            status,
            duration_ms,
            rid,
            query,
            params,
            body or "{}",
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "query": query,
                "path_params": params,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response
