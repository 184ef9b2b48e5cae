"""
FoodHub Backend — Request Logging Middleware
==============================================

What:  One access-log line per HTTP request, written to the
       "foodhub.access" logger.
How:   Times the downstream call and logs method, path, status, duration,
       request id and client address. Severity follows the status code
       (5xx ERROR, 4xx WARNING, otherwise INFO).

Example line:
    2024-01-15T12:00:00 [INFO] foodhub.access: GET /api/food 200 12.4ms [a1b2c3d4] from 10.0.0.7

Never logged: request bodies (passwords, tokens) and the Authorization header.
Health checks and static upload downloads are skipped.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from foodhub.middleware.request_id import request_id_var

logger = logging.getLogger("foodhub.access")

QUIET_PATH_PREFIXES = ("/health", "/uploads/")


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
        path = request.url.path
        if path.startswith(QUIET_PATH_PREFIXES):
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        status = response.status_code

        logger.log(
            _level_for(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
