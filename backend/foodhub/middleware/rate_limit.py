"""
FoodHub Backend — Rate Limiting Middleware
============================================

What:  Per-client sliding window limit on API calls.
How:   Keeps a deque of request timestamps per client address. Timestamps
       older than RATE_LIMIT_WINDOW seconds are dropped on each request;
       if RATE_LIMIT_REQUESTS remain, the request is answered with 429 and
       a Retry-After header.

Scope:
    Only paths under /api are counted. Health checks, docs and static
    uploads are never limited.

The counters live in process memory, so each uvicorn worker enforces its
own limit.
"""

import logging
import time
from collections import defaultdict, deque
from typing import Deque, Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from foodhub.config import settings
from foodhub.middleware.request_id import request_id_var

logger = logging.getLogger(__name__)

LIMITED_PATH_PREFIX = "/api"

# Drop idle clients every this many admitted requests
_SWEEP_EVERY = 1000


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, **kwargs):
        super().__init__(app, **kwargs)
        self._hits: Dict[str, Deque[float]] = defaultdict(deque)
        self._admitted = 0

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not request.url.path.startswith(LIMITED_PATH_PREFIX):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.monotonic()
        window_start = now - settings.rate_limit_window

        hits = self._hits[client_ip]
        while hits and hits[0] <= window_start:
            hits.popleft()

        if len(hits) >= settings.rate_limit_requests:
            retry_after = int(hits[0] + settings.rate_limit_window - now) + 1
            logger.warning(
                "Rate limit exceeded for %s: %d requests in %ds",
                client_ip,
                len(hits),
                settings.rate_limit_window,
            )
            return JSONResponse(
                status_code=429,
                content={
                    "error": "rate_limit_exceeded",
                    "message": f"Too many requests. Please wait {retry_after} seconds before retrying.",
                    "details": {"retry_after": retry_after},
                    "request_id": request_id_var.get("") or None,
                },
                headers={"Retry-After": str(retry_after)},
            )

        hits.append(now)
        self._admitted += 1
        if self._admitted % _SWEEP_EVERY == 0:
            self._sweep(window_start)

        return await call_next(request)

    def _sweep(self, window_start: float) -> None:
        """Forget clients with no request inside the current window."""
        idle = [ip for ip, hits in self._hits.items() if not hits or hits[-1] <= window_start]
        for ip in idle:
            del self._hits[ip]
        if idle:
            logger.debug("Dropped rate-limit state for %d idle clients", len(idle))
