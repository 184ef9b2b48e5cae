"""
FoodHub Backend — Middleware Package
======================================

What:  Cross-cutting concerns applied to every request.

Execution order for an incoming request:
    [Rate Limit] → [Request ID] → [Access Log] → [GZip] → [CORS] → route

    - rate_limit.py:  per-client sliding window; rejects with 429
    - request_id.py:  X-Request-ID correlation id (ContextVar + request.state)
    - logging.py:     one access-log line per request with status and duration
"""
