"""
HTTP Middleware

Request logging and optional per-client rate limiting. The rate limit
counters live in a store owned by the application instance.
"""

from __future__ import annotations

import json
import logging
import time
from collections import defaultdict

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp


logger = logging.getLogger(__name__)


__all__ = [
    "LoggingMiddleware",
    "RateLimitMiddleware",
    "RateLimitStore",
]


def _client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


class RateLimitStore:
    """Sliding one-minute request timestamps per client."""

    def __init__(self, window_seconds: float = 60.0) -> None:
        self.window_seconds = window_seconds
        self._hits: defaultdict[str, list[float]] = defaultdict(list)
        self._last_prune: float | None = None

    def __len__(self) -> int:
        return len(self._hits)

    def _prune(self, now: float) -> None:
        # At most one sweep per window; drops clients with no recent request
        if self._last_prune is not None and now - self._last_prune < self.window_seconds:
            return
        self._last_prune = now
        cutoff = now - self.window_seconds
        for key in [k for k, hits in self._hits.items() if not hits or hits[-1] <= cutoff]:
            del self._hits[key]

    def hit(self, key: str, now: float | None = None) -> int:
        """Record a request and return the client's count inside the window."""
        now = time.monotonic() if now is None else now
        self._prune(now)
        window = [t for t in self._hits[key] if t > now - self.window_seconds]
        window.append(now)
        self._hits[key] = window
        return len(window)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs one structured line per request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = round((time.perf_counter() - start) * 1000, 2)
        log = {
            "ip": _client_key(request),
            "endpoint": request.url.path,
            "query": str(request.url.query),
            "status": response.status_code,
            "latency_ms": elapsed,
        }
        logger.info(json.dumps(log))
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Rejects clients exceeding ``limit`` requests per minute."""

    def __init__(self, app: ASGIApp, store: RateLimitStore, limit: int) -> None:
        super().__init__(app)
        self.store = store
        self.limit = limit

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        key = _client_key(request)
        if self.store.hit(key) > self.limit:
            logger.warning(f"Rate limit exceeded for {key}")
            return JSONResponse({"error": "Rate limit exceeded"}, status_code=429)
        return await call_next(request)
