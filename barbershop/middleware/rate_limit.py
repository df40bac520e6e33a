from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from barbershop.core.rate_limiter import InMemoryRateLimiterService, RateLimiterService

logger = logging.getLogger(__name__)


class ClientRateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, rate_limiter: RateLimiterService | None = None) -> None:
        super().__init__(app)
        self._rate_limiter = rate_limiter or InMemoryRateLimiterService()

    async def dispatch(self, request: Request, call_next):
        client_id = _extract_client_id(request)
        decision = self._rate_limiter.check(client_id=client_id)
        if not decision.allowed:
            logger.warning("rate limit exceeded client=%s path=%s", client_id, request.url.path)
            return JSONResponse(
                status_code=429,
                content={"error": "rate_limited"},
                headers={
                    "Retry-After": str(decision.retry_after_seconds),
                    "X-RateLimit-Limit": str(decision.limit),
                    "X-RateLimit-Remaining": str(decision.remaining),
                },
            )

        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(decision.limit)
        response.headers["X-RateLimit-Remaining"] = str(decision.remaining)
        return response


def _extract_client_id(request: Request) -> str:
    if request.client and request.client.host:
        return request.client.host
    return "unknown"
