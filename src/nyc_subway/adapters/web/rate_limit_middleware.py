"""Per-IP rate limiting middleware for Starlette using throttled-py."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER_SECONDS = 60.0


def extract_client_ip(request: Request) -> str:
    """Return the originating client IP of a request.

    The first entry of X-Forwarded-For wins when present, since the map is
    usually served behind a proxy. Falls back to the socket peer, then to
    'unknown'.
    """
    forwarded_for = request.headers.get("X-Forwarded-For", "")
    client_ip = forwarded_for.split(",")[0].strip()
    if client_ip:
        return client_ip

    if request.client and request.client.host:
        return request.client.host

    logger.warning("Could not determine client IP, using 'unknown'")
    return "unknown"


def retry_after_seconds(result: Any) -> float:
    """Read the retry delay from a throttled-py result, if it carries one."""
    state = getattr(result, "state", None)
    retry_after = getattr(state, "retry_after", None)
    if retry_after is None:
        retry_after = getattr(result, "retry_after", None)
    if retry_after is None:
        return DEFAULT_RETRY_AFTER_SECONDS
    return float(retry_after)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Rejects clients that exceed a token-bucket quota with 429 responses."""

    def __init__(self, app: Callable, requests_per_minute: int = 100) -> None:
        """Initialize rate limiting middleware.

        Args:
            app: The ASGI application to wrap.
            requests_per_minute: Requests allowed per client IP per minute.
        """
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.quota = rate_limiter.per_min(requests_per_minute, burst=requests_per_minute)
        self.bucket_store = store.MemoryStore()
        logger.info(f"Rate limiting enabled: {requests_per_minute} requests per minute per IP")

    def throttle_for(self, client_ip: str) -> Throttled:
        # All throttles share one store, so buckets persist across requests.
        return Throttled(
            key=client_ip,
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=self.quota,
            store=self.bucket_store,
        )

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        client_ip = extract_client_ip(request)
        result = self.throttle_for(client_ip).limit()
        if result.limited:
            retry_after = retry_after_seconds(result)
            logger.warning(f"Rate limit exceeded for {client_ip}, retry after {retry_after}s")
            return PlainTextResponse(
                "Rate limit exceeded. Please try again later.",
                status_code=429,
                headers={"Retry-After": str(int(retry_after))},
            )
        return await call_next(request)
