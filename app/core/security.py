"""
API key checks and per-key request throttling
"""

import logging
import math
import time
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import APIKeyHeader
from limits import RateLimitItemPerSecond
from limits.aio.storage import Storage
from limits.aio.strategies import MovingWindowRateLimiter
from limits.storage import storage_from_string

from app.core.config import Settings

logger = logging.getLogger(__name__)

api_key_header = APIKeyHeader(name="x-api-key", auto_error=False)


def async_storage_uri(uri: str) -> str:
    """``limits`` names its asyncio backends ``async+<scheme>://``"""
    return uri if uri.startswith("async+") else f"async+{uri}"


class RateLimiter:
    """Fixed quota per rolling window, keyed by API key.

    Counters are kept in an asyncio ``limits`` storage backend, so checks
    never block the event loop. The default ``memory://`` store is
    process-local; ``redis://`` or ``memcached://`` share counters across
    workers without touching the request handlers.
    """

    def __init__(
        self,
        requests: int,
        window_seconds: int,
        storage: Optional[Storage] = None,
    ):
        self.storage = storage or storage_from_string("async+memory://")
        self.item = RateLimitItemPerSecond(requests, window_seconds)
        self._strategy = MovingWindowRateLimiter(self.storage)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RateLimiter":
        return cls(
            requests=settings.rate_limit_requests,
            window_seconds=settings.rate_limit_window_seconds,
            storage=storage_from_string(
                async_storage_uri(settings.rate_limit_storage_uri)
            ),
        )

    async def hit(self, key: str) -> bool:
        """Consume one request for ``key``; False once the quota is spent"""
        return await self._strategy.hit(self.item, key)

    async def retry_after(self, key: str) -> int:
        """Seconds until ``key`` regains at least one request"""
        stats = await self._strategy.get_window_stats(self.item, key)
        return max(1, math.ceil(stats.reset_time - time.time()))

    async def reset(self) -> None:
        await self.storage.reset()


async def require_api_key(
    request: Request,
    api_key: Optional[str] = Depends(api_key_header),
) -> str:
    """Reject callers whose x-api-key is missing or not allowlisted"""
    settings: Settings = request.app.state.settings
    if not api_key or api_key not in settings.api_keys:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized"
        )
    return api_key


async def rate_limit(
    request: Request,
    api_key: str = Depends(require_api_key),
) -> None:
    """Throttle per API key.

    Runs after ``require_api_key``, so every caller reaching it holds an
    allowlisted key and the quota is counted against that key.
    """
    limiter: RateLimiter = request.app.state.rate_limiter

    if not await limiter.hit(api_key):
        retry_after = await limiter.retry_after(api_key)
        logger.warning("Rate limit exceeded for key ending %s", api_key[-4:])
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Too Many Requests",
            headers={"Retry-After": str(retry_after)},
        )
