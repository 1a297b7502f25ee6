"""Fixed-window rate limiting for the public endpoints.

Each identifier gets ``max_requests`` calls per window. The window starts
with the first call and resets fully once it has passed.
"""

import asyncio
import logging
import math
import time
from collections.abc import Callable
from dataclasses import dataclass

from fastapi import Request

from src.rate_limit.store import InMemoryRateLimitStore, RateLimitStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RateLimitConfig:
    max_requests: int
    window_seconds: float


@dataclass(frozen=True)
class RateLimitResult:
    success: bool
    remaining: int
    reset_time: float


class RateLimits:
    PUBLIC_FORM = RateLimitConfig(max_requests=10, window_seconds=60)
    PUBLIC_VIEW = RateLimitConfig(max_requests=30, window_seconds=60)
    AUTHENTICATED = RateLimitConfig(max_requests=60, window_seconds=60)


class RateLimiter:
    def __init__(
        self,
        store: RateLimitStore | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store or InMemoryRateLimitStore()
        self.clock = clock
        self._lock = asyncio.Lock()

    async def check(self, identifier: str, config: RateLimitConfig) -> RateLimitResult:
        async with self._lock:
            now = self.clock()
            entry = await self.store.get(identifier)

            if entry is None or entry.reset_time < now:
                entry = await self.store.reset(identifier, now + config.window_seconds)
                return RateLimitResult(
                    success=True,
                    remaining=config.max_requests - 1,
                    reset_time=entry.reset_time,
                )

            if entry.count >= config.max_requests:
                return RateLimitResult(success=False, remaining=0, reset_time=entry.reset_time)

            entry = await self.store.increment(identifier)
            return RateLimitResult(
                success=True,
                remaining=config.max_requests - entry.count,
                reset_time=entry.reset_time,
            )

    def retry_after(self, result: RateLimitResult) -> int:
        return max(0, math.ceil(result.reset_time - self.clock()))

    async def sweep(self) -> int:
        async with self._lock:
            removed = await self.store.expire(self.clock())
        if removed:
            logger.debug(f"Removed {removed} expired rate limit entries")
        return removed

    async def run_sweeper(self, interval_seconds: float) -> None:
        """Sweep forever. Started as a task from the application lifespan."""
        while True:
            await asyncio.sleep(interval_seconds)
            await self.sweep()


def get_client_ip(request: Request) -> str:
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip
    return "unknown"
