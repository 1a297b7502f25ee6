from functools import lru_cache

from fastapi import Depends, Request

from src.rate_limit.limiter import RateLimitConfig, RateLimiter, RateLimitResult, get_client_ip

RATE_LIMIT_MESSAGE = "Terlalu banyak permintaan. Silakan coba lagi dalam beberapa menit."


class RateLimitExceeded(Exception):
    def __init__(self, retry_after: int, result: RateLimitResult):
        self.retry_after = retry_after
        self.result = result
        super().__init__(f"Rate limit exceeded, retry after {retry_after}s")


@lru_cache
def get_rate_limiter() -> RateLimiter:
    """Process-wide limiter."""
    return RateLimiter()


def rate_limit(prefix: str, config: RateLimitConfig):
    """Route dependency limiting calls per client under ``prefix``."""

    async def dependency(request: Request, limiter: RateLimiter = Depends(get_rate_limiter)) -> None:
        result = await limiter.check(f"{prefix}:{get_client_ip(request)}", config)
        if not result.success:
            raise RateLimitExceeded(limiter.retry_after(result), result)

    return dependency
