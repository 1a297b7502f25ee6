from src.rate_limit.dependencies import RateLimitExceeded, get_rate_limiter, rate_limit
from src.rate_limit.limiter import RateLimitConfig, RateLimiter, RateLimitResult, RateLimits

__all__ = [
    "RateLimitConfig",
    "RateLimitExceeded",
    "RateLimitResult",
    "RateLimiter",
    "RateLimits",
    "get_rate_limiter",
    "rate_limit",
]
