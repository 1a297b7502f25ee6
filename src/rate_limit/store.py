from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class RateLimitEntry:
    count: int
    reset_time: float


class RateLimitStore(ABC):
    """Per-identifier window state. Implementations need not be thread safe,
    the limiter serializes access."""

    @abstractmethod
    async def get(self, key: str) -> RateLimitEntry | None:
        pass

    @abstractmethod
    async def reset(self, key: str, reset_time: float) -> RateLimitEntry:
        """Start a new window with a count of one."""
        pass

    @abstractmethod
    async def increment(self, key: str) -> RateLimitEntry:
        pass

    @abstractmethod
    async def expire(self, now: float) -> int:
        """Drop entries whose window ended before ``now``. Returns how many were dropped."""
        pass


class InMemoryRateLimitStore(RateLimitStore):
    def __init__(self):
        self._entries: dict[str, RateLimitEntry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, key: str) -> RateLimitEntry | None:
        return self._entries.get(key)

    async def reset(self, key: str, reset_time: float) -> RateLimitEntry:
        entry = RateLimitEntry(count=1, reset_time=reset_time)
        self._entries[key] = entry
        return entry

    async def increment(self, key: str) -> RateLimitEntry:
        entry = self._entries[key]
        entry.count += 1
        return entry

    async def expire(self, now: float) -> int:
        expired = [key for key, entry in self._entries.items() if entry.reset_time < now]
        for key in expired:
            del self._entries[key]
        return len(expired)
