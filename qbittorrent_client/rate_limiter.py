"""
Token bucket rate limiter for outbound API calls.

Wraps the HTTP transport so that at most ``count`` requests are admitted per
``duration`` seconds. The bucket is refilled only when the current window
has elapsed, never early, and never holds more than ``count`` tokens.
Waiting callers are admitted in arrival order.
"""

import asyncio
import time
from typing import Generic, TypeVar


DEFAULT_RATE_COUNT = 10
DEFAULT_RATE_DURATION = 10.0

T = TypeVar("T")


class RateLimiter(Generic[T]):
    def __init__(
        self,
        service: T,
        count: int = DEFAULT_RATE_COUNT,
        duration: float = DEFAULT_RATE_DURATION,
    ):
        if count < 1:
            raise ValueError(f"Rate limit count must be positive, got {count}")
        if duration <= 0:
            raise ValueError(f"Rate limit duration must be positive, got {duration}")
        self.count = count
        self.duration = duration
        self._service = service
        self._remaining = count
        self._until = 0.0
        # asyncio.Lock wakes waiters in FIFO order
        self._lock = asyncio.Lock()

    def get_ref(self) -> T:
        """Return the wrapped service without consuming a token."""
        return self._service

    async def acquire(self) -> T:
        """Wait for a token, then return the wrapped service."""
        async with self._lock:
            now = time.monotonic()
            if now >= self._until:
                self._start_window(now)
            if self._remaining == 0:
                await asyncio.sleep(self._until - now)
                self._start_window(time.monotonic())
            self._remaining -= 1
        return self._service

    def _start_window(self, now: float) -> None:
        self._until = now + self.duration
        self._remaining = self.count
