import asyncio
import time

import pytest

from qbittorrent_client.rate_limiter import RateLimiter


class TestRateLimiter:
    """Tests for the fixed window token bucket."""

    @pytest.mark.asyncio
    async def test_within_limit_does_not_wait(self):
        limiter = RateLimiter("service", count=3, duration=0.5)

        start = time.monotonic()
        for _ in range(3):
            await limiter.acquire()
        elapsed = time.monotonic() - start

        assert elapsed < 0.1

    @pytest.mark.asyncio
    async def test_over_limit_waits_for_window(self):
        limiter = RateLimiter("service", count=2, duration=0.3)

        start = time.monotonic()
        await limiter.acquire()
        await limiter.acquire()
        assert time.monotonic() - start < 0.1

        await limiter.acquire()
        assert time.monotonic() - start >= 0.25

    @pytest.mark.asyncio
    async def test_acquire_returns_service(self):
        service = object()
        limiter = RateLimiter(service, count=1, duration=1)

        assert await limiter.acquire() is service
        assert limiter.get_ref() is service

    @pytest.mark.asyncio
    async def test_waiters_admitted_in_arrival_order(self):
        limiter = RateLimiter("service", count=1, duration=0.1)
        order = []

        async def worker(index):
            await limiter.acquire()
            order.append(index)

        tasks = []
        for index in range(4):
            tasks.append(asyncio.create_task(worker(index)))
            await asyncio.sleep(0)
        await asyncio.gather(*tasks)

        assert order == [0, 1, 2, 3]

    def test_defaults(self):
        limiter = RateLimiter("service")
        assert limiter.count == 10
        assert limiter.duration == 10.0

    def test_invalid_configuration(self):
        with pytest.raises(ValueError):
            RateLimiter("service", count=0)
        with pytest.raises(ValueError):
            RateLimiter("service", duration=0)
