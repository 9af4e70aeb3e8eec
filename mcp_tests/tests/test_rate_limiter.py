import pytest
import httpx

import core.rate_limiter as rl_mod
from core.rate_limiter import RateLimiter


def _resp(status: int, headers: dict[str, str]):
    req = httpx.Request("GET", "https://weather.test/data/2.5/weather")
    return httpx.Response(status, headers=headers, request=req)


@pytest.fixture
def sleeps(monkeypatch):
    calls = []

    async def fake_sleep(seconds: float):
        calls.append(seconds)

    monkeypatch.setattr(rl_mod.asyncio, "sleep", fake_sleep)
    return calls


@pytest.mark.asyncio
async def test_rate_limiter_429_honors_retry_after(sleeps):
    rl = RateLimiter(max_sleep_seconds=60)

    assert await rl.should_retry(_resp(429, {"Retry-After": "10"})) is True
    assert sleeps == [10.0]


@pytest.mark.asyncio
async def test_rate_limiter_429_bounded_sleep(sleeps):
    rl = RateLimiter(max_sleep_seconds=5)

    assert await rl.should_retry(_resp(429, {"Retry-After": "120"})) is True
    assert sleeps == [5.0]


@pytest.mark.asyncio
@pytest.mark.parametrize("headers", [{}, {"Retry-After": "soon"}, {"Retry-After": "-3"}])
async def test_rate_limiter_429_without_usable_retry_after(sleeps, headers):
    rl = RateLimiter()

    assert await rl.should_retry(_resp(429, headers)) is False
    assert sleeps == []


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [200, 401, 404, 500])
async def test_rate_limiter_ignores_other_statuses(sleeps, status):
    rl = RateLimiter()

    assert await rl.should_retry(_resp(status, {"Retry-After": "1"})) is False
    assert sleeps == []
