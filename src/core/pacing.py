"""
Request pacing for the weather service.

Spreads outbound calls so a polling run over a full cache does not burst
through the service quota (OpenWeather's free plan allows 60 calls/minute).
Not a replacement for honoring server-side 429 responses.
"""

from __future__ import annotations

import asyncio
import time


class Pacer:
    def __init__(self, *, calls_per_minute: float) -> None:
        rate = float(calls_per_minute)
        self._interval = 0.0 if rate <= 0 else 60.0 / rate
        self._next_slot = 0.0

        # Without the lock two tasks could claim the same slot.
        self._lock = asyncio.Lock()

    @property
    def interval(self) -> float:
        return self._interval

    async def wait(self) -> None:
        if self._interval <= 0:
            return

        async with self._lock:
            now = time.monotonic()
            slot = max(now, self._next_slot)
            self._next_slot = slot + self._interval
            delay = slot - now

        # Sleep outside the lock so later callers can reserve their slots.
        if delay > 0:
            await asyncio.sleep(delay)
