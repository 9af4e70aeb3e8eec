"""Back-off on explicit throttling from the weather service.

OpenWeather answers 429 when the account quota is exceeded. When the
response carries a numeric Retry-After header we sleep (bounded) and ask
the caller to retry; otherwise the 429 is returned to the caller as is.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import httpx


class RateLimiter:
    def __init__(self, *, max_sleep_seconds: float = 30.0) -> None:
        self._max_sleep_seconds = float(max_sleep_seconds)

    async def should_retry(self, response: httpx.Response) -> bool:
        if response.status_code != 429:
            return False

        delay = self._retry_after(response)
        if delay is None:
            return False

        await asyncio.sleep(min(delay, self._max_sleep_seconds))
        return True

    @staticmethod
    def _retry_after(response: httpx.Response) -> Optional[float]:
        raw = (response.headers.get("Retry-After") or "").strip()
        if not raw.isdigit():
            return None
        return float(raw)
