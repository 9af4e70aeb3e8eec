"""OpenWeather client: current weather by city name.

A small async client implementing the `core.interfaces.Fetcher` contract for
the weather cache. It paces outbound calls with `core.pacing.Pacer`, honors
429 Retry-After via `core.rate_limiter.RateLimiter`, and maps every failure
onto the `core.errors.FetchError` family so callers never see httpx types.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from core.errors import (
    FetchTimeoutError,
    NetworkError,
    NotFoundError,
    UnexpectedResponseError,
)
from core.pacing import Pacer
from core.rate_limiter import RateLimiter

from .inputs import build_query, normalize_city
from .payload import WeatherResponse

logger = logging.getLogger(__name__)


class OpenWeatherClient:
    """Async OpenWeather client.

    Purpose:
      - fetch(city) -> WeatherResponse

    Key behavior:
      - 404 -> NotFoundError; timeouts -> FetchTimeoutError;
        transport failures -> NetworkError; other non-2xx -> UnexpectedResponseError.
      - Malformed bodies raise SerializationError from the payload layer.
      - No caching here; the cache sits in front of this client.
    """

    DEFAULT_ENDPOINT = "https://api.openweathermap.org/data/2.5/weather"

    _MAX_THROTTLE_RETRIES = 2  # total attempts = 1 + retries

    def __init__(
        self,
        api_key: str,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = 10.0,
        verify: bool = True,
        calls_per_minute: float = 60.0,
        rate_limiter: Optional[RateLimiter] = None,
    ) -> None:
        self._api_key = api_key
        self._endpoint = (endpoint or self.DEFAULT_ENDPOINT).strip()
        self._timeout = float(timeout)
        self._verify = bool(verify)

        self._pacer = Pacer(calls_per_minute=calls_per_minute)
        self._rate_limiter = rate_limiter or RateLimiter()

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def fetch(self, key: str) -> WeatherResponse:
        """Fetch current weather for the city named `key`."""
        city = normalize_city(key)

        async with self._create_client() as client:
            resp = await self._request(client, params=build_query(city, self._api_key))

        if resp.status_code == 404:
            raise NotFoundError(f"City not found: {city}")
        if not resp.is_success:
            raise UnexpectedResponseError(
                f"Weather service returned HTTP {resp.status_code} for {city}: {_error_message(resp)}"
            )

        try:
            data = resp.json()
        except ValueError:
            data = None
        return WeatherResponse.from_payload(data)

    # --- HTTP helpers ---

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers={"Accept": "application/json", "User-Agent": "weather-mcp"},
            timeout=self._timeout,
            verify=self._verify,
        )

    async def _request(
        self,
        client: httpx.AsyncClient,
        *,
        params: Mapping[str, Any],
    ) -> httpx.Response:
        """GET with pacing and bounded retries on explicit throttling."""
        attempts = self._MAX_THROTTLE_RETRIES + 1

        for attempt in range(attempts):
            await self._pacer.wait()

            try:
                resp = await client.get(self._endpoint, params=dict(params))
            except httpx.TimeoutException as e:
                raise FetchTimeoutError(f"Weather service timed out: {e}") from e
            except httpx.HTTPError as e:
                raise NetworkError(f"Weather service unreachable: {e}") from e

            if attempt < attempts - 1 and await self._rate_limiter.should_retry(resp):
                logger.info("Weather service throttled request, retrying (attempt %d)", attempt + 1)
                continue

            return resp

        raise RuntimeError("Unreachable: _request did not return a response")


def _error_message(resp: httpx.Response) -> str:
    # OpenWeather errors look like {"cod": "401", "message": "Invalid API key"}
    try:
        body = resp.json()
    except ValueError:
        return (resp.text or "").strip()[:200]
    if isinstance(body, Mapping) and body.get("message"):
        return str(body["message"])
    return str(body)[:200]
