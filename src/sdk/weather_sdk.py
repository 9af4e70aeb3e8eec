"""Weather SDK facade.

Wires the OpenWeather client, the LRU/TTL cache and the refresh coordinator
from one validated `SDKConfig`. Callers use `get_weather(city)` for the JSON
view or `lookup(city)` for the parsed model.

Usage:

    async with create_sdk("your-api-key", mode="polling", poll_interval=300) as sdk:
        print(await sdk.get_weather("London"))
"""

from __future__ import annotations

import logging
from typing import List, Optional

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from clients.openweather import OpenWeatherClient, WeatherResponse, normalize_city
from core.cache import Cache
from core.interfaces import Fetcher
from core.models import SDKConfig, SDKMode, build_config
from core.refresh import CoordinatorState, RefreshCoordinator

logger = logging.getLogger(__name__)


class WeatherSDK:
    def __init__(
        self,
        config: SDKConfig,
        *,
        fetcher: Optional[Fetcher[WeatherResponse]] = None,
        scheduler: Optional[AsyncIOScheduler] = None,
    ) -> None:
        self._config = config
        self._fetcher = fetcher or OpenWeatherClient(
            config.api_key,
            endpoint=config.endpoint,
            timeout=config.timeout,
            verify=config.verify,
            calls_per_minute=config.calls_per_minute,
        )
        self._cache: Cache[WeatherResponse] = Cache(capacity=config.capacity, ttl_seconds=config.ttl)
        self._coordinator: RefreshCoordinator[WeatherResponse] = RefreshCoordinator(
            cache=self._cache,
            fetcher=self._fetcher,
            mode=config.mode,
            poll_interval=config.poll_interval,
            scheduler=scheduler,
        )

    @property
    def config(self) -> SDKConfig:
        return self._config

    @property
    def mode(self) -> SDKMode:
        return self._config.mode

    @property
    def state(self) -> CoordinatorState:
        return self._coordinator.state

    @property
    def cache(self) -> Cache[WeatherResponse]:
        return self._cache

    @property
    def coordinator(self) -> RefreshCoordinator[WeatherResponse]:
        return self._coordinator

    async def lookup(self, city: str) -> WeatherResponse:
        """Return weather for `city`, from cache when fresh."""
        return await self._coordinator.lookup(normalize_city(city))

    async def get_weather(self, city: str) -> str:
        """Return weather for `city` as a JSON string."""
        weather = await self.lookup(city)
        return weather.to_json()

    def cached_cities(self) -> List[str]:
        return self._cache.keys()

    def clear(self) -> None:
        self._cache.clear()
        logger.info("Weather cache cleared")

    def start(self) -> None:
        """Start background refresh (polling mode); needs a running event loop."""
        self._coordinator.start()

    def shutdown(self) -> None:
        self._coordinator.shutdown()

    async def __aenter__(self) -> "WeatherSDK":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.shutdown()


def create_sdk(
    api_key: Optional[str],
    *,
    fetcher: Optional[Fetcher[WeatherResponse]] = None,
    scheduler: Optional[AsyncIOScheduler] = None,
    **settings,
) -> WeatherSDK:
    """Validate settings and build a ready SDK; raises ConfigError on bad input."""
    config = build_config(api_key, **settings)
    return WeatherSDK(config, fetcher=fetcher, scheduler=scheduler)
