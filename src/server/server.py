"""Server bootstrap for the weather MCP service.

Builds the WeatherSDK from environment settings, creates the FastMCP
instance, wires tools and resources, and starts the MCP server (stdio
transport). The SDK's background refresh lives for the server lifespan.
"""

from contextlib import asynccontextmanager

from mcp.server.fastmcp import FastMCP

from config import (
    CACHE_CAPACITY,
    CACHE_TTL,
    HTTP_TIMEOUT,
    HTTP_VERIFY,
    LOG_LEVEL,
    OPENWEATHER_API_KEY,
    OPENWEATHER_ENDPOINT,
    POLL_INTERVAL,
    RATE_PER_MINUTE,
    SDK_MODE,
)
from observability import setup_logging
from sdk import WeatherSDK, create_sdk

from tools.clear_cache import register as register_clear_cache
from tools.get_weather import register as register_get_weather

from resources.cache_status import register_resources


def build_sdk() -> WeatherSDK:
    return create_sdk(
        OPENWEATHER_API_KEY,
        endpoint=OPENWEATHER_ENDPOINT,
        mode=SDK_MODE,
        poll_interval=POLL_INTERVAL,
        capacity=CACHE_CAPACITY,
        ttl=CACHE_TTL,
        timeout=HTTP_TIMEOUT,
        verify=HTTP_VERIFY,
        calls_per_minute=RATE_PER_MINUTE,
    )


def build_server(sdk: WeatherSDK) -> FastMCP:
    @asynccontextmanager
    async def lifespan(_server: FastMCP):
        # Scheduler needs the running loop, so start here rather than at build time
        sdk.start()
        try:
            yield
        finally:
            sdk.shutdown()

    mcp = FastMCP("weather-mcp", lifespan=lifespan)

    register_get_weather(mcp, sdk=sdk)
    register_clear_cache(mcp, sdk=sdk)
    register_resources(mcp, sdk=sdk)
    return mcp


def main() -> None:
    setup_logging(LOG_LEVEL)
    mcp = build_server(build_sdk())
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
