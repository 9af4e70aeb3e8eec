import json

from mcp.server.fastmcp import FastMCP

from sdk import WeatherSDK


def register_resources(mcp: FastMCP, *, sdk: WeatherSDK) -> None:
    """
    Register read-only views of the weather cache.
    """

    @mcp.resource(
        "weather://cache/cities",
        mime_type="application/json",
        description="Cities currently cached, least recently used first",
    )
    def cached_cities() -> str:
        return json.dumps(
            {
                "mode": sdk.mode,
                "capacity": sdk.cache.capacity,
                "ttl_seconds": sdk.cache.ttl,
                "cities": sdk.cached_cities(),
            }
        )
