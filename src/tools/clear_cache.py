"""MCP tool that empties the weather cache."""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from sdk import WeatherSDK


def register(mcp: FastMCP, *, sdk: WeatherSDK) -> None:
    @mcp.tool(name="clear_weather_cache")
    async def clear_weather_cache() -> str:
        """Drop every cached city so the next lookup hits the service."""
        dropped = sdk.cache.size()
        sdk.clear()
        return f"Cleared {dropped} cached cities"
