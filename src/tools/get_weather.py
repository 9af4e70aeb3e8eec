"""MCP tool that returns current weather for a city.

Registers the 'get_weather' tool which delegates to the WeatherSDK, so
repeated calls are served from its cache and blank names are rejected there.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from sdk import WeatherSDK


def register(mcp: FastMCP, *, sdk: WeatherSDK) -> None:
    @mcp.tool(name="get_weather")
    async def get_weather(city: str = "") -> str:
        """Return current weather for a city as a JSON string.

        Params:
          - city: city name as understood by OpenWeather (e.g. "London",
            "Paris,FR"). Required.

        Returns:
          JSON object with weather, temperature (Kelvin), visibility, wind,
          datetime, sys (sunrise/sunset), timezone and name. Results are
          cached per city until the configured TTL elapses.

        Raises:
          ValidationError for an empty city; NotFoundError for an unknown
          city; NetworkError, FetchTimeoutError or UnexpectedResponseError
          when the weather service call fails.
        """
        return await sdk.get_weather(city)
