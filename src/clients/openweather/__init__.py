from .client import OpenWeatherClient
from .inputs import build_query, normalize_city
from .payload import SystemInfo, Temperature, WeatherInfo, WeatherResponse, WindInfo

__all__ = [
    "OpenWeatherClient",
    "WeatherResponse",
    "WeatherInfo",
    "Temperature",
    "WindInfo",
    "SystemInfo",
    "build_query",
    "normalize_city",
]
