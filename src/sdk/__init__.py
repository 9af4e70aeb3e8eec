from .weather_sdk import WeatherSDK, create_sdk

__all__ = ["WeatherSDK", "create_sdk"]
