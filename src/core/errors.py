from __future__ import annotations


class WeatherSDKError(Exception):
    """Base error for the weather SDK."""


class ConfigError(WeatherSDKError):
    """Raised when SDK or cache configuration is invalid."""


class ValidationError(WeatherSDKError):
    """Raised when user input is invalid."""


class SerializationError(WeatherSDKError):
    """Raised when a service payload cannot be parsed."""


class FetchError(WeatherSDKError):
    """Raised when the weather service lookup fails."""


class NotFoundError(FetchError):
    """Raised when the service does not know the requested city."""


class NetworkError(FetchError):
    """Raised when the service cannot be reached."""


class FetchTimeoutError(FetchError):
    """Raised when the service does not answer in time."""


class UnexpectedResponseError(FetchError):
    """Raised when the service answers with an unexpected status."""
