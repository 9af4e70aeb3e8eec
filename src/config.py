"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level settings used by the server (API key, endpoint, refresh mode,
cache sizing, timeouts). Values are validated once by `core.models.build_config`.
"""

from __future__ import annotations

import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


# OpenWeather
OPENWEATHER_API_KEY = os.environ.get("OPENWEATHER_API_KEY", "").strip()
OPENWEATHER_ENDPOINT = os.environ.get(
    "OPENWEATHER_ENDPOINT", "https://api.openweathermap.org/data/2.5/weather"
).strip()

# Network / HTTP
HTTP_VERIFY = _env_bool("HTTP_VERIFY", True)
HTTP_TIMEOUT = _env_float("WEATHER_HTTP_TIMEOUT", 10.0)
RATE_PER_MINUTE = _env_float("WEATHER_RATE_PER_MINUTE", 60.0)

# Refresh: "on_demand" or "polling"
SDK_MODE = os.environ.get("WEATHER_SDK_MODE", "on_demand").strip().lower()
POLL_INTERVAL = _env_float("WEATHER_POLL_INTERVAL", 600.0)

# Cache
CACHE_CAPACITY = _env_int("WEATHER_CACHE_CAPACITY", 10)
CACHE_TTL = _env_float("WEATHER_CACHE_TTL", 600.0)

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper()
