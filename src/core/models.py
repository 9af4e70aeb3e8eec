"""Immutable configuration and result models.

Includes the SDK configuration value (SDKConfig) with its single validating
constructor `build_config`, and the per-run summary of a scheduled refresh
(RefreshReport).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal, Optional, Tuple, get_args

from core.errors import ConfigError


SDKMode = Literal["on_demand", "polling"]

DEFAULT_ENDPOINT = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_MODE: SDKMode = "on_demand"
DEFAULT_POLL_INTERVAL = 600.0
DEFAULT_CAPACITY = 10
DEFAULT_TTL = 600.0
DEFAULT_TIMEOUT = 10.0
DEFAULT_CALLS_PER_MINUTE = 60.0


@dataclass(frozen=True)
class SDKConfig:
    """Validated SDK settings.

    Field groups:
    - Service: api_key, endpoint, timeout, verify, calls_per_minute (0 disables pacing)
    - Cache: capacity, ttl
    - Refresh: mode, poll_interval (used only in "polling" mode)
    """

    api_key: str
    endpoint: str = DEFAULT_ENDPOINT
    mode: SDKMode = DEFAULT_MODE
    poll_interval: float = DEFAULT_POLL_INTERVAL
    capacity: int = DEFAULT_CAPACITY
    ttl: float = DEFAULT_TTL
    timeout: float = DEFAULT_TIMEOUT
    verify: bool = True
    calls_per_minute: float = DEFAULT_CALLS_PER_MINUTE

    @property
    def polling(self) -> bool:
        return self.mode == "polling"


def build_config(
    api_key: Optional[str],
    *,
    endpoint: str = DEFAULT_ENDPOINT,
    mode: str = DEFAULT_MODE,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    capacity: int = DEFAULT_CAPACITY,
    ttl: float = DEFAULT_TTL,
    timeout: float = DEFAULT_TIMEOUT,
    verify: bool = True,
    calls_per_minute: float = DEFAULT_CALLS_PER_MINUTE,
) -> SDKConfig:
    """Validate raw settings and return an SDKConfig, or raise ConfigError."""
    key = (api_key or "").strip()
    if not key:
        raise ConfigError("API key cannot be null or empty")

    url = (endpoint or "").strip()
    if not url:
        raise ConfigError("Endpoint cannot be null or empty")
    if not url.startswith(("http://", "https://")):
        raise ConfigError("Endpoint must be a valid URL")

    mode_clean = (mode or "").strip().lower()
    if mode_clean not in get_args(SDKMode):
        raise ConfigError(f"Unknown mode: {mode!r}")

    try:
        capacity_n = int(capacity)
        ttl_s = float(ttl)
        poll_s = float(poll_interval)
        timeout_s = float(timeout)
        rate = float(calls_per_minute)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid numeric setting: {e}") from e

    if isinstance(capacity, bool) or capacity_n != capacity:
        raise ConfigError(f"Cache capacity must be a whole number, got {capacity!r}")
    if capacity_n < 1:
        raise ConfigError("Cache capacity must be at least 1")
    if ttl_s <= 0:
        raise ConfigError("Cache ttl must be positive")
    if mode_clean == "polling" and poll_s <= 0:
        raise ConfigError("Polling interval must be positive in polling mode")
    if timeout_s <= 0:
        raise ConfigError("Timeout must be positive")
    if rate < 0:
        raise ConfigError("Calls per minute cannot be negative")

    return SDKConfig(
        api_key=key,
        endpoint=url,
        mode=mode_clean,  # type: ignore[arg-type]
        poll_interval=poll_s,
        capacity=capacity_n,
        ttl=ttl_s,
        timeout=timeout_s,
        verify=bool(verify),
        calls_per_minute=rate,
    )


@dataclass(frozen=True)
class RefreshReport:
    """Outcome of one scheduled refresh run."""

    refreshed: Tuple[str, ...] = ()
    failures: Dict[str, BaseException] = field(default_factory=dict)
    # Keys not reached because shutdown was requested mid-run
    skipped: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures
