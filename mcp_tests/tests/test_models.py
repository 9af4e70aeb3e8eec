import dataclasses

import pytest

from core.errors import ConfigError
from core.models import RefreshReport, SDKConfig, build_config


def test_build_config_defaults():
    cfg = build_config("  secret  ")

    assert cfg == SDKConfig(api_key="secret")
    assert cfg.endpoint == "https://api.openweathermap.org/data/2.5/weather"
    assert cfg.mode == "on_demand"
    assert cfg.poll_interval == 600.0
    assert cfg.capacity == 10
    assert cfg.ttl == 600.0
    assert cfg.polling is False


def test_build_config_polling_overrides():
    cfg = build_config(
        "secret",
        endpoint="https://api.openweathermap.org/another/endpoint",
        mode=" Polling ",
        poll_interval="300",
        capacity="3",
        ttl=60,
    )

    assert cfg.mode == "polling"
    assert cfg.polling is True
    assert cfg.poll_interval == 300.0
    assert cfg.capacity == 3
    assert cfg.ttl == 60.0


def test_config_is_immutable():
    cfg = build_config("secret")
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.capacity = 99


@pytest.mark.parametrize(
    "api_key,kwargs",
    [
        (None, {}),
        ("   ", {}),
        ("k", {"endpoint": ""}),
        ("k", {"endpoint": "ftp://example.com"}),
        ("k", {"mode": "sometimes"}),
        ("k", {"capacity": 0}),
        ("k", {"ttl": 0}),
        ("k", {"ttl": -1}),
        ("k", {"mode": "polling", "poll_interval": 0}),
        ("k", {"mode": "polling", "poll_interval": -5}),
        ("k", {"timeout": 0}),
        ("k", {"calls_per_minute": -1}),
        ("k", {"capacity": "many"}),
        ("k", {"capacity": 2.7}),
    ],
)
def test_build_config_rejects_invalid(api_key, kwargs):
    with pytest.raises(ConfigError):
        build_config(api_key, **kwargs)


def test_poll_interval_ignored_in_on_demand_mode():
    cfg = build_config("k", mode="on_demand", poll_interval=0)
    assert cfg.poll_interval == 0.0


def test_refresh_report_ok():
    assert RefreshReport(refreshed=("a",)).ok is True
    assert RefreshReport(failures={"b": RuntimeError("x")}).ok is False
