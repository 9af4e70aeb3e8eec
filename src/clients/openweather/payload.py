"""Weather payload model.

Simplified view of OpenWeather's "current weather" JSON. Parsing keeps only
the fields below, ignores everything else and takes the first element of the
`weather` array. Example of the serialized shape:

    {
      "weather": {"main": "Rain", "description": "light rain"},
      "temperature": {"temp": 288.65, "feels_like": 287.95},
      "visibility": 10000,
      "wind": {"speed": 3.5},
      "datetime": 1643671200,
      "sys": {"sunrise": 1643671200, "sunset": 1643709600},
      "timezone": 10800,
      "name": "London"
    }
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from core.errors import SerializationError


@dataclass(frozen=True)
class WeatherInfo:
    main: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Temperature:
    # Kelvin
    temp: Optional[float] = None
    feels_like: Optional[float] = None


@dataclass(frozen=True)
class WindInfo:
    # Meters per second
    speed: Optional[float] = None


@dataclass(frozen=True)
class SystemInfo:
    # Unix timestamps, UTC
    sunrise: Optional[int] = None
    sunset: Optional[int] = None


@dataclass(frozen=True)
class WeatherResponse:
    weather: Optional[WeatherInfo] = None
    temperature: Optional[Temperature] = None
    visibility: Optional[int] = None
    wind: Optional[WindInfo] = None
    datetime: Optional[int] = None
    sys: Optional[SystemInfo] = None
    timezone: Optional[int] = None
    name: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Any) -> "WeatherResponse":
        if not isinstance(data, Mapping):
            raise SerializationError("Weather payload must be a JSON object")

        try:
            return cls(
                weather=_weather_info(data.get("weather")),
                temperature=_section(data, "main", lambda s: Temperature(
                    temp=_opt_float(s.get("temp")),
                    feels_like=_opt_float(s.get("feels_like")),
                )),
                visibility=_opt_int(data.get("visibility")),
                wind=_section(data, "wind", lambda s: WindInfo(speed=_opt_float(s.get("speed")))),
                datetime=_opt_int(data.get("dt")),
                sys=_section(data, "sys", lambda s: SystemInfo(
                    sunrise=_opt_int(s.get("sunrise")),
                    sunset=_opt_int(s.get("sunset")),
                )),
                timezone=_opt_int(data.get("timezone")),
                name=_opt_str(data.get("name")),
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Malformed weather payload: {e}") from e

    @classmethod
    def from_json(cls, text: str) -> "WeatherResponse":
        try:
            data = json.loads(text)
        except ValueError as e:
            raise SerializationError(f"Weather payload is not valid JSON: {e}") from e
        return cls.from_payload(data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


# --- parsing helpers ---

def _weather_info(raw: Any) -> Optional[WeatherInfo]:
    # The service sends a list of conditions; the first one is the primary
    if not isinstance(raw, list) or not raw:
        return None
    first = raw[0]
    if not isinstance(first, Mapping):
        raise ValueError("weather[0] must be an object")
    return WeatherInfo(main=_opt_str(first.get("main")), description=_opt_str(first.get("description")))


def _section(data: Mapping[str, Any], name: str, build):
    raw = data.get(name)
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise ValueError(f"{name} must be an object")
    return build(raw)


def _opt_float(v: Any) -> Optional[float]:
    return None if v is None else float(v)


def _opt_int(v: Any) -> Optional[int]:
    return None if v is None else int(v)


def _opt_str(v: Any) -> Optional[str]:
    return None if v is None else str(v)
