# value objects for the current weather payload, kept immutable so a decoded
# location can be shared freely between callers

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Units(Enum):
    # value is what goes in the "units" query parameter, None means omit it
    STANDARD = None
    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def temperature_label(self) -> str:
        return {
            Units.STANDARD: "Kelvin",
            Units.METRIC: "Celsius",
            Units.IMPERIAL: "Fahrenheit",
        }[self]


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Coordinates":
        return cls(latitude=float(data.get("lat", 0)), longitude=float(data.get("lon", 0)))


@dataclass(frozen=True)
class Weather:
    # the "main" block of the payload; pressures are hPa, humidity is %
    temperature: float
    feels_like: float
    min: float
    max: float
    pressure: int
    humidity: int
    sea_level: int = 0
    ground_level: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Weather":
        return cls(
            temperature=float(data.get("temp", 0)),
            feels_like=float(data.get("feels_like", 0)),
            min=float(data.get("temp_min", 0)),
            max=float(data.get("temp_max", 0)),
            pressure=int(data.get("pressure", 0)),
            humidity=int(data.get("humidity", 0)),
            sea_level=int(data.get("sea_level", 0)),
            ground_level=int(data.get("grnd_level", 0)),
        )


@dataclass(frozen=True)
class Condition:
    id: int
    main: str
    description: str
    icon: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Condition":
        return cls(
            id=int(data.get("id", 0)),
            main=data.get("main", ""),
            description=data.get("description", ""),
            icon=data.get("icon", ""),
        )


@dataclass(frozen=True)
class Wind:
    speed: float
    direction: int
    gust: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Wind":
        return cls(
            speed=float(data.get("speed", 0)),
            direction=int(data.get("deg", 0)),
            gust=float(data.get("gust", 0)),
        )


@dataclass(frozen=True)
class Clouds:
    cloudiness: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Clouds":
        return cls(cloudiness=int(data.get("all", 0)))


@dataclass(frozen=True)
class Precipitation:
    # volume in mm, used for both rain and snow
    last_hour: float = 0.0
    last_three_hours: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Precipitation":
        return cls(
            last_hour=float(data.get("1h", 0)),
            last_three_hours=float(data.get("3h", 0)),
        )


def _nested(data: Dict[str, Any], key: str, model):
    # optional blocks stay None when the provider leaves them out
    block = data.get(key)
    return model.from_dict(block) if block is not None else None


@dataclass(frozen=True)
class Location:
    """Current weather for a single city as returned by ``data/2.5/weather``."""

    id: int
    name: str
    utc_offset: int
    coordinates: Optional[Coordinates]
    weather: Optional[Weather]
    visibility: int
    conditions: Tuple[Condition, ...] = ()
    wind: Optional[Wind] = None
    clouds: Optional[Clouds] = None
    rain: Optional[Precipitation] = None
    snow: Optional[Precipitation] = None
    country: str = ""
    sunrise: int = 0
    sunset: int = 0
    observed_at: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Location":
        if not isinstance(data, dict):
            raise ValueError(f"Unsupported payload shape for Location: {type(data).__name__}")
        sys_block = data.get("sys") or {}
        return cls(
            id=int(data.get("id", 0)),
            name=data.get("name", ""),
            utc_offset=int(data.get("timezone", 0)),
            coordinates=_nested(data, "coord", Coordinates),
            weather=_nested(data, "main", Weather),
            visibility=int(data.get("visibility", 0)),
            conditions=tuple(Condition.from_dict(c) for c in data.get("weather") or ()),
            wind=_nested(data, "wind", Wind),
            clouds=_nested(data, "clouds", Clouds),
            rain=_nested(data, "rain", Precipitation),
            snow=_nested(data, "snow", Precipitation),
            country=sys_block.get("country", ""),
            sunrise=int(sys_block.get("sunrise", 0)),
            sunset=int(sys_block.get("sunset", 0)),
            observed_at=int(data.get("dt", 0)),
        )
