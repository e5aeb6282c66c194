"""
Client Models

Pydantic schemas for the client's option records, plus TypedDict shapes
for the formatted weather records handed back to callers.

Reference: https://openweathermap.org/api/one-call-api
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, TypedDict

from pydantic import BaseModel, ConfigDict


# -----------------------------------------------------------------------------
# TypedDict Definitions for Formatted Weather
# -----------------------------------------------------------------------------


class IconDict(TypedDict):
    """Weather condition icon."""

    url: str
    raw: str


class WindDict(TypedDict, total=False):
    deg: float | None
    gust: float | None
    speed: float | None


class TemperatureDict(TypedDict, total=False):
    """Temperatures; current/hourly records use ``cur``, daily ones the rest."""

    cur: float
    morn: float
    day: float
    eve: float
    night: float
    min: float
    max: float


class AstronomicalDict(TypedDict, total=False):
    sunrise: datetime
    sunrise_raw: int
    sunset: datetime
    sunset_raw: int
    moonrise: datetime
    moonrise_raw: int
    moonset: datetime
    moonset_raw: int
    moon_phase: float


class WeatherConditionsDict(TypedDict, total=False):
    """Conditions block of a formatted weather record."""

    temp: TemperatureDict
    feels_like: TemperatureDict
    pressure: float | None
    humidity: float | None
    dew_point: float | None
    clouds: float | None
    uvi: float | None
    visibility: float | None
    wind: WindDict
    pop: float | None
    rain: float
    snow: float
    condition_id: int | None
    main: str | None
    description: str | None
    icon: IconDict | None


class WeatherDict(TypedDict, total=False):
    """
    One formatted weather record.

    Every record carries location and time fields; ``astronomical`` is
    present on current and daily records only.
    """

    lat: float
    lon: float
    dt: datetime
    dt_raw: int
    timezone: str
    timezone_offset: int
    astronomical: AstronomicalDict
    weather: WeatherConditionsDict


class EverythingDict(TypedDict):
    """Result of ``OpenWeatherAPI.get_everything``."""

    lat: float
    lon: float
    timezone: str
    timezone_offset: int
    current: WeatherDict | None
    minutely: list[WeatherDict]
    hourly: list[WeatherDict]
    daily: list[WeatherDict]
    alerts: list[dict[str, Any]] | None


# -----------------------------------------------------------------------------
# Option Records
# -----------------------------------------------------------------------------


class Coordinates(BaseModel):
    """
    A resolved geographic position.

    Integers stay integers so ``lat=10`` is sent upstream as ``10``.
    Range checks live in ``validation.evaluate_coordinates``.
    """

    model_config = ConfigDict(frozen=True)

    lat: int | float
    lon: int | float


class GlobalOptions(BaseModel):
    """
    Defaults owned by one client instance.

    ``coordinates`` and ``location_name`` are mutually exclusive; the
    setters on ``OpenWeatherAPI`` clear one when the other is assigned.
    """

    key: str | None = None
    language: str | None = None
    units: str | None = None
    coordinates: Coordinates | None = None
    location_name: str | None = None


class CallOptions(BaseModel):
    """Per-call overrides. Only fields explicitly set take precedence."""

    key: str | None = None
    language: str | None = None
    units: str | None = None
    coordinates: Coordinates | None = None
    location_name: str | None = None

    @property
    def overrides_location(self) -> bool:
        return self.coordinates is not None or self.location_name is not None


class EffectiveOptions(BaseModel):
    """Fully merged and validated options for one call."""

    key: str
    language: str | None = None
    units: str | None = None
    coordinates: Coordinates | None = None
    location_name: str | None = None
