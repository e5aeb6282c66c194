"""Daily forecast formatter."""

from __future__ import annotations

from typing import Any

from ..models import WeatherDict
from ._common import (
    atmosphere_fields,
    condition_fields,
    location_fields,
    time_fields,
    timestamp_pair,
    truncate,
    volume,
    wind_fields,
)

_TEMP_PARTS = ("morn", "day", "eve", "night", "min", "max")
_FEELS_LIKE_PARTS = ("morn", "day", "eve", "night")


def _format_day(payload: dict[str, Any], day: dict[str, Any]) -> WeatherDict:
    temp = day.get("temp") or {}
    feels_like = day.get("feels_like") or {}
    return {
        **location_fields(payload),
        **time_fields(day),
        "astronomical": {
            **timestamp_pair(day, "sunrise"),
            **timestamp_pair(day, "sunset"),
            **timestamp_pair(day, "moonrise"),
            **timestamp_pair(day, "moonset"),
            "moon_phase": day.get("moon_phase"),
        },
        "weather": {
            "temp": {part: temp.get(part) for part in _TEMP_PARTS},
            "feels_like": {part: feels_like.get(part) for part in _FEELS_LIKE_PARTS},
            **atmosphere_fields(day),
            "wind": wind_fields(day),
            "pop": day.get("pop"),
            "rain": volume(day.get("rain")),
            "snow": volume(day.get("snow")),
            **condition_fields(day),
        },
    }


def format_daily(
    payload: dict[str, Any], limit: int | float | None = None
) -> list[WeatherDict]:
    """
    One record per day, starting with whatever the first entry is.

    Dropping today's entry is the caller's decision; see
    ``OpenWeatherAPI.get_daily_forecast``.
    """
    return [
        _format_day(payload, day)
        for day in truncate(payload.get("daily") or [], limit)
    ]
