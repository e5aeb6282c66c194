"""Hourly forecast formatter."""

from __future__ import annotations

from typing import Any

from ..models import WeatherDict
from ._common import (
    atmosphere_fields,
    condition_fields,
    location_fields,
    time_fields,
    truncate,
    volume,
    wind_fields,
)


def format_hourly(
    payload: dict[str, Any], limit: int | float | None = None
) -> list[WeatherDict]:
    return [
        {
            **location_fields(payload),
            **time_fields(hour),
            "weather": {
                "temp": {"cur": hour.get("temp")},
                "feels_like": {"cur": hour.get("feels_like")},
                **atmosphere_fields(hour),
                "wind": wind_fields(hour),
                "pop": hour.get("pop"),
                "rain": volume(hour.get("rain")),
                "snow": volume(hour.get("snow")),
                **condition_fields(hour),
            },
        }
        for hour in truncate(payload.get("hourly") or [], limit)
    ]
