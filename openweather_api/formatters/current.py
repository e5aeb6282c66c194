"""Current conditions formatter."""

from __future__ import annotations

from typing import Any

from ..models import WeatherDict
from ._common import (
    atmosphere_fields,
    condition_fields,
    location_fields,
    time_fields,
    timestamp_pair,
    volume,
    wind_fields,
)


def format_current(payload: dict[str, Any]) -> WeatherDict | None:
    """
    Format the ``current`` section.

    Returns ``None`` when the payload has no current section.
    """
    current = payload.get("current")
    if current is None:
        return None

    return {
        **location_fields(payload),
        **time_fields(current),
        "astronomical": {
            **timestamp_pair(current, "sunrise"),
            **timestamp_pair(current, "sunset"),
        },
        "weather": {
            "temp": {"cur": current.get("temp")},
            "feels_like": {"cur": current.get("feels_like")},
            **atmosphere_fields(current),
            "wind": wind_fields(current),
            "rain": volume(current.get("rain")),
            "snow": volume(current.get("snow")),
            **condition_fields(current),
        },
    }
