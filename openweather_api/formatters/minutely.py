"""Minute-by-minute precipitation formatter."""

from __future__ import annotations

from typing import Any

from ..models import WeatherDict
from ._common import location_fields, time_fields, truncate


def format_minutely(
    payload: dict[str, Any], limit: int | float | None = None
) -> list[WeatherDict]:
    """One record per minute; only precipitation is reported upstream."""
    return [
        {
            **location_fields(payload),
            **time_fields(minute),
            "weather": {"rain": minute.get("precipitation", 0)},
        }
        for minute in truncate(payload.get("minutely") or [], limit)
    ]
