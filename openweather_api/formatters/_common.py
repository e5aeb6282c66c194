"""Field helpers shared by the section formatters."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, TypeVar

from ..config import ICON_URL_TEMPLATE
from ..models import IconDict, WindDict

T = TypeVar("T")


def to_datetime(timestamp: int | None) -> datetime | None:
    """Unix timestamp → aware UTC datetime (``None`` passes through)."""
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


def truncate(entries: list[T], limit: int | float | None) -> list[T]:
    """First ``limit`` entries; ``None`` or ``math.inf`` keeps them all."""
    if limit is None or limit == math.inf:
        return list(entries)
    return list(entries[: int(max(limit, 0))])


def location_fields(payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "lat": payload.get("lat"),
        "lon": payload.get("lon"),
        "timezone": payload.get("timezone"),
        "timezone_offset": payload.get("timezone_offset"),
    }


def time_fields(entry: dict[str, Any]) -> dict[str, Any]:
    return {"dt": to_datetime(entry.get("dt")), "dt_raw": entry.get("dt")}


def timestamp_pair(entry: dict[str, Any], name: str) -> dict[str, Any]:
    """``sunrise`` → ``{"sunrise": datetime, "sunrise_raw": int}``."""
    return {name: to_datetime(entry.get(name)), f"{name}_raw": entry.get(name)}


def volume(value: Any) -> float:
    """
    Precipitation volume in mm.

    Current and hourly entries nest it as ``{"1h": x}``; daily entries
    give a bare number. Absent means no precipitation.
    """
    if isinstance(value, dict):
        return value.get("1h", 0)
    if isinstance(value, (int, float)):
        return value
    return 0


def wind_fields(entry: dict[str, Any]) -> WindDict:
    return {
        "deg": entry.get("wind_deg"),
        "gust": entry.get("wind_gust"),
        "speed": entry.get("wind_speed"),
    }


def condition_fields(entry: dict[str, Any]) -> dict[str, Any]:
    """Flatten the first ``weather`` condition into the record."""
    conditions = entry.get("weather") or [{}]
    condition = conditions[0]
    icon: IconDict | None = None
    if condition.get("icon"):
        icon = {
            "url": ICON_URL_TEMPLATE.format(icon=condition["icon"]),
            "raw": condition["icon"],
        }
    return {
        "condition_id": condition.get("id"),
        "main": condition.get("main"),
        "description": condition.get("description"),
        "icon": icon,
    }


def atmosphere_fields(entry: dict[str, Any]) -> dict[str, Any]:
    return {
        "pressure": entry.get("pressure"),
        "humidity": entry.get("humidity"),
        "dew_point": entry.get("dew_point"),
        "clouds": entry.get("clouds"),
        "uvi": entry.get("uvi"),
        "visibility": entry.get("visibility"),
    }
