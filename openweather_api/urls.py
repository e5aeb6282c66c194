"""
Request URL construction for the One Call and Geocoding APIs.

Query strings are built with ``urlencode`` keeping commas literal, so an
exclusion list reads ``exclude=alerts,minutely`` rather than ``%2C``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any
from urllib.parse import urlencode

from .config import API_ENDPOINT, DATA_PATH, GEO_PATH
from .models import Coordinates, EffectiveOptions


def _with_query(path: str, params: dict[str, Any]) -> str:
    base = API_ENDPOINT.rstrip("/") + "/"
    return f"{base}{path}?{urlencode(params, safe=',')}"


def build_onecall_url(
    options: EffectiveOptions,
    coordinates: Coordinates,
    exclude: Iterable[str] | None = None,
) -> str:
    """
    Build the One Call URL for resolved ``coordinates``.

    ``appid``, ``lat`` and ``lon`` are always present. ``lang``, ``units``
    and ``exclude`` are only attached when they carry a value.
    """
    params: dict[str, Any] = {
        "appid": options.key,
        "lat": coordinates.lat,
        "lon": coordinates.lon,
    }
    if options.language:
        params["lang"] = options.language
    if options.units:
        params["units"] = options.units
    sections = ",".join(exclude or ())
    if sections:
        params["exclude"] = sections
    return _with_query(DATA_PATH, params)


def build_direct_geocoding_url(name: str, key: str) -> str:
    """Place name → coordinates lookup, first match only."""
    return _with_query(f"{GEO_PATH}direct", {"q": name, "limit": 1, "appid": key})


def build_reverse_geocoding_url(coordinates: Coordinates, key: str) -> str:
    """Coordinates → place name lookup, first match only."""
    return _with_query(
        f"{GEO_PATH}reverse",
        {"lat": coordinates.lat, "lon": coordinates.lon, "limit": 1, "appid": key},
    )
