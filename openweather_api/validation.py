"""
Option validation.

Every value that enters the client, whether through the constructor, a
setter, or a per-call options mapping, passes through one of these
functions. Each returns the normalized value or raises a typed
``OptionsValidationError`` before any network I/O happens.
"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Real
from typing import Any

from .config import SUPPORTED_LANGUAGES, SUPPORTED_UNITS
from .errors import (
    InvalidCoordinates,
    InvalidKey,
    InvalidLocationName,
    MalformedOptionsArgument,
    UnknownParameter,
    UnsupportedLanguage,
    UnsupportedUnits,
)
from .models import CallOptions, Coordinates

OPTION_KEYS = ("key", "language", "units", "location_name", "coordinates")


def evaluate_key(key: Any) -> str:
    if not isinstance(key, str) or not key:
        raise InvalidKey(f"Empty value cannot be a key: {key!r}")
    return key


def evaluate_language(language: Any) -> str:
    """Lower-case ``language`` and check it against the supported codes."""
    if not isinstance(language, str):
        raise UnsupportedLanguage(f"Unsupported language: {language!r}")
    language = language.lower()
    if language not in SUPPORTED_LANGUAGES:
        raise UnsupportedLanguage(f"Unsupported language: {language}")
    return language


def evaluate_units(units: Any) -> str:
    """Lower-case ``units``; only standard, metric and imperial pass."""
    if not isinstance(units, str):
        raise UnsupportedUnits(f"Unsupported units: {units!r}")
    units = units.lower()
    if units not in SUPPORTED_UNITS:
        raise UnsupportedUnits(f"Unsupported units: {units}")
    return units


def evaluate_location_name(name: Any) -> str:
    if not isinstance(name, str) or not name:
        raise InvalidLocationName(f"Empty value cannot be a location name: {name!r}")
    return name


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a valid coordinate
    return isinstance(value, Real) and not isinstance(value, bool)


def evaluate_coordinates(lat: Any, lon: Any) -> Coordinates:
    """
    Validate a latitude/longitude pair.

    Bounds are inclusive: lat in [-90, 90], lon in [-180, 180]. NaN fails
    the range check like any other out-of-range value.
    """
    if (
        _is_number(lat)
        and _is_number(lon)
        and -90 <= lat <= 90
        and -180 <= lon <= 180
    ):
        return Coordinates(lat=lat, lon=lon)
    raise InvalidCoordinates(f"Wrong coordinates: lat={lat!r}, lon={lon!r}")


def _coordinates_from_value(value: Any) -> Coordinates:
    if isinstance(value, Coordinates):
        return evaluate_coordinates(value.lat, value.lon)
    if isinstance(value, Mapping):
        return evaluate_coordinates(value.get("lat"), value.get("lon"))
    raise InvalidCoordinates(
        f"Coordinates must be a mapping with 'lat' and 'lon', got {type(value).__name__}"
    )


def parse_options(raw: Mapping[str, Any] | None) -> CallOptions:
    """
    Turn a loosely-typed options mapping into ``CallOptions``.

    Only the mapping's own keys are considered. Unknown keys are REJECTED
    with ``UnknownParameter`` naming the key. When both ``coordinates`` and
    ``location_name`` appear, the later one wins.

    Raises:
        MalformedOptionsArgument: If ``raw`` is not a mapping.
        OptionsValidationError: For any invalid value.
    """
    if raw is None:
        return CallOptions()
    if not isinstance(raw, Mapping):
        raise MalformedOptionsArgument(
            f"Provide a mapping as options, got {type(raw).__name__}"
        )

    fields: dict[str, Any] = {}
    for name, value in raw.items():
        match name:
            case "key":
                fields["key"] = evaluate_key(value)
            case "language":
                fields["language"] = evaluate_language(value)
            case "units":
                fields["units"] = evaluate_units(value)
            case "location_name":
                fields["location_name"] = evaluate_location_name(value)
                fields.pop("coordinates", None)
            case "coordinates":
                fields["coordinates"] = _coordinates_from_value(value)
                fields.pop("location_name", None)
            case _:
                raise UnknownParameter(str(name))

    return CallOptions(**fields)
