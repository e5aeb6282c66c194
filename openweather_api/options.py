"""Merge global defaults with per-call overrides."""

from __future__ import annotations

from .errors import InvalidKey, MissingLocation
from .models import CallOptions, EffectiveOptions, GlobalOptions


def resolve_options(
    global_options: GlobalOptions,
    call_options: CallOptions,
) -> EffectiveOptions:
    """
    Build the effective options for one call.

    Fields set on ``call_options`` win; everything else falls back to the
    global value. A call-level location replaces the global location as a
    whole, so a call-level name is never paired with global coordinates.
    ``global_options`` is read, never written.

    Raises:
        InvalidKey: If neither side provides a key.
        MissingLocation: If neither side provides a location.
    """
    merged = global_options.model_dump()
    overrides = call_options.model_dump(exclude_none=True)
    if call_options.overrides_location:
        merged["coordinates"] = None
        merged["location_name"] = None
    merged.update(overrides)

    if not merged["key"]:
        raise InvalidKey("No API key configured; set one globally or pass 'key'")
    if merged["coordinates"] is None and merged["location_name"] is None:
        raise MissingLocation(
            "No location configured; set coordinates or a location name"
        )

    return EffectiveOptions(**merged)
