"""Deep merge of formatted weather records."""

from __future__ import annotations

import copy
from typing import Any


def deep_merge(destination: Any, source: Any) -> Any:
    """
    Recursively merge ``source`` into ``destination`` and return the result.

    Dicts merge key by key and lists merge index by index. Anything else
    is replaced by the source value, except that ``None`` never overwrites.
    ``destination`` is modified in place; ``source`` is deep-copied in.
    """
    if source is None:
        return destination
    if isinstance(destination, dict) and isinstance(source, dict):
        for key, value in source.items():
            destination[key] = deep_merge(destination.get(key), value)
        return destination
    if isinstance(destination, list) and isinstance(source, list):
        for index, value in enumerate(source):
            if index < len(destination):
                destination[index] = deep_merge(destination[index], value)
            else:
                destination.append(copy.deepcopy(value))
        return destination
    return copy.deepcopy(source)


def merge_records(records: list[dict[str, Any]]) -> dict[str, Any]:
    """
    Merge records so the earliest one wins on conflicting fields.

    Equivalent to reversing the list and merging left to right.
    """
    merged: dict[str, Any] = {}
    for record in reversed(records):
        deep_merge(merged, record)
    return merged
