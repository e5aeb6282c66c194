"""
Response Formatters

Each module turns one section of a raw One Call payload into formatted
weather records. Formatters are pure: they never mutate the payload, never
perform I/O, and truncate list sections to ``limit`` without failing when
fewer entries exist.

To add a formatter for a new section:
1. Create formatters/newsection.py with a ``format_newsection`` function
2. Import it here and add it to ``__all__``
"""

from .current import format_current
from .daily import format_daily
from .hourly import format_hourly
from .minutely import format_minutely

__all__ = [
    "format_current",
    "format_daily",
    "format_hourly",
    "format_minutely",
]
