"""
Shared date/time helpers.
"""

from .dates import (
    DEFAULT_DATE_FORMAT,
    TimeFormatError,
    convert_to_24_hour,
    parse_instant,
)

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "TimeFormatError",
    "convert_to_24_hour",
    "parse_instant",
]
