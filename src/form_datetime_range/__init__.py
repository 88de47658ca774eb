"""
Form Date/Time Range

Helpers for validating and parsing the start/end date and time fields of a form.
"""

__version__ = "1.0.0"

# Import main components for easier access
from .utils.dates import (
    DEFAULT_DATE_FORMAT,
    TimeFormatError,
    convert_to_24_hour,
    parse_instant,
)
from .models import DateTimeRangeInput, DateTimeRangeResult, RangeCheck
from .validation import check_date_time_range, validate_date_time_range
from .formatting import format_date_time_range

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "TimeFormatError",
    "convert_to_24_hour",
    "parse_instant",
    "DateTimeRangeInput",
    "DateTimeRangeResult",
    "RangeCheck",
    "check_date_time_range",
    "validate_date_time_range",
    "format_date_time_range",
]
