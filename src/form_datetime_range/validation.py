"""
Start/end ordering checks for date/time range forms.
"""

import logging
from datetime import datetime
from typing import Optional

from .models import RangeCheck
from .utils.dates import TimeFormatError, convert_to_24_hour, parse_instant


logger = logging.getLogger(__name__)


def _is_later(end: datetime, start: datetime) -> bool:
    # Compare as real instants so wall-clock times inside a DST gap shift forward
    try:
        return end.astimezone() > start.astimezone()
    except (OverflowError, OSError):
        # Years outside what the platform's local time rules cover
        return end > start


def check_date_time_range(
    start_date: Optional[str],
    start_time: Optional[str],
    end_date: Optional[str],
    end_time: Optional[str],
) -> RangeCheck:
    """
    Check that the end date/time is strictly after the start date/time.

    Times are 12-hour strings (``9:00 AM``) and are normalized to 24-hour
    form before being combined with their dates. An incomplete range is
    reported as valid, since there is nothing to compare yet.

    Args:
        start_date: Start date (yyyy-MM-dd)
        start_time: Start time (h:mm AM|PM)
        end_date: End date (yyyy-MM-dd)
        end_time: End time (h:mm AM|PM)

    Returns:
        RangeCheck with the decision and, unless the range passed outright,
        the reason for it
    """
    fields = {
        "start date": start_date,
        "start time": start_time,
        "end date": end_date,
        "end time": end_time,
    }
    missing = [name for name, value in fields.items() if not value]
    if missing:
        logger.debug("Range not checked, missing: %s", ", ".join(missing))
        return RangeCheck(valid=True, reason=f"incomplete: {', '.join(missing)} missing")

    try:
        start_clock = convert_to_24_hour(start_time)
    except TimeFormatError as e:
        logger.debug("Invalid start time: %s", e)
        return RangeCheck(
            valid=False,
            reason=f"start time {start_time!r} is not a valid 12-hour time",
        )
    try:
        end_clock = convert_to_24_hour(end_time)
    except TimeFormatError as e:
        logger.debug("Invalid end time: %s", e)
        return RangeCheck(
            valid=False,
            reason=f"end time {end_time!r} is not a valid 12-hour time",
        )

    start = parse_instant(start_date, start_clock)
    end = parse_instant(end_date, end_clock)

    if start is None:
        return RangeCheck(
            valid=False,
            reason=f"start date/time '{start_date}T{start_clock}' could not be parsed",
            end=end,
        )
    if end is None:
        return RangeCheck(
            valid=False,
            reason=f"end date/time '{end_date}T{end_clock}' could not be parsed",
            start=start,
        )

    if _is_later(end, start):
        return RangeCheck(valid=True, start=start, end=end)

    logger.debug("Range rejected: %s is not after %s", end, start)
    return RangeCheck(
        valid=False, reason="end must be after start", start=start, end=end
    )


def validate_date_time_range(
    start_date: Optional[str],
    start_time: Optional[str],
    end_date: Optional[str],
    end_time: Optional[str],
) -> bool:
    """Return True unless a complete range ends at or before its start.

    Malformed dates or times count as an invalid range.
    """
    return check_date_time_range(start_date, start_time, end_date, end_time).valid
