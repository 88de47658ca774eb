"""Utility helpers for turning form date/time strings into comparable instants."""

from __future__ import annotations
import logging
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)

# Shape of the date strings the form sends. Informational only, parsing
# never checks against it.
DEFAULT_DATE_FORMAT = "yyyy-MM-dd"


class TimeFormatError(ValueError):
    """Raised when a 12-hour time string has no usable hour/minute numbers."""


def convert_to_24_hour(time_str: str) -> str:
    """Convert a 12-hour ``h:mm AM|PM`` string to a zero-padded ``HH:mm`` string.

    Hours and minutes are not range checked, so ``"13:75 PM"`` becomes
    ``"25:75"``. A period marker other than exactly ``AM`` or ``PM`` leaves
    the hour as it is. A blank hour or minute token counts as zero.

    Raises:
        TimeFormatError: if the hour or minute token is not an integer.
    """
    parts = time_str.split(" ")
    clock = parts[0]
    period = parts[1] if len(parts) > 1 else None

    pieces = clock.split(":")
    if len(pieces) < 2:
        raise TimeFormatError(f"time {time_str!r} has no ':' separated minutes")
    try:
        hour = _clock_number(pieces[0])
        minutes = _clock_number(pieces[1])
    except ValueError as exc:
        raise TimeFormatError(f"time {time_str!r} is not numeric") from exc

    if period == "PM" and hour != 12:
        hour += 12
    if period == "AM" and hour == 12:
        hour = 0

    return f"{hour:02d}:{minutes:02d}"


def _clock_number(token: str) -> int:
    # A blank hour or minute ("9: PM") counts as zero
    if not token.strip():
        return 0
    return int(token)


def parse_instant(date_str: str, time_str: str) -> Optional[datetime]:
    """Parse ``<date>T<time>`` as a local date-time.

    Returns ``None`` when the combined string is not a valid ISO date-time;
    ``None`` is treated as an invalid instant by the callers.

    The result is a naive wall-clock value. Wall-clock values that fall in
    a DST gap or overlap only order correctly once converted with
    ``.astimezone()``, which is how the range check compares them.
    """
    combined = f"{date_str}T{time_str}"
    try:
        parsed = datetime.fromisoformat(combined)
    except ValueError:
        logger.debug("Could not parse %r as a date-time", combined)
        return None
    return _ensure_local(parsed)


def _ensure_local(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt
    return dt.astimezone().replace(tzinfo=None)
