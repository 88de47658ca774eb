"""
Packaging of form fields into a parsed date/time range.
"""

import logging
from typing import Any, Mapping, Union

from .models import DateTimeRangeInput, DateTimeRangeResult
from .utils.dates import parse_instant


logger = logging.getLogger(__name__)


def format_date_time_range(
    form_data: Union[DateTimeRangeInput, Mapping[str, Any]],
) -> DateTimeRangeResult:
    """
    Build a DateTimeRangeResult from submitted form fields.

    Unlike the validator, times are used as given, so they must already be
    24-hour ``HH:mm`` strings. 12-hour strings produce ``None`` instants.
    Nothing is validated and malformed values never raise; non-string
    values are read as their ``str()`` form.

    Args:
        form_data: DateTimeRangeInput, or a mapping keyed by the form names
            (startDate, ...) or the field names (start_date, ...)

    Returns:
        DateTimeRangeResult with both instants and ``raw``, a shallow copy of
        the mapping as submitted (a model is copied in its form-name shape)
    """
    if isinstance(form_data, DateTimeRangeInput):
        fields = form_data
        raw = form_data.model_dump(by_alias=True)
    else:
        raw = dict(form_data)
        fields = DateTimeRangeInput.model_validate(raw)

    start = parse_instant(fields.start_date, fields.start_time)
    end = parse_instant(fields.end_date, fields.end_time)
    if start is None or end is None:
        logger.debug("Formatted range has an invalid instant: %r", raw)

    return DateTimeRangeResult(start_date_time=start, end_date_time=end, raw=raw)
