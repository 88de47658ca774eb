"""
Pydantic models for date/time range form data.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DateTimeRangeInput(BaseModel):
    """The four raw date/time strings submitted with a form."""

    model_config = ConfigDict(populate_by_name=True)

    start_date: str = Field(
        default="", alias="startDate", description="Start date (yyyy-MM-dd)"
    )
    start_time: str = Field(
        default="", alias="startTime", description="Start time (h:mm AM|PM)"
    )
    end_date: str = Field(
        default="", alias="endDate", description="End date (yyyy-MM-dd)"
    )
    end_time: str = Field(
        default="", alias="endTime", description="End time (h:mm AM|PM)"
    )

    @field_validator("*", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        # Unset form fields arrive as None, anything else is read as text
        return "" if value is None else str(value)


class DateTimeRangeResult(BaseModel):
    """Parsed start/end instants plus the raw strings they came from."""

    start_date_time: Optional[datetime] = Field(
        default=None, description="Start instant, None when it could not be parsed"
    )
    end_date_time: Optional[datetime] = Field(
        default=None, description="End instant, None when it could not be parsed"
    )
    raw: Dict[str, Any] = Field(
        ..., description="Verbatim copy of the submitted fields"
    )


class RangeCheck(BaseModel):
    """Outcome of a range validation, with the reason when it is not a plain pass."""

    valid: bool
    reason: Optional[str] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None

    def __bool__(self) -> bool:
        return self.valid
