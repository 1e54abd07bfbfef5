"""Event date data - the tagged date values stored on timeline events and birth fields.

These models define the structure for:
- Exact dates (optionally era-anchored)
- Date ranges (sorted by their start)
- Approximate dates (year may be absent)
- Relative and unknown dates (unresolved, sort last)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from story_chronology.memory.era_dates import EraDate

logger = logging.getLogger(__name__)


def _normalize_era(v: str | None) -> str | None:
    """A blank era means a plain (non-era) date."""
    if v is None:
        return None
    stripped = v.strip()
    return v if stripped else None


class DatePoint(BaseModel):
    """A calendar point used as the start or end of a range."""

    era: str | None = Field(default=None, description="Era label, None for a plain date")
    year: int = Field(description="Year in story calendar")
    month: int | None = Field(default=None, description="Optional month")
    day: int | None = Field(default=None, description="Optional day of month")

    model_config = ConfigDict(frozen=True)

    @field_validator("era")
    @classmethod
    def validate_era(cls, v: str | None) -> str | None:
        """Normalize a blank era to None."""
        return _normalize_era(v)

    def to_era_date(self) -> EraDate | None:
        """Convert to an EraDate, or None when the point has no era."""
        if self.era is None:
            return None
        return EraDate(era=self.era, year=self.year, month=self.month, day=self.day)

    def format_display(self, separator: str = "-") -> str:
        """Format as ``[ERA ]YYYY[-MM[-DD]]``."""
        parts = [str(self.year)]
        if self.month:
            parts.append(f"{self.month:02d}")
            if self.day:
                parts.append(f"{self.day:02d}")
        text = separator.join(parts)
        if self.era:
            return f"{self.era.strip()} {text}"
        return text


class ExactDate(DatePoint):
    """A single known date."""

    type: Literal["exact"] = "exact"


class DateRange(BaseModel):
    """A span between two dates; ordered by its start."""

    type: Literal["range"] = "range"
    start: DatePoint = Field(description="Beginning of the range")
    end: DatePoint = Field(description="End of the range")
    text: str | None = Field(default=None, description="Optional display note")

    model_config = ConfigDict(frozen=True)


class ApproximateDate(BaseModel):
    """A date known only roughly (e.g. "circa 500", "early 3rd century")."""

    type: Literal["approximate"] = "approximate"
    era: str | None = Field(default=None, description="Era label, None for a plain date")
    year: int | None = Field(default=None, description="Best-guess year, if any")
    month: int | None = Field(default=None, description="Optional month")
    day: int | None = Field(default=None, description="Optional day of month")
    year_range: tuple[int, int] | None = Field(
        default=None, description="Plausible (earliest, latest) years"
    )
    text: str = Field(default="", description="Display text for the approximation")

    model_config = ConfigDict(frozen=True)

    @field_validator("era")
    @classmethod
    def validate_era(cls, v: str | None) -> str | None:
        """Normalize a blank era to None."""
        return _normalize_era(v)

    @property
    def has_year(self) -> bool:
        """Check whether a year is present (year 0 counts)."""
        return self.year is not None


class RelativeDate(BaseModel):
    """A date expressed relative to something else ("Before the Great War")."""

    type: Literal["relative"] = "relative"
    text: str = Field(default="", description="Relative description")
    reference_event_id: str | None = Field(
        default=None, description="ID of the event this date is relative to"
    )

    model_config = ConfigDict(frozen=True)


class UnknownDate(BaseModel):
    """A date that is not known or could not be read."""

    type: Literal["unknown"] = "unknown"
    text: str | None = Field(default=None, description="Optional note (e.g. 'Date unknown')")

    model_config = ConfigDict(frozen=True)


EventDateData = Annotated[
    ExactDate | DateRange | ApproximateDate | RelativeDate | UnknownDate,
    Field(discriminator="type"),
]

_EVENT_DATE_ADAPTER: TypeAdapter[EventDateData] = TypeAdapter(EventDateData)

_EVENT_DATE_TYPES = (ExactDate, DateRange, ApproximateDate, RelativeDate, UnknownDate)


def coerce_event_date(value: Any) -> EventDateData | None:
    """Coerce a stored date value into an EventDateData model.

    Accepts an existing model, a mapping with a ``type`` key, or a JSON string
    of such a mapping. Values that do not validate become UnknownDate so that
    callers always get something they can sort (last) and display.

    Args:
        value: Raw date value from a timeline event or birth field.

    Returns:
        EventDateData, or None when the value is absent or blank.
    """
    if value is None:
        return None
    if isinstance(value, _EVENT_DATE_TYPES):
        return value

    data: Any = value
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            data = json.loads(value)
        except (json.JSONDecodeError, ValueError):
            logger.debug("Event date string is not JSON: %r", value)
            return UnknownDate(text=value.strip())

    if not isinstance(data, Mapping):
        logger.debug("Unexpected event date type %s, treating as unknown", type(data).__name__)
        return UnknownDate()

    try:
        return _EVENT_DATE_ADAPTER.validate_python(dict(data))
    except ValidationError as e:
        logger.debug("Event date %r did not validate (%d errors)", data, e.error_count())
        return UnknownDate(text=data.get("text") if isinstance(data.get("text"), str) else None)


def format_event_date(date: EventDateData | None, separator: str = "-") -> str:
    """Produce display text for a date value.

    Args:
        date: Date value to display.
        separator: Joins year, month and day of exact dates and range ends.

    Returns:
        ``[ERA ]YYYY[-MM[-DD]]`` for exact dates, ``"<start> to <end> (<text>)"``
        for ranges, the description for approximate/relative dates, the note
        or "Date unknown" for unknown dates, and "" for None.
    """
    if date is None:
        return ""
    if isinstance(date, ExactDate):
        return date.format_display(separator)
    if isinstance(date, DateRange):
        text = f"{date.start.format_display(separator)} to {date.end.format_display(separator)}"
        if date.text:
            text = f"{text} ({date.text})"
        return text
    if isinstance(date, ApproximateDate):
        if date.text:
            return date.text
        if date.has_year:
            point = DatePoint(era=date.era, year=date.year, month=date.month, day=date.day)
            return f"circa {point.format_display(separator)}"
        return ""
    if isinstance(date, RelativeDate):
        return date.text
    return date.text or "Date unknown"
