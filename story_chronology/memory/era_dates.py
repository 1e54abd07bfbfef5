"""Era-qualified dates - parsing free-text dates such as "BE 1000" or "SE 0005-03-12".

A date string is read as an era designator (any leading non-numeric text, which
may contain letters, symbols or bracketed tokens) followed by a year and
optional month/day qualifiers. Parsing is total: unrecognized input produces a
not-recognized ``EraDateMatch`` instead of an exception.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

# Trailing separators between the designator and the year ("[ μ ] – 1990", "BE: 12")
_ERA_TRAILING_SEPARATORS = " \t-–—:,"

# A minus sign is part of the year only when it follows whitespace ("BE -40"),
# so "BE-40" reads as era "BE", year 40.
_ERA = r"^\s*(?P<era>\D+?)"
_YEAR = r"\s*(?P<year>(?:(?<=\s)-)?\d+)"

_ERA_DATE_RULES: list[tuple[str, re.Pattern[str]]] = [
    # "BE 0010-05-01", "SE 12/3", "Third Age 1042.3.15"
    (
        "dashed",
        re.compile(_ERA + _YEAR + r"[-/.](?P<month>\d{1,2})(?:[-/.](?P<day>\d{1,2}))?\s*$"),
    ),
    # "BE 1042", "BE 1042, month 3", "BE 1042, month 3, day 15"
    (
        "worded",
        re.compile(
            _ERA
            + _YEAR
            + r"(?:\s*,?\s*month\s+(?P<month>\d{1,2}))?(?:\s*,?\s*day\s+(?P<day>\d{1,2}))?\s*$",
            re.IGNORECASE,
        ),
    ),
    # "[ μ ] – εγλ 1990 (late spring)" - first numeric run, rest ignored
    ("leading_year", re.compile(_ERA + _YEAR)),
]

_PLAIN_DATE_PATTERN = re.compile(r"^(\d{4})(?:-(\d{2})(?:-(\d{2}))?)?$")


class EraDate(BaseModel):
    """A point in story-time anchored to a named era.

    Absent month/day mean "start of the period" and are treated as 1 in
    age arithmetic.
    """

    era: str = Field(description="Era label, compared by exact text after trimming")
    year: int = Field(description="Year within the era (any sign or magnitude)")
    month: int | None = Field(default=None, description="Optional month")
    day: int | None = Field(default=None, description="Optional day of month")

    model_config = ConfigDict(frozen=True)

    @field_validator("era")
    @classmethod
    def validate_era(cls, v: str) -> str:
        """Trim the era label; a blank era is not an era-qualified date."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("EraDate requires a non-empty era")
        return stripped

    @property
    def month_or_start(self) -> int:
        """Month used for arithmetic (1 when absent)."""
        return self.month if self.month is not None else 1

    @property
    def day_or_start(self) -> int:
        """Day used for arithmetic (1 when absent)."""
        return self.day if self.day is not None else 1

    def same_era(self, other: EraDate) -> bool:
        """Check whether two dates share an era label."""
        return self.era.strip() == other.era.strip()


@dataclass(frozen=True)
class EraDateMatch:
    """Outcome of matching free text against the era-date rules.

    Either ``recognized`` with the parsed ``era_date`` and the name of the
    rule that matched, or not recognized with both left as None.
    """

    recognized: bool
    era_date: EraDate | None = None
    rule: str | None = None

    @classmethod
    def parsed(cls, era_date: EraDate, rule: str) -> EraDateMatch:
        return cls(recognized=True, era_date=era_date, rule=rule)

    @classmethod
    def not_recognized(cls) -> EraDateMatch:
        return cls(recognized=False)


def _optional_int(value: str | None) -> int | None:
    return int(value) if value is not None else None


def match_era_date(raw: str | None) -> EraDateMatch:
    """Match free text against the ordered era-date rules.

    Args:
        raw: Date text, e.g. "BE 1000" or "SE 0005-03-12".

    Returns:
        EraDateMatch; not recognized when the input is empty, has no numeric
        year, or has no era designator in front of the year.
    """
    if not raw or not isinstance(raw, str) or not raw.strip():
        return EraDateMatch.not_recognized()

    for rule_name, pattern in _ERA_DATE_RULES:
        match = pattern.match(raw)
        if not match:
            continue

        era = match.group("era").strip().rstrip(_ERA_TRAILING_SEPARATORS).strip()
        if not era:
            logger.debug("Era date %r has no era designator", raw)
            return EraDateMatch.not_recognized()

        groups = match.groupdict()
        era_date = EraDate(
            era=era,
            year=int(match.group("year")),
            month=_optional_int(groups.get("month")),
            day=_optional_int(groups.get("day")),
        )
        logger.debug("Parsed era date %r via %s rule: %s", raw, rule_name, era_date)
        return EraDateMatch.parsed(era_date, rule_name)

    logger.debug("Era date not recognized: %r", raw)
    return EraDateMatch.not_recognized()


def parse_era_date(raw: str | None) -> EraDate | None:
    """Parse free text into an era-qualified date.

    Args:
        raw: Date text such as "BE 1000", "SE 0005" or "[ μ ] – εγλ 1990".

    Returns:
        EraDate, or None if the text is not an era-qualified date.
    """
    return match_era_date(raw).era_date


def parse_plain_date(raw: str | None) -> tuple[int, int, int] | None:
    """Parse a plain ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD`` date.

    Returns:
        (year, month, day) with absent parts as 1, or None if the text does
        not have one of those shapes.
    """
    if not raw or not isinstance(raw, str):
        return None
    match = _PLAIN_DATE_PATTERN.match(raw.strip())
    if not match:
        return None
    year = int(match.group(1))
    month = int(match.group(2)) if match.group(2) else 1
    day = int(match.group(3)) if match.group(3) else 1
    return year, month, day
