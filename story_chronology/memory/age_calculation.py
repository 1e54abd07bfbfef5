"""Age calculation - character age at a point in story-time.

Ages are computed in whole years, either within a single era or across
several configured eras. Every unresolvable input produces "no age" (None)
together with an outcome describing why; nothing here raises for malformed
or incomplete data.

Cross-era ages are assembled from three parts:
- the remainder of the birth era (needs the birth era's end year)
- the full spans of any eras in between (need both bounds)
- the elapsed part of the event era (needs the event era's start year)

A part whose bounds are unknown contributes zero by default. In strict mode
any unknown part makes the whole age unknown instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from story_chronology.memory.era_config import EraConfig, find_era_index
from story_chronology.memory.era_dates import EraDate, parse_era_date, parse_plain_date
from story_chronology.memory.event_dates import ExactDate, coerce_event_date

logger = logging.getLogger(__name__)


class AgeOutcome(StrEnum):
    """Why an age was or was not produced."""

    KNOWN = "known"
    NOT_EXACT = "not_exact"  # Event date absent or not an exact date
    PARSE_FAILURE = "parse_failure"  # Birth date matches no recognized shape
    CONFIGURATION_GAP = "configuration_gap"  # Era missing from the era configuration
    IMPOSSIBLE_ORDERING = "impossible_ordering"  # Event era precedes birth era
    INCOMPLETE_BOUNDS = "incomplete_bounds"  # Strict mode and an era bound is unknown
    BEFORE_BIRTH = "before_birth"  # Event happens before the birth


@dataclass(frozen=True)
class CrossEraAgeBreakdown:
    """The parts of a cross-era age, each None when its era bound is unknown."""

    birth_era_remainder: int | None
    intermediate_spans: tuple[int | None, ...] = field(default_factory=tuple)
    event_era_elapsed: int | None = None

    @property
    def parts(self) -> tuple[int | None, ...]:
        return (self.birth_era_remainder, *self.intermediate_spans, self.event_era_elapsed)

    @property
    def is_complete(self) -> bool:
        """True when every part could be computed from known bounds."""
        return all(part is not None for part in self.parts)

    def total(self, strict: bool = False) -> int | None:
        """Sum the parts.

        Args:
            strict: If True, return None when any part is unknown. Otherwise
                unknown parts contribute zero.
        """
        if strict and not self.is_complete:
            return None
        return sum(part for part in self.parts if part is not None)


@dataclass(frozen=True)
class AgeEvaluation:
    """Result of an age calculation with its outcome."""

    age: int | None
    outcome: AgeOutcome
    breakdown: CrossEraAgeBreakdown | None = None

    @property
    def is_partial(self) -> bool:
        """True when a cross-era age was produced from incomplete era bounds."""
        if self.age is None or self.breakdown is None:
            return False
        return not self.breakdown.is_complete


def _birthday_not_reached(
    event_month: int, event_day: int, birth_month: int, birth_day: int
) -> bool:
    return (event_month, event_day) < (birth_month, birth_day)


def _years_between(
    birth_year: int,
    birth_month: int,
    birth_day: int,
    event_year: int,
    event_month: int,
    event_day: int,
) -> AgeEvaluation:
    age = event_year - birth_year
    if _birthday_not_reached(event_month, event_day, birth_month, birth_day):
        age -= 1
    if age < 0:
        return AgeEvaluation(age=None, outcome=AgeOutcome.BEFORE_BIRTH)
    return AgeEvaluation(age=age, outcome=AgeOutcome.KNOWN)


def calculate_cross_era_breakdown(
    birth: EraDate, event: EraDate, era_config: list[EraConfig]
) -> CrossEraAgeBreakdown | None:
    """Compute the parts of an age spanning two different eras.

    Args:
        birth: Birth date in one era.
        event: Target date in a different era.
        era_config: Eras in chronological order.

    Returns:
        The breakdown, or None when either era is not configured or the
        event era precedes the birth era.
    """
    birth_index = find_era_index(era_config, birth.era)
    event_index = find_era_index(era_config, event.era)
    if birth_index is None or event_index is None or event_index < birth_index:
        return None

    birth_era = era_config[birth_index]
    event_era = era_config[event_index]

    remainder: int | None = None
    if birth_era.end_value is not None:
        remainder = birth_era.end_value - birth.year

    spans: list[int | None] = []
    for era in era_config[birth_index + 1 : event_index]:
        if era.start_value is not None and era.end_value is not None:
            spans.append(era.end_value - era.start_value)
        else:
            logger.debug("Era %r has incomplete bounds, span unknown", era.name)
            spans.append(None)

    elapsed: int | None = None
    if event_era.start_value is not None:
        elapsed = event.year - event_era.start_value
        # Birthday not yet reached in the era's first year
        if elapsed == 0 and _birthday_not_reached(
            event.month_or_start, event.day_or_start, birth.month_or_start, birth.day_or_start
        ):
            elapsed -= 1

    return CrossEraAgeBreakdown(
        birth_era_remainder=remainder,
        intermediate_spans=tuple(spans),
        event_era_elapsed=elapsed,
    )


def _evaluate_era_age(
    birth: EraDate,
    event: EraDate,
    era_config: list[EraConfig] | None,
    strict: bool,
) -> AgeEvaluation:
    if birth.same_era(event):
        return _years_between(
            birth.year,
            birth.month_or_start,
            birth.day_or_start,
            event.year,
            event.month_or_start,
            event.day_or_start,
        )

    if not era_config:
        logger.debug("Cross-era age %s -> %s without era configuration", birth.era, event.era)
        return AgeEvaluation(age=None, outcome=AgeOutcome.CONFIGURATION_GAP)

    birth_index = find_era_index(era_config, birth.era)
    event_index = find_era_index(era_config, event.era)
    if birth_index is None or event_index is None:
        logger.debug("Era %r or %r missing from configuration", birth.era, event.era)
        return AgeEvaluation(age=None, outcome=AgeOutcome.CONFIGURATION_GAP)
    if event_index < birth_index:
        return AgeEvaluation(age=None, outcome=AgeOutcome.IMPOSSIBLE_ORDERING)

    breakdown = calculate_cross_era_breakdown(birth, event, era_config)
    if breakdown is None:
        return AgeEvaluation(age=None, outcome=AgeOutcome.CONFIGURATION_GAP)

    total = breakdown.total(strict=strict)
    if total is None:
        return AgeEvaluation(age=None, outcome=AgeOutcome.INCOMPLETE_BOUNDS, breakdown=breakdown)
    if total < 0:
        return AgeEvaluation(age=None, outcome=AgeOutcome.BEFORE_BIRTH, breakdown=breakdown)

    logger.debug("Cross-era age %s -> %s: %s = %d", birth.era, event.era, breakdown.parts, total)
    return AgeEvaluation(age=total, outcome=AgeOutcome.KNOWN, breakdown=breakdown)


def evaluate_age(
    birth_date: str | None,
    event_date: Any,
    era_config: list[EraConfig] | None = None,
    *,
    strict: bool = False,
) -> AgeEvaluation:
    """Calculate an age and report how it was (or was not) obtained.

    Args:
        birth_date: Birth date text, era-qualified ("BE 0010-05-01") or plain
            ("1990", "1990-05", "1990-05-01").
        event_date: Target date (EventDateData model or its stored mapping).
            Only exact dates yield an age.
        era_config: Eras in chronological order, needed for cross-era ages.
        strict: Make cross-era ages unknown when any era bound is unknown.

    Returns:
        AgeEvaluation with the age (None if unavailable) and its outcome.
    """
    event = coerce_event_date(event_date)
    if not isinstance(event, ExactDate):
        return AgeEvaluation(age=None, outcome=AgeOutcome.NOT_EXACT)
    if not birth_date or not isinstance(birth_date, str):
        return AgeEvaluation(age=None, outcome=AgeOutcome.PARSE_FAILURE)

    birth_era_date = parse_era_date(birth_date)
    event_era_date = event.to_era_date()
    if birth_era_date is not None and event_era_date is not None:
        return _evaluate_era_age(birth_era_date, event_era_date, era_config, strict)

    plain = parse_plain_date(birth_date)
    if plain is None:
        logger.debug("Birth date %r is not a recognized date", birth_date)
        return AgeEvaluation(age=None, outcome=AgeOutcome.PARSE_FAILURE)

    birth_year, birth_month, birth_day = plain
    return _years_between(
        birth_year,
        birth_month,
        birth_day,
        event.year,
        event.month if event.month is not None else 1,
        event.day if event.day is not None else 1,
    )


def calculate_age(
    birth_date: str | None,
    event_date: Any,
    era_config: list[EraConfig] | None = None,
    *,
    strict: bool = False,
) -> int | None:
    """Calculate age in whole years at an event date.

    Args:
        birth_date: Birth date text (era-qualified or plain).
        event_date: Target date; only exact dates yield an age.
        era_config: Eras in chronological order, needed for cross-era ages.
        strict: Make cross-era ages unknown when any era bound is unknown.

    Returns:
        Non-negative age, or None when it cannot be determined.
    """
    return evaluate_age(birth_date, event_date, era_config, strict=strict).age
