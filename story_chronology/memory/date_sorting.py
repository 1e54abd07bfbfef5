"""Date sorting - integer sort keys for era-aware timeline ordering.

Each date is reduced to a single integer (larger = later). A date in a
configured era is offset by its era's rank. Dates whose era is missing from
the order, and plain dates with no era, still get a deterministic key, but it
is only a best-effort placement relative to era-ranked dates. The key variants
make that distinction explicit.

Ordering uses each variant's ``order`` tuple: era-ranked dates first (by era
rank, then year/month/day), then unranked dates by value, then unsortable
dates. Comparing tuples keeps the order total and keeps era precedence even
when a year is large enough to overflow its era's band.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeVar

from story_chronology.memory.event_dates import (
    ApproximateDate,
    DatePoint,
    DateRange,
    EventDateData,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Sorts after every real date
UNKNOWN_SORT_VALUE = sys.maxsize

ERA_RANK_MULTIPLIER = 1_000_000
UNKNOWN_ERA_CHAR_MULTIPLIER = 1000
YEAR_MULTIPLIER = 10_000
MONTH_MULTIPLIER = 100


class UnrankedReason(StrEnum):
    """Why a sort key could not be ranked by era."""

    UNKNOWN_ERA = "unknown_era"  # Era label not present in the era order
    NO_ERA = "no_era"  # Plain date without an era


@dataclass(frozen=True)
class RankedSortKey:
    """Key for a date whose era was found in the era order."""

    era_index: int
    value: int

    @property
    def is_trustworthy(self) -> bool:
        return True

    @property
    def offset(self) -> int:
        """Year/month/day portion of the value, without the era rank."""
        return self.value - self.era_index * ERA_RANK_MULTIPLIER

    @property
    def order(self) -> tuple[int, ...]:
        return (0, self.era_index, self.offset)


@dataclass(frozen=True)
class UnrankedSortKey:
    """Best-effort key for a date that could not be placed by era rank.

    Stable for identical input, but not guaranteed to order correctly
    against dates in other eras.
    """

    value: int
    reason: UnrankedReason

    @property
    def is_trustworthy(self) -> bool:
        return False

    @property
    def order(self) -> tuple[int, ...]:
        return (1, self.value)


@dataclass(frozen=True)
class UnsortableSortKey:
    """Key for absent or unresolved dates; always sorts last."""

    value: int = UNKNOWN_SORT_VALUE

    @property
    def is_trustworthy(self) -> bool:
        return False

    @property
    def order(self) -> tuple[int, ...]:
        return (2,)


SortKey = RankedSortKey | UnrankedSortKey | UnsortableSortKey


def _calendar_offset(point: DatePoint | ApproximateDate) -> int:
    """Year/month/day portion of a key; absent month/day count as 0."""
    year = point.year or 0
    return year * YEAR_MULTIPLIER + (point.month or 0) * MONTH_MULTIPLIER + (point.day or 0)


def _find_era_rank(era: str, era_order: Sequence[str] | None) -> int | None:
    if not era_order:
        return None
    for index, name in enumerate(era_order):
        if name.strip() == era:
            return index
    return None


def _point_sort_key(point: DatePoint | ApproximateDate, era_order: Sequence[str] | None) -> SortKey:
    offset = _calendar_offset(point)

    if point.era is None:
        return UnrankedSortKey(value=offset, reason=UnrankedReason.NO_ERA)

    era = point.era.strip()
    rank = _find_era_rank(era, era_order)
    if rank is not None:
        return RankedSortKey(era_index=rank, value=rank * ERA_RANK_MULTIPLIER + offset)

    # Configuration gap: deterministic, but not ordered against other eras
    logger.debug("Era %r not in era order, using best-effort sort key", era)
    return UnrankedSortKey(
        value=ord(era[0]) * UNKNOWN_ERA_CHAR_MULTIPLIER + offset,
        reason=UnrankedReason.UNKNOWN_ERA,
    )


def get_date_sort_key(
    date: EventDateData | None, era_order: Sequence[str] | None = None
) -> SortKey:
    """Build the sort key for a date.

    Args:
        date: Date value; ranges sort by their start, approximate dates only
            when they carry a year.
        era_order: Era names in chronological order.

    Returns:
        RankedSortKey when the date's era is in ``era_order``, UnrankedSortKey
        for unknown eras and plain dates, UnsortableSortKey otherwise.
    """
    if date is None:
        return UnsortableSortKey()
    if isinstance(date, DateRange):
        return _point_sort_key(date.start, era_order)
    if isinstance(date, ApproximateDate):
        if not date.has_year:
            return UnsortableSortKey()
        return _point_sort_key(date, era_order)
    if isinstance(date, DatePoint):
        return _point_sort_key(date, era_order)
    return UnsortableSortKey()


def get_date_sort_value(date: EventDateData | None, era_order: Sequence[str] | None = None) -> int:
    """Get the integer sort value for a date (larger = later).

    Absent and unresolved dates return ``UNKNOWN_SORT_VALUE``.
    """
    return get_date_sort_key(date, era_order).value


def compare_event_dates(
    a: EventDateData | None,
    b: EventDateData | None,
    era_order: Sequence[str] | None = None,
) -> int:
    """Three-way comparison of two dates: negative, zero or positive.

    Two dates in the same block (same ranked era, both unranked, or both
    unsortable) compare by the difference of their sort values. Otherwise the
    result is -1 or 1 following the keys' ``order`` tuples.
    """
    key_a = get_date_sort_key(a, era_order)
    key_b = get_date_sort_key(b, era_order)
    if key_a.order[:-1] == key_b.order[:-1]:
        return key_a.value - key_b.value
    return -1 if key_a.order < key_b.order else 1


def sort_by_event_date(
    items: Iterable[T],
    era_order: Sequence[str] | None = None,
    key: Callable[[T], Any] | None = None,
) -> list[T]:
    """Return items ordered by date.

    The sort is stable, so items with equal keys keep their input order.

    Args:
        items: Dates, or objects holding a date.
        era_order: Era names in chronological order.
        key: Extracts the date from an item; defaults to the item itself.

    Returns:
        New sorted list.
    """
    extract = key if key is not None else (lambda item: item)
    return sorted(items, key=lambda item: get_date_sort_key(extract(item), era_order).order)
