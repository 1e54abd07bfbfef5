"""Temporal engine data types: eras, era-qualified dates, event dates, sort keys and ages."""

from story_chronology.memory.age_calculation import (
    AgeEvaluation,
    AgeOutcome,
    CrossEraAgeBreakdown,
    calculate_age,
    calculate_cross_era_breakdown,
    evaluate_age,
)
from story_chronology.memory.date_sorting import (
    UNKNOWN_SORT_VALUE,
    RankedSortKey,
    SortKey,
    UnrankedReason,
    UnrankedSortKey,
    UnsortableSortKey,
    compare_event_dates,
    get_date_sort_key,
    get_date_sort_value,
    sort_by_event_date,
)
from story_chronology.memory.era_config import (
    EraConfig,
    EraYear,
    era_names,
    find_era_index,
    format_era_config,
    parse_era_config,
)
from story_chronology.memory.era_dates import (
    EraDate,
    EraDateMatch,
    match_era_date,
    parse_era_date,
    parse_plain_date,
)
from story_chronology.memory.event_dates import (
    ApproximateDate,
    DatePoint,
    DateRange,
    EventDateData,
    ExactDate,
    RelativeDate,
    UnknownDate,
    coerce_event_date,
    format_event_date,
)

__all__ = [
    "UNKNOWN_SORT_VALUE",
    "AgeEvaluation",
    "AgeOutcome",
    "ApproximateDate",
    "CrossEraAgeBreakdown",
    "DatePoint",
    "DateRange",
    "EraConfig",
    "EraDate",
    "EraDateMatch",
    "EraYear",
    "EventDateData",
    "ExactDate",
    "RankedSortKey",
    "RelativeDate",
    "SortKey",
    "UnknownDate",
    "UnrankedReason",
    "UnrankedSortKey",
    "UnsortableSortKey",
    "calculate_age",
    "calculate_cross_era_breakdown",
    "coerce_event_date",
    "compare_event_dates",
    "era_names",
    "evaluate_age",
    "find_era_index",
    "format_era_config",
    "format_event_date",
    "get_date_sort_key",
    "get_date_sort_value",
    "match_era_date",
    "parse_era_config",
    "parse_era_date",
    "parse_plain_date",
    "sort_by_event_date",
]
