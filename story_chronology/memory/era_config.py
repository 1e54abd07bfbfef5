"""Era configuration models - the ordered era table of a story timeline.

Contains Pydantic models for:
- Era bounds that keep their original text ("0001") next to the parsed year
- Named eras whose position in the list is their chronological rank

and the parser that turns a timeline's free-text ``era`` field into that list.
"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

# Leading integer: "0001" -> 1, "12 AE" -> 12, "AE" -> None
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class EraYear(BaseModel):
    """A start or end bound of an era.

    The bound is stored in its original textual form so zero-padded values
    such as ``"0001"`` survive a round trip, alongside the parsed integer used
    for arithmetic. A bound that cannot be parsed keeps its text and has a
    ``value`` of None (unknown, never zero).
    """

    text: str = Field(description="Bound as originally written (e.g. '0001')")
    value: int | None = Field(default=None, description="Parsed year, None if unparseable")

    model_config = ConfigDict(frozen=True)

    @property
    def is_known(self) -> bool:
        """Check whether the bound parsed to a usable year."""
        return self.value is not None

    @classmethod
    def from_raw(cls, raw: Any) -> EraYear | None:
        """Build a bound from a raw JSON value.

        Args:
            raw: String, int or float taken from the era configuration.

        Returns:
            EraYear, or None when the raw value is absent.
        """
        if raw is None:
            return None
        if isinstance(raw, bool):
            logger.debug("Era bound is a boolean, treating as unknown: %r", raw)
            return cls(text=str(raw).lower(), value=None)
        if isinstance(raw, int):
            return cls(text=str(raw), value=raw)
        if isinstance(raw, float):
            if not math.isfinite(raw):
                return cls(text=str(raw), value=None)
            return cls(text=str(raw), value=int(raw))
        if isinstance(raw, str):
            match = _LEADING_INT.match(raw)
            value = int(match.group(1)) if match else None
            if value is None:
                logger.debug("Era bound %r is not numeric, treating as unknown", raw)
            return cls(text=raw, value=value)
        logger.debug("Unexpected era bound type %s, treating as unknown", type(raw).__name__)
        return cls(text=str(raw), value=None)


class EraConfig(BaseModel):
    """One entry in a timeline's era table.

    Eras are ordered by their position in the configuration list, never by
    their bounds: entry *i* occurs entirely before entry *i + 1*.
    """

    name: str = Field(description="Era label matched against a date's era")
    start_year: EraYear | None = Field(default=None, description="First year of the era")
    end_year: EraYear | None = Field(default=None, description="Last year of the era")

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Trim the era name and reject blank names."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Era name cannot be empty")
        return stripped

    @property
    def start_value(self) -> int | None:
        """Parsed start year, or None if unknown."""
        return self.start_year.value if self.start_year else None

    @property
    def end_value(self) -> int | None:
        """Parsed end year, or None if unknown."""
        return self.end_year.value if self.end_year else None

    @property
    def has_bounds(self) -> bool:
        """Check whether either bound was supplied."""
        return self.start_year is not None or self.end_year is not None

    def matches(self, era: str) -> bool:
        """Check whether a date's era label refers to this era (trimmed, case-sensitive)."""
        return self.name == era.strip()


def _era_from_json_item(item: Any) -> EraConfig | None:
    """Convert one item of a JSON era array, or None if it must be dropped."""
    if isinstance(item, str):
        name = item.strip()
        return EraConfig(name=name) if name else None

    if not isinstance(item, dict):
        logger.debug("Dropping era entry of type %s", type(item).__name__)
        return None

    raw_name = item.get("name")
    if not isinstance(raw_name, str) or not raw_name.strip():
        logger.debug("Dropping era entry without a name: %r", item)
        return None

    start_raw = item.get("startYear", item.get("start_year"))
    end_raw = item.get("endYear", item.get("end_year"))
    return EraConfig(
        name=raw_name,
        start_year=EraYear.from_raw(start_raw),
        end_year=EraYear.from_raw(end_raw),
    )


def _try_parse_json_eras(text: str) -> list[EraConfig] | None:
    """Try to parse text as a JSON array of eras.

    Returns:
        The parsed eras, or None if the text is not a JSON array.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, ValueError):
        logger.debug("Era configuration is not valid JSON, using comma-separated parsing")
        return None

    if not isinstance(data, list):
        logger.debug("Era configuration JSON is a %s, not a list", type(data).__name__)
        return None

    eras = [era for era in (_era_from_json_item(item) for item in data) if era is not None]
    logger.debug("Parsed %d eras from JSON configuration", len(eras))
    return eras


def parse_era_config(raw: str | None) -> list[EraConfig]:
    """Parse a timeline's era field into an ordered list of eras.

    Supports two formats:
    - JSON: ``["BE", "SE"]`` or ``[{"name": "BE", "startYear": "0001", "endYear": "1000"}]``
    - Comma-separated: ``"BE, SE"``

    JSON that fails to parse, or that is not an array, is read as
    comma-separated text instead. The output keeps the input order.

    Args:
        raw: The era configuration text. None or blank yields an empty list.

    Returns:
        Eras in chronological order (as given).
    """
    if not raw or not isinstance(raw, str) or not raw.strip():
        return []

    trimmed = raw.strip()

    if trimmed.startswith(("[", "{")):
        json_eras = _try_parse_json_eras(trimmed)
        if json_eras is not None:
            return json_eras

    eras = [EraConfig(name=segment.strip()) for segment in trimmed.split(",") if segment.strip()]
    logger.debug("Parsed %d eras from comma-separated configuration", len(eras))
    return eras


def era_names(eras: list[EraConfig]) -> list[str]:
    """Get the era order (names only) used for sorting dates."""
    return [era.name for era in eras]


def find_era_index(eras: list[EraConfig], era: str) -> int | None:
    """Find the chronological rank of an era label.

    Args:
        eras: Ordered era configuration.
        era: Era label from a date; compared after trimming.

    Returns:
        Index of the first matching era, or None if the label is not configured.
    """
    for index, config in enumerate(eras):
        if config.matches(era):
            return index
    return None


def format_era_config(eras: list[EraConfig]) -> str:
    """Serialize eras back to the text stored on a timeline.

    Plain names are written comma-separated. As soon as one era carries a
    bound (or a name contains a comma) the whole table is written as a JSON
    array, using each bound's original text so "0001" stays "0001".

    Args:
        eras: Ordered era configuration.

    Returns:
        Text that ``parse_era_config`` reads back into the same eras.
    """
    needs_json = any(era.has_bounds or "," in era.name for era in eras)
    if not needs_json:
        return ", ".join(era.name for era in eras)

    items: list[dict[str, str]] = []
    for era in eras:
        item = {"name": era.name}
        if era.start_year is not None:
            item["startYear"] = era.start_year.text
        if era.end_year is not None:
            item["endYear"] = era.end_year.text
        items.append(item)
    return json.dumps(items, ensure_ascii=False)
