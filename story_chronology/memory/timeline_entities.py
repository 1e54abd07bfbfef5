"""Timeline entities - the catalog records the temporal engine reads.

Timelines, their events and characters are owned and persisted by the host
application. These models only describe the fields the engine consumes.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field, field_validator

from story_chronology.memory.era_config import EraConfig, era_names, parse_era_config
from story_chronology.memory.event_dates import EventDateData, coerce_event_date

logger = logging.getLogger(__name__)


class TimelineEvent(BaseModel):
    """An event placed on a timeline."""

    id: str = Field(description="Unique event identifier")
    title: str = Field(default="", description="Event title")
    date_data: EventDateData | None = Field(default=None, description="Structured event date")
    date_text: str = Field(default="", description="Free-text date shown when no date_data")

    model_config = ConfigDict(frozen=True)

    @field_validator("date_data", mode="before")
    @classmethod
    def validate_date_data(cls, v: object) -> object:
        """Read stored date values leniently; unreadable ones become unknown dates."""
        return coerce_event_date(v)


class Timeline(BaseModel):
    """A timeline with its era configuration text and events."""

    id: str = Field(description="Unique timeline identifier")
    name: str = Field(default="", description="Timeline name")
    era: str | None = Field(
        default=None,
        description="Era configuration: comma-separated names or a JSON array of eras",
    )
    events: list[TimelineEvent] = Field(default_factory=list, description="Timeline events")

    model_config = ConfigDict(frozen=True)

    @property
    def era_config(self) -> list[EraConfig]:
        """Parsed era configuration, in chronological order."""
        return parse_era_config(self.era)

    @property
    def era_order(self) -> list[str]:
        """Era names in chronological order."""
        return era_names(self.era_config)


class Character(BaseModel):
    """A character whose age can be computed on a timeline."""

    id: str = Field(description="Unique character identifier")
    name: str = Field(description="Character name")
    birth_date: str | None = Field(
        default=None, description="Free-text birth date (e.g. 'BE 0010-05-01' or '1990-05-01')"
    )

    model_config = ConfigDict(frozen=True)
