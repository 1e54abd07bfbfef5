"""Character age service - a character's age at points in story-time."""

import logging

from pydantic import BaseModel, ConfigDict, Field

from story_chronology.memory.age_calculation import AgeOutcome, evaluate_age
from story_chronology.memory.date_sorting import sort_by_event_date
from story_chronology.memory.era_config import EraConfig, parse_era_config
from story_chronology.memory.event_dates import EventDateData
from story_chronology.memory.timeline_entities import Character, Timeline
from story_chronology.settings import Settings
from story_chronology.utils.validation import validate_not_none

logger = logging.getLogger(__name__)


class AgeResult(BaseModel):
    """A character's age at a date, ready for display."""

    age: int | None = Field(default=None, description="Age in whole years, None if unknown")
    outcome: AgeOutcome = Field(description="How the age was obtained, or why it is unknown")
    partial: bool = Field(
        default=False, description="True if some era spans were unknown and counted as zero"
    )
    display: str = Field(description="Text to show, e.g. '42' or 'Unknown age'")

    model_config = ConfigDict(frozen=True)

    @property
    def is_known(self) -> bool:
        """Check whether an age was determined."""
        return self.age is not None


class CharacterAgeService:
    """Service for computing character ages on a timeline.

    An age that cannot be determined is reported with the configured
    unknown-age label rather than as an error.
    """

    def __init__(self, settings: Settings):
        """Initialize character age service.

        Args:
            settings: Application settings.
        """
        self.settings = settings
        logger.debug("Initialized CharacterAgeService")

    def _era_config(self, timeline: Timeline | str | None) -> list[EraConfig]:
        if isinstance(timeline, Timeline):
            return timeline.era_config
        return parse_era_config(timeline)

    def get_age(
        self,
        character: Character,
        event_date: EventDateData | dict | None,
        timeline: Timeline | str | None = None,
    ) -> AgeResult:
        """Get a character's age at a date.

        Args:
            character: Character whose birth date is used.
            event_date: Target date, e.g. "now" in story-time or an event's date.
            timeline: Timeline (or its era text) supplying the era configuration.

        Returns:
            AgeResult with the age, its outcome and display text.
        """
        validate_not_none(character, "character")

        evaluation = evaluate_age(
            character.birth_date,
            event_date,
            self._era_config(timeline),
            strict=self.settings.strict_era_bounds,
        )
        if evaluation.age is None:
            logger.debug(
                "No age for character %s (%s): %s",
                character.id,
                character.birth_date,
                evaluation.outcome,
            )
            display = self.settings.unknown_age_label
        else:
            display = str(evaluation.age)

        return AgeResult(
            age=evaluation.age,
            outcome=evaluation.outcome,
            partial=evaluation.is_partial,
            display=display,
        )

    def get_ages_for_timeline(
        self, character: Character, timeline: Timeline
    ) -> dict[str, AgeResult]:
        """Get a character's age at every event of a timeline.

        Args:
            character: Character whose birth date is used.
            timeline: Timeline whose events and era configuration are used.

        Returns:
            Mapping of event ID to AgeResult, in chronological event order.
            Events sharing an ID collapse to one entry holding the age at the
            chronologically last of them.
        """
        validate_not_none(character, "character")
        validate_not_none(timeline, "timeline")

        events = sort_by_event_date(
            timeline.events, timeline.era_order, key=lambda event: event.date_data
        )
        results: dict[str, AgeResult] = {}
        for event in events:
            if event.id in results:
                logger.debug(
                    "Duplicate event ID %s on timeline %s, keeping the later event",
                    event.id,
                    timeline.id,
                )
            results[event.id] = self.get_age(character, event.date_data, timeline)
        known = sum(1 for result in results.values() if result.is_known)
        logger.info(
            "Computed ages for %s on timeline %s: %d of %d known",
            character.name,
            timeline.id,
            known,
            len(results),
        )
        return results
