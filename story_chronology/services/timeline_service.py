"""Timeline service - era-aware ordering and display of timeline events.

This service handles:
- Era configuration lookup for a timeline
- Stable chronological ordering of events using the timeline's era order
- Sort keys that flag best-effort placements
- Display text for event dates
"""

import logging

from story_chronology.memory.date_sorting import SortKey, get_date_sort_key, sort_by_event_date
from story_chronology.memory.era_config import EraConfig, era_names, parse_era_config
from story_chronology.memory.event_dates import format_event_date
from story_chronology.memory.timeline_entities import Timeline, TimelineEvent
from story_chronology.settings import Settings
from story_chronology.utils.validation import validate_not_none, validate_type

logger = logging.getLogger(__name__)


class TimelineService:
    """Service for ordering and displaying timeline events.

    Events are ordered by their structured date using the owning timeline's
    era table; events without a usable date sort last.
    """

    def __init__(self, settings: Settings):
        """Initialize timeline service.

        Args:
            settings: Application settings.
        """
        logger.debug("Initializing TimelineService")
        self.settings = settings

    def get_era_config(self, timeline: Timeline | str | None) -> list[EraConfig]:
        """Get the ordered era configuration of a timeline.

        Args:
            timeline: A Timeline, its raw era text, or None.

        Returns:
            Eras in chronological order (empty when none are configured).
        """
        if isinstance(timeline, Timeline):
            return timeline.era_config
        return parse_era_config(timeline)

    def sort_events(
        self,
        events: list[TimelineEvent],
        timeline: Timeline | str | None = None,
    ) -> list[TimelineEvent]:
        """Order events chronologically.

        Events with equal sort values keep their input order.

        Args:
            events: Events to order.
            timeline: Timeline (or its era text) supplying the era order.

        Returns:
            New list of events, earliest first.
        """
        validate_not_none(events, "events")
        validate_type(events, "events", list)

        era_order = era_names(self.get_era_config(timeline))
        ordered = sort_by_event_date(events, era_order, key=lambda event: event.date_data)
        logger.debug("Sorted %d events using %d eras", len(ordered), len(era_order))
        return ordered

    def get_timeline_events(self, timeline: Timeline) -> list[TimelineEvent]:
        """Get a timeline's own events in chronological order."""
        validate_not_none(timeline, "timeline")
        return self.sort_events(list(timeline.events), timeline)

    def get_sort_keys(
        self,
        events: list[TimelineEvent],
        timeline: Timeline | str | None = None,
    ) -> dict[str, SortKey]:
        """Get the sort key of each event, keyed by event ID.

        Callers can use ``SortKey.is_trustworthy`` to mark events whose
        position is only a best-effort placement (unknown or missing era).

        Args:
            events: Events to key.
            timeline: Timeline (or its era text) supplying the era order.

        Returns:
            Mapping of event ID to sort key.
        """
        validate_not_none(events, "events")

        era_order = era_names(self.get_era_config(timeline))
        keys = {event.id: get_date_sort_key(event.date_data, era_order) for event in events}
        untrusted = sum(1 for key in keys.values() if not key.is_trustworthy)
        if untrusted:
            logger.debug("%d of %d events have best-effort sort positions", untrusted, len(keys))
        return keys

    def format_event_date(self, event: TimelineEvent) -> str:
        """Get display text for an event's date.

        Falls back to the event's free-text date when it has no structured date.

        Args:
            event: Event to describe.

        Returns:
            Display text, possibly empty.
        """
        validate_not_none(event, "event")
        if event.date_data is None:
            return event.date_text
        return format_event_date(event.date_data, self.settings.date_display_separator)
