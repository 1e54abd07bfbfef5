"""Services layer - timeline ordering and character ages for the host application.

The services wrap the temporal engine in ``story_chronology.memory`` with
settings, argument validation and logging.
"""

import logging
from dataclasses import dataclass

from story_chronology.settings import Settings

from .character_age_service import AgeResult, CharacterAgeService
from .timeline_service import TimelineService

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Dependency injection container for all services.

    Usage:
        settings = Settings.load()
        services = ServiceContainer(settings)

        ordered = services.timeline.sort_events(timeline.events, timeline)
        age = services.ages.get_age(character, event.date_data, timeline)
    """

    settings: Settings
    timeline: TimelineService
    ages: CharacterAgeService

    def __init__(self, settings: Settings | None = None):
        """Create service instances that share a Settings object.

        Args:
            settings: Application settings. If omitted, loaded via Settings.load().
        """
        self.settings = settings or Settings.load()
        self.timeline = TimelineService(self.settings)
        self.ages = CharacterAgeService(self.settings)
        logger.debug("ServiceContainer initialized")


__all__ = [
    "AgeResult",
    "CharacterAgeService",
    "ServiceContainer",
    "TimelineService",
]
