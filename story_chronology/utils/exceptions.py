"""Centralized exception hierarchy for Story Chronology.

Exception Hierarchy:

    StoryChronologyError (base for all application errors)
    └── ConfigError (settings parsing/validation failures)

The temporal engine itself (era parsing, sort keys, age calculation) never
raises: unresolvable input yields None, an empty list or a sentinel sort value.
These exceptions cover the surrounding application layer only.

Usage:
    from story_chronology.utils.exceptions import ConfigError

    try:
        settings = Settings.load()
    except ConfigError:
        logger.error("Settings file is invalid")
"""

import logging

logger = logging.getLogger(__name__)


class StoryChronologyError(Exception):
    """Base exception for all Story Chronology errors.

    All custom exceptions should inherit from this class to allow
    catching all application-specific errors with a single except clause.
    """

    pass


class ConfigError(StoryChronologyError):
    """Raised when configuration parsing or validation fails.

    This indicates a settings file that cannot be loaded into valid
    Settings, for example a field holding a value of the wrong type.

    Attributes:
        setting_name: The offending setting, when known.
    """

    def __init__(self, message: str, setting_name: str | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human-readable description of the failure.
            setting_name: Name of the setting that failed, if known.
        """
        super().__init__(message)
        self.setting_name = setting_name
