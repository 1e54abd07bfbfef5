"""Settings package for Story Chronology.

- _paths.py: Path constant for the settings file
- _types.py: Allowed values for enumerated settings
- _validation.py: Settings validation functions
- _settings.py: Main Settings dataclass
"""

from story_chronology.settings._paths import SETTINGS_FILE
from story_chronology.settings._settings import Settings
from story_chronology.settings._types import DATE_DISPLAY_SEPARATORS, LOG_LEVELS

__all__ = [
    "DATE_DISPLAY_SEPARATORS",
    "LOG_LEVELS",
    "SETTINGS_FILE",
    "Settings",
]
