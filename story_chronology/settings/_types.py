"""Type definitions and constants for Story Chronology settings."""

LOG_LEVELS: dict[str, str] = {
    "DEBUG": "Debug",
    "INFO": "Info",
    "WARNING": "Warning",
    "ERROR": "Error",
}

# Separators allowed between date parts when displaying exact dates
DATE_DISPLAY_SEPARATORS: tuple[str, ...] = ("-", "/", ".")
