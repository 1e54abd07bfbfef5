"""Validation functions for Settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from story_chronology.settings._types import DATE_DISPLAY_SEPARATORS, LOG_LEVELS

if TYPE_CHECKING:
    from story_chronology.settings._settings import Settings

logger = logging.getLogger(__name__)


def validate(settings: Settings) -> bool:
    """Validate all settings fields.

    Returns:
        True if any settings were mutated during validation (e.g. a label
        trimmed), False otherwise. Callers can use this to decide whether to
        re-save the settings file.

    Raises:
        ValueError: If any field contains an invalid value.
    """
    _validate_log_level(settings)
    _validate_log_file(settings)
    _validate_strict_era_bounds(settings)
    changed = _validate_unknown_age_label(settings)
    _validate_date_display_separator(settings)
    return changed


def _validate_log_level(settings: Settings) -> None:
    """Validate log_level is a known logging level."""
    if settings.log_level not in LOG_LEVELS:
        raise ValueError(
            f"log_level must be one of {list(LOG_LEVELS.keys())}, got {settings.log_level}"
        )


def _validate_log_file(settings: Settings) -> None:
    """Validate log_file is a path string or None."""
    if settings.log_file is not None and not isinstance(settings.log_file, str):
        raise ValueError(
            f"log_file must be a path string or null, got {type(settings.log_file).__name__}"
        )


def _validate_strict_era_bounds(settings: Settings) -> None:
    """Validate strict_era_bounds is a real boolean (JSON true/false)."""
    if not isinstance(settings.strict_era_bounds, bool):
        raise ValueError(
            f"strict_era_bounds must be true or false, got {settings.strict_era_bounds!r}"
        )


def _validate_unknown_age_label(settings: Settings) -> bool:
    """Validate unknown_age_label is non-blank text; trims surrounding whitespace.

    Returns:
        True if the label was trimmed.
    """
    label = settings.unknown_age_label
    if not isinstance(label, str) or not label.strip():
        raise ValueError("unknown_age_label must be a non-empty string")
    if label != label.strip():
        logger.info("Trimming whitespace from unknown_age_label")
        settings.unknown_age_label = label.strip()
        return True
    return False


def _validate_date_display_separator(settings: Settings) -> None:
    """Validate date_display_separator is one of the supported separators."""
    if settings.date_display_separator not in DATE_DISPLAY_SEPARATORS:
        raise ValueError(
            f"date_display_separator must be one of {list(DATE_DISPLAY_SEPARATORS)}, "
            f"got {settings.date_display_separator!r}"
        )
