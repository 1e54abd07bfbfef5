"""Main Settings dataclass for Story Chronology.

Settings are stored in settings.json next to the package and can be edited by hand.
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, ClassVar

from story_chronology.settings import _validation as _validation_mod
from story_chronology.settings._paths import SETTINGS_FILE
from story_chronology.utils.exceptions import ConfigError

# Configure module logger
logger = logging.getLogger(__name__)


def _merge_with_defaults(data: dict[str, Any], settings_cls: type[Settings]) -> bool:
    """Merge loaded JSON data with dataclass defaults.

    - Adds missing keys with their default values
    - Removes keys that no longer exist in the dataclass

    Modifies *data* in place.

    Returns:
        True if any changes were made, False otherwise.
    """
    default_dict = asdict(settings_cls())
    known_fields = {f.name for f in fields(settings_cls)}
    changed = False

    for key in list(data):
        if key not in known_fields:
            logger.info("Removing obsolete setting: %s", key)
            del data[key]
            changed = True

    for key in known_fields:
        if key not in data:
            logger.info("Adding new setting with default: %s", key)
            data[key] = default_dict[key]
            changed = True

    return changed


def _atomic_write_json(path: Path | str, data: dict[str, Any]) -> None:
    """Write JSON to *path* atomically via a temp file + rename.

    Prevents partial writes from corrupting the settings file on disk
    failure, power loss, or process kill.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), suffix=".tmp")
    try:
        with os.fdopen(fd, "w") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, str(path))
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError as cleanup_err:
            logger.warning("Failed to remove temp settings file %s: %s", tmp_path, cleanup_err)
        raise


def _backup_corrupt_file(path: Path) -> None:
    backup_path = path.with_suffix(".json.corrupt")
    try:
        shutil.copy(path, backup_path)
        logger.info("Backed up corrupted settings to %s", backup_path)
    except OSError as copy_err:
        logger.warning("Failed to backup corrupted settings: %s", copy_err)


def _setting_named_in(error: Exception, settings_cls: type[Settings]) -> str | None:
    """Return the setting a validation message starts with, if any."""
    message = str(error)
    for field in fields(settings_cls):
        if message.startswith(f"{field.name} "):
            return field.name
    return None


@dataclass
class Settings:
    """Application settings for the temporal engine and its services."""

    # Logging
    log_level: str = "INFO"
    log_file: str | None = "default"  # "default" = logs/story_chronology.log, None = console only

    # Cross-era ages: when True, an era with unknown bounds makes the age unknown
    # instead of contributing zero years
    strict_era_bounds: bool = False

    # Display
    unknown_age_label: str = "Unknown age"
    date_display_separator: str = "-"

    def save(self) -> None:
        """Save settings to JSON file."""
        self.validate()
        _atomic_write_json(SETTINGS_FILE, asdict(self))
        logger.info("Settings saved to %s", SETTINGS_FILE)

    def validate(self) -> bool:
        """Validate all settings fields. Delegates to _validation module.

        Returns:
            True if any settings were mutated during validation, False otherwise.

        Raises:
            ValueError: If any field contains an invalid value.
        """
        return _validation_mod.validate(self)

    # Class-level cache for settings (speeds up repeated load() calls)
    _cached_instance: ClassVar[Settings | None] = None

    @classmethod
    def load(cls, use_cache: bool = True) -> Settings:
        """Load settings from JSON file, or create defaults.

        New settings get default values and removed settings are cleaned up;
        customized values are preserved. A corrupted file is backed up to
        ``settings.json.corrupt`` and replaced by defaults.

        Args:
            use_cache: If True, return cached instance if available. Set to False
                to force reload from disk (useful after save() or in tests).

        Returns:
            Settings instance.

        Raises:
            ConfigError: If a setting has an invalid type or value.
        """
        if use_cache and cls._cached_instance is not None:
            return cls._cached_instance

        loaded_from_file = False
        data: dict[str, Any] = {}

        if SETTINGS_FILE.exists():
            try:
                with open(SETTINGS_FILE, encoding="utf-8") as f:
                    raw = json.load(f)
                if isinstance(raw, dict):
                    data = raw
                    loaded_from_file = bool(data)
                else:
                    logger.error(
                        "Corrupted settings file (expected JSON object, got %s)",
                        type(raw).__name__,
                    )
                    _backup_corrupt_file(SETTINGS_FILE)
            except json.JSONDecodeError as e:
                logger.error("Corrupted settings file (invalid JSON): %s", e)
                _backup_corrupt_file(SETTINGS_FILE)
            except OSError as e:
                logger.error("Cannot read settings file (may be locked or inaccessible): %s", e)

        logger.info(
            "Settings load: loaded_from_file=%s, keys_read=%d",
            loaded_from_file,
            len(data),
        )

        changed = _merge_with_defaults(data, cls)

        try:
            settings = cls(**data)
            changed = settings.validate() or changed
        except (TypeError, ValueError) as e:
            raise ConfigError(
                f"Invalid settings in {SETTINGS_FILE}: {e}",
                setting_name=_setting_named_in(e, cls),
            ) from e

        if changed or not loaded_from_file:
            try:
                _atomic_write_json(SETTINGS_FILE, asdict(settings))
                logger.info("Settings written to %s", SETTINGS_FILE)
            except OSError as write_err:
                logger.warning(
                    "Could not persist settings to disk: %s - "
                    "settings are loaded in memory but changes will not survive restart",
                    write_err,
                )

        cls._cached_instance = settings
        return settings

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the cached settings instance.

        Use this in tests that need to verify settings loading behavior,
        or after programmatically modifying settings files.
        """
        cls._cached_instance = None
