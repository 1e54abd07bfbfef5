"""Pytest fixtures for Story Chronology tests."""

import logging
from collections.abc import Generator

import pytest

from story_chronology.memory.era_config import EraConfig, parse_era_config
from story_chronology.settings import Settings


@pytest.fixture(autouse=True)
def restore_root_log_handlers() -> Generator[None]:
    """Restore the root logger's handlers and level after each test.

    setup_logging() replaces root handlers; without this, tests that call it
    would leak console/file handlers into later tests.
    """
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in saved_handlers:
            handler.close()
            root_logger.removeHandler(handler)
    for handler in saved_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)


@pytest.fixture(autouse=True)
def clear_settings_cache_per_test() -> Generator[None]:
    """Clear Settings cache before each test to ensure isolation."""
    Settings.clear_cache()
    yield
    Settings.clear_cache()


@pytest.fixture(autouse=True)
def isolate_settings_file(tmp_path, monkeypatch):
    """Redirect the settings file to a temp directory.

    Without this, any test that calls Settings.load() would read or write
    the real settings.json next to the package.
    """
    settings_file = tmp_path / "settings.json"
    monkeypatch.setattr("story_chronology.settings._settings.SETTINGS_FILE", settings_file)
    return settings_file


@pytest.fixture
def settings() -> Settings:
    """Default settings, not loaded from disk."""
    return Settings()


@pytest.fixture
def bounded_eras() -> list[EraConfig]:
    """Two bounded eras: BE ends in year 10, SE starts in year 1."""
    return parse_era_config('[{"name": "BE", "endYear": "10"}, {"name": "SE", "startYear": "1"}]')


@pytest.fixture
def four_eras() -> list[EraConfig]:
    """Four eras with full bounds, in chronological order."""
    return parse_era_config(
        "["
        '{"name": "Dawn", "startYear": "1", "endYear": "100"},'
        '{"name": "Dusk", "startYear": "1", "endYear": "50"},'
        '{"name": "Night", "startYear": "1", "endYear": "30"},'
        '{"name": "New Dawn", "startYear": "0001"}'
        "]"
    )
