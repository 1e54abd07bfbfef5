#!/usr/bin/env python3
"""Story Chronology - fictional-calendar temporal engine.

Command-line access to the engine for inspecting era configurations:
- sort: order timeline events chronologically using an era table
- age: compute a character's age at a date, across eras if needed

Usage:
    python main.py sort --eras "BE, SE" events.json
    python main.py age --birth "BE 0010-05-01" --date '{"type": "exact", "era": "SE", "year": 3}' \
        --eras '[{"name": "BE", "endYear": "10"}, {"name": "SE", "startYear": "1"}]'
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from story_chronology.utils.exceptions import ConfigError
from story_chronology.utils.logging_config import log_context, setup_logging

logger = logging.getLogger(__name__)


def run_sort(eras: str | None, events_path: str) -> int:
    """Print events from a JSON file in chronological order.

    Args:
        eras: Era configuration text (comma-separated or JSON).
        events_path: Path to a JSON list of events (id, title, date_data).

    Returns:
        Process exit code.
    """
    from story_chronology.memory.timeline_entities import Timeline
    from story_chronology.services import ServiceContainer

    try:
        raw_events = json.loads(Path(events_path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Could not read events from %s: %s", events_path, e)
        print(f"Error: could not read events from {events_path}: {e}")
        return 1

    if not isinstance(raw_events, list):
        print("Error: events file must contain a JSON list")
        return 1

    try:
        timeline = Timeline(id="cli", name=Path(events_path).stem, era=eras, events=raw_events)
    except ValidationError as e:
        logger.error("Invalid events in %s: %s", events_path, e)
        print(f"Error: invalid events in {events_path} (each event needs an \"id\")")
        return 1

    services = ServiceContainer()
    ordered = services.timeline.get_timeline_events(timeline)
    keys = services.timeline.get_sort_keys(ordered, timeline)

    for i, event in enumerate(ordered, 1):
        marker = "" if keys[event.id].is_trustworthy else " ~"
        date_text = services.timeline.format_event_date(event) or "(no date)"
        print(f"{i}. {date_text}{marker}  {event.title or event.id}")
    logger.info("Printed %d events", len(ordered))
    return 0


def run_age(birth: str, date: str, eras: str | None) -> int:
    """Print a character's age at a date.

    Args:
        birth: Birth date text.
        date: Target date as a JSON object (EventDateData).
        eras: Era configuration text (comma-separated or JSON).

    Returns:
        Process exit code.
    """
    from story_chronology.memory.timeline_entities import Character
    from story_chronology.services import ServiceContainer

    services = ServiceContainer()
    character = Character(id="cli", name="CLI character", birth_date=birth)
    result = services.ages.get_age(character, date, eras)

    print(result.display)
    if result.partial:
        print("(some era spans are unknown and were counted as zero)")
    logger.info("Age outcome: %s", result.outcome)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Story Chronology - fictional calendar tools")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: from settings)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Log file path (default: from settings, use 'none' to disable)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sort_parser = subparsers.add_parser("sort", help="Order timeline events chronologically")
    sort_parser.add_argument("events", help="JSON file with a list of events")
    sort_parser.add_argument("--eras", default=None, help="Era configuration text")

    age_parser = subparsers.add_parser("age", help="Compute a character's age at a date")
    age_parser.add_argument("--birth", required=True, help="Birth date, e.g. 'BE 0010-05-01'")
    age_parser.add_argument("--date", required=True, help="Target date as a JSON object")
    age_parser.add_argument("--eras", default=None, help="Era configuration text")

    args = parser.parse_args(argv)

    from story_chronology.settings import Settings

    try:
        settings = Settings.load()
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    log_file = args.log_file if args.log_file is not None else settings.log_file
    if log_file and log_file.lower() == "none":
        log_file = None
    setup_logging(level=args.log_level or settings.log_level, log_file=log_file)

    with log_context(args.command):
        if args.command == "sort":
            return run_sort(args.eras, args.events)
        return run_age(args.birth, args.date, args.eras)


if __name__ == "__main__":
    sys.exit(main())
