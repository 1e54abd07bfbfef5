"""Tests for the command-line entry point."""

import json

import pytest

from main import main

BOUNDED_ERAS = '[{"name": "BE", "endYear": "10"}, {"name": "SE", "startYear": "1"}]'
QUIET = ["--log-level", "WARNING", "--log-file", "none"]


class TestAgeCommand:
    """Tests for the age command."""

    def test_prints_age(self, capsys):
        """Test a cross-era age is printed."""
        exit_code = main(
            [
                *QUIET,
                "age",
                "--birth",
                "BE 5",
                "--date",
                '{"type": "exact", "era": "SE", "year": 3}',
                "--eras",
                BOUNDED_ERAS,
            ]
        )
        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "7"

    def test_prints_unknown_label(self, capsys):
        """Test an undeterminable age prints the unknown-age label."""
        exit_code = main([*QUIET, "age", "--birth", "BE 5", "--date", '{"type": "unknown"}'])
        assert exit_code == 0
        assert capsys.readouterr().out.strip() == "Unknown age"

    def test_notes_partial_age(self, capsys):
        """Test a partial age is followed by a note."""
        eras = '[{"name": "BE", "endYear": "10"}, "MID", {"name": "SE", "startYear": "1"}]'
        main(
            [
                *QUIET,
                "age",
                "--birth",
                "BE 5",
                "--date",
                '{"type": "exact", "era": "SE", "year": 3}',
                "--eras",
                eras,
            ]
        )
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "7"
        assert "counted as zero" in lines[1]


class TestSortCommand:
    """Tests for the sort command."""

    def test_prints_events_in_order(self, tmp_path, capsys):
        """Test events are printed earliest first, unresolved dates marked."""
        events_file = tmp_path / "events.json"
        events_file.write_text(
            json.dumps(
                [
                    {
                        "id": "b",
                        "title": "Second",
                        "date_data": {"type": "exact", "era": "SE", "year": 1},
                    },
                    {"id": "c", "title": "Someday"},
                    {
                        "id": "a",
                        "title": "First",
                        "date_data": {"type": "exact", "era": "BE", "year": 3},
                    },
                ]
            ),
            encoding="utf-8",
        )

        exit_code = main([*QUIET, "sort", str(events_file), "--eras", "BE, SE"])

        assert exit_code == 0
        assert capsys.readouterr().out.splitlines() == [
            "1. BE 3  First",
            "2. SE 1  Second",
            "3. (no date) ~  Someday",
        ]

    def test_missing_file(self, tmp_path, capsys):
        """Test an unreadable file returns an error code."""
        exit_code = main([*QUIET, "sort", str(tmp_path / "missing.json")])
        assert exit_code == 1
        assert "could not read events" in capsys.readouterr().out

    def test_not_a_list(self, tmp_path, capsys):
        """Test a JSON document that is not a list is rejected."""
        events_file = tmp_path / "events.json"
        events_file.write_text('{"id": "a"}', encoding="utf-8")
        assert main([*QUIET, "sort", str(events_file)]) == 1
        assert "must contain a JSON list" in capsys.readouterr().out

    def test_event_without_id(self, tmp_path, capsys):
        """Test events without an ID are rejected."""
        events_file = tmp_path / "events.json"
        events_file.write_text('[{"title": "Nameless"}]', encoding="utf-8")
        assert main([*QUIET, "sort", str(events_file)]) == 1
        assert "invalid events" in capsys.readouterr().out


class TestMain:
    """Tests for argument handling and settings errors."""

    def test_invalid_settings_file(self, isolate_settings_file, capsys):
        """Test an invalid settings file is reported and exits with an error."""
        isolate_settings_file.write_text(json.dumps({"log_level": "LOUD"}))
        exit_code = main([*QUIET, "age", "--birth", "BE 5", "--date", "{}"])
        assert exit_code == 1
        assert "Error:" in capsys.readouterr().out

    def test_log_lines_carry_command_name(self, tmp_path):
        """Test lines logged during a command use the command name as correlation id."""
        log_file = tmp_path / "chronology.log"
        main(
            [
                "--log-level",
                "INFO",
                "--log-file",
                str(log_file),
                "age",
                "--birth",
                "BE 5",
                "--date",
                '{"type": "unknown"}',
            ]
        )
        assert "[age] main: Age outcome" in log_file.read_text(encoding="utf-8")

    def test_command_required(self):
        """Test a missing command exits through argparse."""
        with pytest.raises(SystemExit):
            main([])
