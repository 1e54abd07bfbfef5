"""Tests for era-qualified date parsing."""

import pytest
from pydantic import ValidationError

from story_chronology.memory.era_dates import (
    EraDate,
    match_era_date,
    parse_era_date,
    parse_plain_date,
)


class TestEraDate:
    """Tests for the EraDate model."""

    def test_era_is_trimmed(self) -> None:
        """Test the era label is stored trimmed."""
        date = EraDate(era="  BE ", year=10)
        assert date.era == "BE"

    def test_blank_era_rejected(self) -> None:
        """Test a blank era is not a valid EraDate."""
        with pytest.raises(ValidationError):
            EraDate(era="  ", year=10)

    def test_absent_month_day_default_to_start(self) -> None:
        """Test absent month/day are treated as 1 for arithmetic."""
        date = EraDate(era="BE", year=10)
        assert date.month is None
        assert date.day is None
        assert date.month_or_start == 1
        assert date.day_or_start == 1

    def test_same_era_is_case_sensitive(self) -> None:
        """Test era comparison is exact, not case-normalized."""
        assert EraDate(era="BE", year=1).same_era(EraDate(era="BE", year=5))
        assert not EraDate(era="BE", year=1).same_era(EraDate(era="be", year=5))


class TestParseEraDate:
    """Tests for parse_era_date and match_era_date."""

    def test_era_and_year(self) -> None:
        """Test a simple era and year."""
        date = parse_era_date("BE 1000")
        assert date == EraDate(era="BE", year=1000)

    def test_leading_zeros_do_not_change_year(self) -> None:
        """Test zero-padded years parse to their numeric value."""
        date = parse_era_date("SE 0005")
        assert date is not None
        assert date.era == "SE"
        assert date.year == 5

    def test_dashed_month_and_day(self) -> None:
        """Test ERA YYYY-MM-DD populates month and day."""
        match = match_era_date("BE 0010-05-01")
        assert match.recognized is True
        assert match.rule == "dashed"
        assert match.era_date == EraDate(era="BE", year=10, month=5, day=1)

    def test_dashed_month_only(self) -> None:
        """Test ERA YYYY-MM leaves the day absent."""
        date = parse_era_date("SE 12/3")
        assert date == EraDate(era="SE", year=12, month=3)

    def test_worded_month_and_day(self) -> None:
        """Test month/day qualifiers written out in words."""
        match = match_era_date("Third Age 1042, month 3, day 15")
        assert match.rule == "worded"
        assert match.era_date == EraDate(era="Third Age", year=1042, month=3, day=15)

    def test_symbolic_era_designator(self) -> None:
        """Test an era made of symbols and bracketed tokens."""
        date = parse_era_date("[ μ ] – εγλ 1990")
        assert date is not None
        assert date.era == "[ μ ] – εγλ"
        assert date.year == 1990

    def test_trailing_text_after_year_ignored(self) -> None:
        """Test text after the first numeric run is ignored."""
        match = match_era_date("BE 40 (late spring)")
        assert match.rule == "leading_year"
        assert match.era_date == EraDate(era="BE", year=40)

    def test_separator_before_year_is_not_part_of_era(self) -> None:
        """Test a separator between era and year is dropped."""
        assert parse_era_date("BE: 12") == EraDate(era="BE", year=12)
        assert parse_era_date("BE-12") == EraDate(era="BE", year=12)

    def test_negative_year_after_whitespace(self) -> None:
        """Test a minus sign after whitespace makes a negative year."""
        assert parse_era_date("BE -40") == EraDate(era="BE", year=-40)

    @pytest.mark.parametrize("raw", [None, "", "   ", "1990", "1990-05-01", "no year here", "-5"])
    def test_not_recognized(self, raw) -> None:
        """Test inputs without an era designator or year are not recognized."""
        match = match_era_date(raw)
        assert match.recognized is False
        assert match.era_date is None
        assert match.rule is None
        assert parse_era_date(raw) is None


class TestParsePlainDate:
    """Tests for parse_plain_date."""

    def test_full_date(self) -> None:
        """Test YYYY-MM-DD."""
        assert parse_plain_date("1990-05-17") == (1990, 5, 17)

    def test_year_and_month(self) -> None:
        """Test YYYY-MM defaults the day to 1."""
        assert parse_plain_date("1990-05") == (1990, 5, 1)

    def test_year_only(self) -> None:
        """Test YYYY defaults month and day to 1."""
        assert parse_plain_date("0010") == (10, 1, 1)

    @pytest.mark.parametrize("raw", [None, "", "BE 1990", "90", "1990-5-1", "1990/05/01"])
    def test_rejected_shapes(self, raw) -> None:
        """Test other shapes are not plain dates."""
        assert parse_plain_date(raw) is None
