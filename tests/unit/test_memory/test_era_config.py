"""Tests for era configuration parsing."""

import pytest
from pydantic import ValidationError

from story_chronology.memory.era_config import (
    EraConfig,
    EraYear,
    era_names,
    find_era_index,
    format_era_config,
    parse_era_config,
)


class TestEraYear:
    """Tests for EraYear bound values."""

    def test_zero_padded_string_keeps_text(self) -> None:
        """Test a zero-padded bound keeps its text and parses to an int."""
        bound = EraYear.from_raw("0001")
        assert bound is not None
        assert bound.text == "0001"
        assert bound.value == 1
        assert bound.is_known is True

    def test_integer_bound(self) -> None:
        """Test an int bound uses its decimal text."""
        bound = EraYear.from_raw(250)
        assert bound is not None
        assert bound.text == "250"
        assert bound.value == 250

    def test_negative_string_bound(self) -> None:
        """Test a signed string bound parses with its sign."""
        bound = EraYear.from_raw("-40")
        assert bound is not None
        assert bound.value == -40

    def test_leading_integer_with_suffix(self) -> None:
        """Test trailing text after the number is ignored."""
        bound = EraYear.from_raw("12 AE")
        assert bound is not None
        assert bound.value == 12
        assert bound.text == "12 AE"

    def test_float_bound_truncates(self) -> None:
        """Test a float bound is truncated toward zero."""
        bound = EraYear.from_raw(10.9)
        assert bound is not None
        assert bound.value == 10

    def test_unparseable_bound_is_unknown_not_zero(self) -> None:
        """Test a non-numeric bound is unknown rather than zero."""
        bound = EraYear.from_raw("long ago")
        assert bound is not None
        assert bound.value is None
        assert bound.is_known is False
        assert bound.text == "long ago"

    def test_boolean_bound_is_unknown(self) -> None:
        """Test a boolean bound is treated as unknown."""
        bound = EraYear.from_raw(True)
        assert bound is not None
        assert bound.value is None

    def test_none_is_absent(self) -> None:
        """Test None produces no bound at all."""
        assert EraYear.from_raw(None) is None


class TestEraConfig:
    """Tests for the EraConfig model."""

    def test_name_is_trimmed(self) -> None:
        """Test era names are trimmed."""
        era = EraConfig(name="  Third Age  ")
        assert era.name == "Third Age"

    def test_blank_name_rejected(self) -> None:
        """Test a blank era name fails validation."""
        with pytest.raises(ValidationError):
            EraConfig(name="   ")

    def test_bound_values(self) -> None:
        """Test start_value and end_value expose parsed bounds."""
        era = EraConfig(name="BE", start_year=EraYear.from_raw("1"), end_year=None)
        assert era.start_value == 1
        assert era.end_value is None
        assert era.has_bounds is True

    def test_matches_is_trimmed_and_case_sensitive(self) -> None:
        """Test era matching trims but does not normalize case."""
        era = EraConfig(name="BE")
        assert era.matches(" BE ") is True
        assert era.matches("be") is False


class TestParseEraConfig:
    """Tests for parse_era_config."""

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_input_yields_empty_list(self, raw) -> None:
        """Test absent or blank input gives no eras."""
        assert parse_era_config(raw) == []

    def test_comma_separated(self) -> None:
        """Test comma-separated names become unbounded eras in order."""
        eras = parse_era_config("A,B,C")
        assert [era.name for era in eras] == ["A", "B", "C"]
        assert all(era.start_year is None and era.end_year is None for era in eras)

    def test_comma_separated_trims_and_drops_empty(self) -> None:
        """Test segments are trimmed and empty segments dropped."""
        eras = parse_era_config(" Old Age , , New Age ,")
        assert era_names(eras) == ["Old Age", "New Age"]

    def test_json_array_of_strings(self) -> None:
        """Test a JSON array of strings."""
        eras = parse_era_config('["BE", " SE "]')
        assert era_names(eras) == ["BE", "SE"]
        assert eras[0].start_year is None

    def test_json_array_of_objects_preserves_bounds(self) -> None:
        """Test bounds are kept exactly as given."""
        eras = parse_era_config('[{"name":"A","startYear":"1","endYear":"10"}]')
        assert len(eras) == 1
        assert eras[0].name == "A"
        assert eras[0].start_year is not None
        assert eras[0].start_year.text == "1"
        assert eras[0].end_year is not None
        assert eras[0].end_year.text == "10"
        assert eras[0].start_value == 1
        assert eras[0].end_value == 10

    def test_json_numeric_bounds(self) -> None:
        """Test numeric JSON bounds are accepted."""
        eras = parse_era_config('[{"name": "SE", "startYear": 1, "endYear": 300}]')
        assert eras[0].start_value == 1
        assert eras[0].end_value == 300

    def test_json_snake_case_bounds(self) -> None:
        """Test snake_case bound keys are accepted too."""
        eras = parse_era_config('[{"name": "SE", "start_year": "0005"}]')
        assert eras[0].start_year is not None
        assert eras[0].start_year.text == "0005"

    def test_json_drops_nameless_entries(self) -> None:
        """Test entries with absent, empty or non-string names are dropped."""
        eras = parse_era_config(
            '[{"name": ""}, {"startYear": "1"}, {"name": 5}, "", 7, null, {"name": "Kept"}]'
        )
        assert era_names(eras) == ["Kept"]

    def test_json_preserves_order(self) -> None:
        """Test eras are never re-sorted by their bounds."""
        eras = parse_era_config(
            '[{"name": "Late", "startYear": "900"}, {"name": "Early", "startYear": "1"}]'
        )
        assert era_names(eras) == ["Late", "Early"]

    def test_invalid_json_falls_back_to_comma_parsing(self) -> None:
        """Test malformed JSON is read as comma-separated text."""
        eras = parse_era_config("[BE, SE")
        assert era_names(eras) == ["[BE", "SE"]

    def test_json_object_falls_back_to_comma_parsing(self) -> None:
        """Test a JSON document that is not an array is read as plain text."""
        eras = parse_era_config('{"name": "BE"}')
        assert era_names(eras) == ['{"name": "BE"}']

    def test_unparseable_bound_kept_as_unknown(self) -> None:
        """Test an unparseable bound does not drop the era."""
        eras = parse_era_config('[{"name": "Myth", "startYear": "?", "endYear": "100"}]')
        assert eras[0].start_year is not None
        assert eras[0].start_value is None
        assert eras[0].end_value == 100


class TestEraHelpers:
    """Tests for era_names, find_era_index and format_era_config."""

    def test_find_era_index(self) -> None:
        """Test finding an era's rank by trimmed name."""
        eras = parse_era_config("BE, SE, NE")
        assert find_era_index(eras, "SE") == 1
        assert find_era_index(eras, " NE ") == 2
        assert find_era_index(eras, "XE") is None

    def test_format_plain_names(self) -> None:
        """Test unbounded eras are written comma-separated."""
        eras = parse_era_config("BE,SE")
        assert format_era_config(eras) == "BE, SE"

    def test_format_preserves_bound_text(self) -> None:
        """Test bounded eras round-trip with their original text."""
        raw = '[{"name": "BE", "startYear": "0001", "endYear": "0100"}, {"name": "SE"}]'
        eras = parse_era_config(raw)
        formatted = format_era_config(eras)
        assert '"0001"' in formatted
        assert parse_era_config(formatted) == eras

    def test_format_uses_json_for_names_with_commas(self) -> None:
        """Test a name containing a comma forces JSON output."""
        eras = [EraConfig(name="Age of Fire, Ash"), EraConfig(name="Calm")]
        formatted = format_era_config(eras)
        assert formatted.startswith("[")
        assert era_names(parse_era_config(formatted)) == ["Age of Fire, Ash", "Calm"]

    def test_format_empty(self) -> None:
        """Test no eras format to an empty string."""
        assert format_era_config([]) == ""
