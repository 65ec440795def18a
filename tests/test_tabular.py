"""Tests for tabular observation loading."""

from pathlib import Path

import pytest

from econmap.adapter.tabular import ObservationParseError, load_observations, parse_rows

SAVINGS = "Gross savings (% of GDP)"


class TestLoadObservations:
    """Test loading from a CSV file."""

    def test_loads_rows_in_file_order(self, demo_csv):
        observations = load_observations(demo_csv, [SAVINGS])
        assert [(o.country, o.year) for o in observations] == [
            ("France", 2018),
            ("France", 2019),
            ("Brazil", 2018),
            ("Brazil", 2019),
            ("World", 2019),
        ]

    def test_numeric_values_parsed(self, demo_csv):
        observations = load_observations(demo_csv, [SAVINGS])
        assert observations[0].value(SAVINGS) == 22.9
        assert observations[0].code == "FRA"

    def test_empty_cell_is_missing(self, demo_csv):
        """Brazil 2019 has an empty cell."""
        observations = load_observations(demo_csv, [SAVINGS])
        assert observations[3].value(SAVINGS) is None

    def test_na_token_is_missing_and_empty_code_is_none(self, demo_csv):
        world = load_observations(demo_csv, [SAVINGS])[4]
        assert world.value(SAVINGS) is None
        assert world.code is None

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_observations(tmp_path / "nope.csv", [SAVINGS])

    def test_missing_indicator_column_raises(self, demo_csv):
        with pytest.raises(ObservationParseError) as exc_info:
            load_observations(demo_csv, ["Net savings"])
        assert exc_info.value.line == 1
        assert exc_info.value.column == "Net savings"

    def test_byte_order_mark_tolerated(self, tmp_path: Path):
        path = tmp_path / "bom.csv"
        path.write_text(f"\ufeffEntity,Year,{SAVINGS}\nChile,2019,20.5\n", encoding="utf-8")
        observations = load_observations(path, [SAVINGS])
        assert observations[0].country == "Chile"


class TestParseRows:
    """Test row conversion."""

    def test_bad_number_raises_with_location(self):
        rows = [
            {"Entity": "A", "Year": "2019", "x": "1.0"},
            {"Entity": "B", "Year": "2019", "x": "lots"},
        ]
        with pytest.raises(ObservationParseError) as exc_info:
            parse_rows(rows, ["x"])
        assert exc_info.value.line == 3
        assert exc_info.value.column == "x"
        assert exc_info.value.value == "lots"

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_rows([{"Entity": "A", "Year": "soon", "x": "1"}], ["x"])

    def test_empty_country_raises(self):
        with pytest.raises(ObservationParseError, match="empty country"):
            parse_rows([{"Entity": " ", "Year": "2019", "x": "1"}], ["x"])

    def test_missing_column_in_row_raises(self):
        with pytest.raises(ObservationParseError, match="missing column"):
            parse_rows([{"Entity": "A", "Year": "2019"}], ["x"])

    @pytest.mark.parametrize("cell", ["", "  ", "NA", "n/a", "NaN", "..", None])
    def test_missing_tokens(self, cell):
        observations = parse_rows([{"Entity": "A", "Year": "2019", "x": cell}], ["x"])
        assert observations[0].value("x") is None

    def test_zero_is_not_missing(self):
        observations = parse_rows([{"Entity": "A", "Year": "2019", "x": "0"}], ["x"])
        assert observations[0].value("x") == 0.0

    def test_custom_columns(self):
        rows = [{"country": "A", "yr": "2001", "x": "2.5"}]
        observations = parse_rows(rows, ["x"], country_column="country", year_column="yr")
        assert observations[0].year == 2001
        assert observations[0].code is None

    def test_only_requested_indicators_kept(self):
        rows = [{"Entity": "A", "Year": "2019", "x": "1", "y": "2"}]
        observations = parse_rows(rows, ["x"])
        assert observations[0].indicators == frozenset({"x"})
