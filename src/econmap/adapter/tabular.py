"""Tabular observation loading.

Adapter for turning OWID-style CSV rows (Entity, Code, Year, indicator
columns) into Observations. Empty cells and "not available" tokens become
missing values; anything else that fails to parse is an error.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, Mapping

from econmap.models.domain import Observation

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY_COLUMN = "Entity"
DEFAULT_CODE_COLUMN = "Code"
DEFAULT_YEAR_COLUMN = "Year"

# Cell contents read as "no data" (compared case-insensitively)
MISSING_TOKENS = frozenset({"", "na", "n/a", "nan", ".."})


class ObservationParseError(ValueError):
    """Raised when a row cannot be turned into an Observation.

    Attributes:
        line: 1-based source line (header is line 1), if known.
        column: Offending column name, if known.
        value: Offending cell content, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        column: str | None = None,
        value: str | None = None,
    ):
        self.line = line
        self.column = column
        self.value = value
        location = f"line {line}: " if line is not None else ""
        super().__init__(f"{location}{message}")


def _is_missing(cell: str | None) -> bool:
    return cell is None or cell.strip().lower() in MISSING_TOKENS


def parse_value(cell: str | None, *, line: int, column: str) -> float | None:
    """Parse an indicator cell.

    Returns:
        The float value, or None when the cell marks missing data.

    Raises:
        ObservationParseError: If the cell is neither missing nor numeric.
    """
    if _is_missing(cell):
        return None
    try:
        return float(cell.strip())
    except ValueError as e:
        raise ObservationParseError(
            f"{column!r} is not a number: {cell!r}", line=line, column=column, value=cell
        ) from e


def parse_rows(
    rows: Iterable[Mapping[str, str | None]],
    indicators: Iterable[str],
    *,
    country_column: str = DEFAULT_COUNTRY_COLUMN,
    year_column: str = DEFAULT_YEAR_COLUMN,
    code_column: str = DEFAULT_CODE_COLUMN,
) -> list[Observation]:
    """Convert string-keyed rows into Observations.

    Args:
        rows: Rows as produced by csv.DictReader.
        indicators: Indicator columns to keep.
        country_column: Column holding the country name.
        year_column: Column holding the year.
        code_column: Optional column holding the ISO code.

    Returns:
        Observations in source order.

    Raises:
        ObservationParseError: On a missing column, empty country, bad year
            or non-numeric indicator value.
    """
    indicator_names = list(dict.fromkeys(indicators))
    required = [country_column, year_column, *indicator_names]
    observations: list[Observation] = []

    # Header is line 1, first data row is line 2
    for line, row in enumerate(rows, start=2):
        for column in required:
            if column not in row:
                raise ObservationParseError(
                    f"missing column {column!r}", line=line, column=column
                )

        country = (row[country_column] or "").strip()
        if not country:
            raise ObservationParseError("empty country", line=line, column=country_column)

        year_cell = (row[year_column] or "").strip()
        try:
            year = int(year_cell)
        except ValueError as e:
            raise ObservationParseError(
                f"year is not an integer: {year_cell!r}",
                line=line,
                column=year_column,
                value=year_cell,
            ) from e

        code_cell = row.get(code_column)
        code = None if _is_missing(code_cell) else code_cell.strip()

        values = {
            name: parse_value(row[name], line=line, column=name) for name in indicator_names
        }
        observations.append(Observation(country=country, year=year, values=values, code=code))

    return observations


def load_observations(
    path: Path,
    indicators: Iterable[str],
    **columns: str,
) -> list[Observation]:
    """Load Observations from a local CSV file.

    Args:
        path: CSV file with a header row.
        indicators: Indicator columns to keep.
        **columns: Column name overrides passed to parse_rows().

    Returns:
        Observations in file order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ObservationParseError: If a row cannot be parsed.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Observation file not found: {path}")

    with path.open(newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        header = reader.fieldnames or []
        indicator_names = list(indicators)

        for column in indicator_names:
            if column not in header:
                raise ObservationParseError(f"missing column {column!r}", line=1, column=column)

        observations = parse_rows(reader, indicator_names, **columns)

    logger.info(f"Loaded {len(observations)} observations from {path}")
    return observations
