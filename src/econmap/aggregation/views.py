"""Per-year view data for the map and bar chart.

The map colours each country by its value for the selected year; the bar
chart ranks the top countries for that year. Both read the same
observations and never touch selection state.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from econmap.aggregation.summary import present_value
from econmap.models.domain import Observation, RankedValue

# Bars shown by the chart view
DEFAULT_TOP_LIMIT = 20


def available_years(observations: Iterable[Observation]) -> list[int]:
    """Return the distinct observation years in ascending order."""
    return sorted({observation.year for observation in observations})


def values_for_year(
    observations: Iterable[Observation],
    year: int,
    indicator: str,
) -> dict[str, float | None]:
    """Map each country observed in a year to its indicator value.

    Countries with a row for the year but no value map to None so the map
    can show "N/A" instead of a zero fill. Countries without a row for the
    year are absent.

    Args:
        observations: Parsed observation rows.
        year: Year to select.
        indicator: Indicator to read.

    Returns:
        Dict of country -> value (None when missing).
    """
    values: dict[str, float | None] = {}
    for observation in observations:
        if observation.year != year:
            continue
        value = present_value(observation.value(indicator))
        # A later present value wins over an earlier missing one
        if value is not None or observation.country not in values:
            values[observation.country] = value
    return values


def top_countries(
    observations: Iterable[Observation],
    year: int,
    indicator: str,
    limit: int = DEFAULT_TOP_LIMIT,
) -> list[RankedValue]:
    """Rank countries by indicator value for a year.

    Missing values are excluded. Ordering is descending by value, ties
    broken by country name.

    Args:
        observations: Parsed observation rows.
        year: Year to rank.
        indicator: Indicator to rank by.
        limit: Maximum number of entries.

    Returns:
        At most ``limit`` RankedValue entries, rank starting at 1.

    Raises:
        ValueError: If limit is less than 1.
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1, got {limit}")

    present: list[tuple[str, float, str | None]] = []
    for observation in observations:
        if observation.year != year:
            continue
        value = present_value(observation.value(indicator))
        if value is not None:
            present.append((observation.country, value, observation.code))

    present.sort(key=lambda row: (-row[1], row[0]))

    return [
        RankedValue(rank=index, country=country, value=value, code=code)
        for index, (country, value, code) in enumerate(present[:limit], start=1)
    ]


def value_extent(
    observations: Iterable[Observation],
    indicator: str,
    year: int | None = None,
) -> tuple[float, float] | None:
    """Return (min, max) of the present values of an indicator.

    Args:
        observations: Parsed observation rows.
        indicator: Indicator to measure.
        year: Optional year restriction.

    Returns:
        Tuple of (min, max), or None when no value is present.
    """
    values = [
        value
        for value in (
            present_value(observation.value(indicator))
            for observation in observations
            if year is None or observation.year == year
        )
        if value is not None
    ]
    if not values:
        return None

    array = np.asarray(values, dtype=float)
    return float(array.min()), float(array.max())
