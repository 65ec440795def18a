"""Dashboard session wiring.

A session owns the loaded observations, the summary table computed once at
load, and the selection controller shared by the map and chart views.

Architecture:
- DashboardSession: read-only data + one SelectionController
- YearSnapshot: everything a view needs to draw one year
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from econmap.adapter.tabular import load_observations
from econmap.aggregation.summary import aggregate
from econmap.aggregation.views import (
    DEFAULT_TOP_LIMIT,
    top_countries,
    value_extent,
    values_for_year,
)
from econmap.core.settings import Settings
from econmap.models.domain import Observation, RankedValue, YearSummary
from econmap.selection.controller import InvalidYear, SelectionController

logger = logging.getLogger(__name__)

# Selected year when no observations are loaded
DEFAULT_YEAR = 2019


class UnknownIndicator(ValueError):
    """Raised when an indicator is not tracked by the session."""

    def __init__(self, indicator: str, indicators: Iterable[str]):
        self.indicator = indicator
        self.indicators = tuple(indicators)
        super().__init__(f"Unknown indicator {indicator!r} (tracked: {', '.join(self.indicators)})")


@dataclass(frozen=True)
class YearSnapshot:
    """View data for one indicator and year.

    Attributes:
        year: Year being shown.
        indicator: Indicator being shown.
        summary: Summary row for the year, None if the year has no rows.
        values: Country -> value for the map (None when missing).
        top: Ranked countries for the bar chart.
        extent: (min, max) of present values for the year, or None.
    """

    year: int
    indicator: str
    summary: YearSummary | None
    values: dict[str, float | None]
    top: list[RankedValue]
    extent: tuple[float, float] | None


class DashboardSession:
    """Observations, their summary table and the shared selection.

    Args:
        observations: Parsed observation rows.
        indicators: Indicators tracked by the dashboard (at least one).
        initial_year: Starting year; falls back to the latest year.
        top_n: Default number of ranked countries.

    Raises:
        ValueError: If no indicator is given or top_n < 1.
    """

    def __init__(
        self,
        observations: Iterable[Observation],
        indicators: Iterable[str],
        initial_year: int | None = None,
        top_n: int = DEFAULT_TOP_LIMIT,
    ):
        self.indicators = tuple(dict.fromkeys(indicators))
        if not self.indicators:
            raise ValueError("at least one indicator is required")
        if top_n < 1:
            raise ValueError(f"top_n must be >= 1, got {top_n}")

        self.observations = tuple(observations)
        self.top_n = top_n

        self._by_year: dict[int, list[Observation]] = {}
        for observation in self.observations:
            self._by_year.setdefault(observation.year, []).append(observation)

        # Computed once; the source data does not change during a session
        self.summaries: tuple[YearSummary, ...] = tuple(aggregate(self.observations, self.indicators))
        self._summary_by_year = {summary.year: summary for summary in self.summaries}

        years = [summary.year for summary in self.summaries] or [DEFAULT_YEAR]
        self.controller = SelectionController(years, initial_year)

        logger.info(
            f"Session ready: {len(self.observations)} observations, "
            f"{len(self.summaries)} years, current year {self.controller.current_year}"
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> DashboardSession:
        """Load observations from the configured CSV file.

        Raises:
            FileNotFoundError: If the data file doesn't exist.
            ObservationParseError: If a row cannot be parsed.
        """
        observations = load_observations(settings.data_path, settings.indicators)
        return cls(
            observations,
            settings.indicators,
            initial_year=settings.initial_year,
            top_n=settings.top_n,
        )

    @property
    def years(self) -> tuple[int, ...]:
        return self.controller.valid_years

    @property
    def current_year(self) -> int:
        return self.controller.current_year

    def summary_for(self, year: int) -> YearSummary | None:
        return self._summary_by_year.get(year)

    def select(self, year: int) -> None:
        """Select a year on behalf of the input control."""
        self.controller.set_year(year)

    def reset(self) -> None:
        """Redraw every view at the current year."""
        self.controller.refresh()

    def values(self, year: int, indicator: str) -> dict[str, float | None]:
        """Country -> value for the map view."""
        self._check_indicator(indicator)
        return values_for_year(self._by_year.get(year, ()), year, indicator)

    def top(self, year: int, indicator: str, limit: int | None = None) -> list[RankedValue]:
        """Ranked countries for the bar chart view."""
        self._check_indicator(indicator)
        return top_countries(
            self._by_year.get(year, ()),
            year,
            indicator,
            limit=self.top_n if limit is None else limit,
        )

    def snapshot(self, indicator: str | None = None, year: int | None = None) -> YearSnapshot:
        """Build the view data for one year.

        Args:
            indicator: Indicator to show; defaults to the first tracked one.
            year: Year to show; defaults to the selected year.

        Returns:
            YearSnapshot for the year.

        Raises:
            UnknownIndicator: If the indicator is not tracked.
            InvalidYear: If the year is not selectable.
        """
        indicator = self.indicators[0] if indicator is None else indicator
        self._check_indicator(indicator)

        if year is None:
            year = self.controller.current_year
        elif not self.controller.is_valid(year):
            raise InvalidYear(year, self.years)

        rows = self._by_year.get(year, ())
        return YearSnapshot(
            year=year,
            indicator=indicator,
            summary=self.summary_for(year),
            values=values_for_year(rows, year, indicator),
            top=top_countries(rows, year, indicator, limit=self.top_n),
            extent=value_extent(rows, indicator, year=year),
        )

    def _check_indicator(self, indicator: str) -> None:
        if indicator not in self.indicators:
            raise UnknownIndicator(indicator, self.indicators)
