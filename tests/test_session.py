"""Tests for dashboard session wiring."""

import pytest

from econmap.core.session import DEFAULT_YEAR, DashboardSession, UnknownIndicator
from econmap.core.settings import Settings
from econmap.selection.controller import InvalidYear

SAVINGS = "sGross"
GROWTH = "gdpGrowth"


class TestSessionConstruction:
    """Test session setup."""

    def test_summaries_computed_once(self, dashboard):
        assert [s.year for s in dashboard.summaries] == [2017, 2018, 2019]
        assert dashboard.summaries is dashboard.summaries

    def test_years_follow_summaries(self, dashboard):
        assert dashboard.years == (2017, 2018, 2019)
        assert dashboard.current_year == 2019

    def test_initial_year(self, observations):
        session = DashboardSession(observations, [SAVINGS], initial_year=2017)
        assert session.current_year == 2017

    def test_empty_session_uses_default_year(self):
        session = DashboardSession([], [SAVINGS])
        assert session.summaries == ()
        assert session.years == (DEFAULT_YEAR,)
        assert session.current_year == DEFAULT_YEAR

    def test_requires_indicator(self, observations):
        with pytest.raises(ValueError):
            DashboardSession(observations, [])

    def test_rejects_bad_top_n(self, observations):
        with pytest.raises(ValueError):
            DashboardSession(observations, [SAVINGS], top_n=0)

    def test_from_settings(self, demo_csv):
        indicator = "Gross savings (% of GDP)"
        settings = Settings(data_path=demo_csv, indicators=(indicator,), initial_year=2018)
        session = DashboardSession.from_settings(settings)
        assert session.years == (2018, 2019)
        assert session.current_year == 2018
        assert session.summary_for(2019).mean(indicator) == 23.7


class TestSessionSelection:
    """Test selection through the session."""

    def test_select_notifies_views(self, dashboard):
        map_view, chart_view = [], []
        dashboard.controller.subscribe(map_view.append)
        dashboard.controller.subscribe(chart_view.append)

        dashboard.select(2018)

        assert map_view == [2018]
        assert chart_view == [2018]

    def test_invalid_select_leaves_views(self, dashboard):
        received = []
        dashboard.controller.subscribe(received.append)

        with pytest.raises(InvalidYear):
            dashboard.select(2020)

        assert received == []
        assert dashboard.current_year == 2019

    def test_reset_redraws_current_year(self, dashboard):
        received = []
        dashboard.controller.subscribe(received.append)
        dashboard.select(2017)

        dashboard.reset()

        assert received == [2017, 2017]


class TestSessionViews:
    """Test per-year view data."""

    def test_snapshot_for_current_year(self, dashboard):
        dashboard.select(2018)
        snapshot = dashboard.snapshot(SAVINGS)

        assert snapshot.year == 2018
        assert snapshot.summary.mean(SAVINGS) == 15.0
        assert snapshot.values == {"A": 10.0, "B": 20.0}
        assert [r.country for r in snapshot.top] == ["B", "A"]
        assert snapshot.extent == (10.0, 20.0)

    def test_snapshot_defaults_to_first_indicator(self, dashboard):
        assert dashboard.snapshot().indicator == SAVINGS

    def test_snapshot_missing_year_data(self, dashboard):
        snapshot = dashboard.snapshot(SAVINGS, year=2019)
        assert snapshot.summary.mean(SAVINGS) is None
        assert snapshot.values == {"A": None, "B": None}
        assert snapshot.top == []
        assert snapshot.extent is None

    def test_snapshot_unknown_indicator(self, dashboard):
        with pytest.raises(UnknownIndicator):
            dashboard.snapshot("inflation")

    def test_snapshot_invalid_year(self, dashboard):
        with pytest.raises(InvalidYear):
            dashboard.snapshot(SAVINGS, year=1990)

    def test_snapshot_does_not_change_selection(self, dashboard):
        dashboard.snapshot(SAVINGS, year=2017)
        assert dashboard.current_year == 2019

    def test_top_limit(self, dashboard):
        assert len(dashboard.top(2018, SAVINGS, limit=1)) == 1

    def test_values_unknown_indicator(self, dashboard):
        with pytest.raises(UnknownIndicator):
            dashboard.values(2018, "inflation")
