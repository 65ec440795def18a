"""Shared pytest fixtures for econmap tests."""

import pytest

from econmap.core.session import DashboardSession
from econmap.models.domain import Observation

SAVINGS = "sGross"
GROWTH = "gdpGrowth"


@pytest.fixture
def observations() -> list[Observation]:
    """Three years of two indicators with gaps.

    2018: savings from A and B, growth only from B
    2019: savings missing everywhere, growth from A
    2017: single row
    """
    return [
        Observation(country="B", year=2018, values={SAVINGS: 20.0, GROWTH: 3.0}, code="BBB"),
        Observation(country="A", year=2018, values={SAVINGS: 10.0, GROWTH: None}, code="AAA"),
        Observation(country="A", year=2019, values={SAVINGS: None, GROWTH: 1.5}, code="AAA"),
        Observation(country="C", year=2017, values={SAVINGS: 30.0, GROWTH: -2.0}, code="CCC"),
        Observation(country="B", year=2019, values={SAVINGS: None}, code="BBB"),
    ]


@pytest.fixture
def dashboard(observations) -> DashboardSession:
    """Session over the sample observations tracking both indicators."""
    return DashboardSession(observations, [SAVINGS, GROWTH])


@pytest.fixture
def demo_csv(tmp_path):
    """Write a small OWID-style CSV and return its path."""
    path = tmp_path / "savings.csv"
    path.write_text(
        "Entity,Code,Year,Gross savings (% of GDP)\n"
        "France,FRA,2018,22.9\n"
        "France,FRA,2019,23.7\n"
        "Brazil,BRA,2018,14.5\n"
        "Brazil,BRA,2019,\n"
        "World,,2019,NA\n",
        encoding="utf-8",
    )
    return path
