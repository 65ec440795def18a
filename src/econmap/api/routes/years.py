"""Per-year view data API endpoints.

GET /api/years/{year}/values - Country values for the map
GET /api/years/{year}/top - Ranked countries for the bar chart
GET /api/snapshot - Map, chart and summary data for the selected year
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from econmap.api.app import get_dashboard_session
from econmap.api.payloads import (
    build_country_values,
    build_ranked_values,
    build_snapshot_detail,
)
from econmap.core.session import DashboardSession, UnknownIndicator
from econmap.models.types import CountryValueDetail, RankedValueDetail, YearSnapshotDetail
from econmap.selection.controller import InvalidYear

router = APIRouter()


def _resolve_indicator(session: DashboardSession, indicator: str | None) -> str:
    return session.indicators[0] if indicator is None else indicator


@router.get("/years/{year}/values", response_model=list[CountryValueDetail])
def get_year_values(
    year: int,
    indicator: str | None = None,
    session: DashboardSession = Depends(get_dashboard_session),
) -> list[CountryValueDetail]:
    """Get country values for one year, sorted by country.

    Raises:
        HTTPException: 404 if the indicator is not tracked.
    """
    try:
        values = session.values(year, _resolve_indicator(session, indicator))
    except UnknownIndicator as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    return build_country_values(values)


@router.get("/years/{year}/top", response_model=list[RankedValueDetail])
def get_year_top(
    year: int,
    indicator: str | None = None,
    limit: int | None = Query(default=None, ge=1),
    session: DashboardSession = Depends(get_dashboard_session),
) -> list[RankedValueDetail]:
    """Get the top countries for one year.

    Raises:
        HTTPException: 404 if the indicator is not tracked.
    """
    try:
        ranked = session.top(year, _resolve_indicator(session, indicator), limit=limit)
    except UnknownIndicator as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    return build_ranked_values(ranked)


@router.get("/snapshot", response_model=YearSnapshotDetail)
def get_snapshot(
    indicator: str | None = None,
    year: int | None = None,
    session: DashboardSession = Depends(get_dashboard_session),
) -> YearSnapshotDetail:
    """Get map, chart and summary data for a year.

    Args:
        indicator: Indicator to show; defaults to the first tracked one.
        year: Year to show; defaults to the selected year.
        session: Dashboard session (injected).

    Raises:
        HTTPException: 404 if the indicator is not tracked,
            422 if the year is not selectable.
    """
    try:
        snapshot = session.snapshot(indicator=indicator, year=year)
    except UnknownIndicator as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except InvalidYear as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return build_snapshot_detail(snapshot)
