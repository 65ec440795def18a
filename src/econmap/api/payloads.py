"""Conversion from domain objects to API payloads."""

from __future__ import annotations

from econmap.core.session import YearSnapshot
from econmap.models.domain import RankedValue, YearSummary
from econmap.models.types import (
    CountryValueDetail,
    RankedValueDetail,
    SelectionDetail,
    ValueExtent,
    YearSnapshotDetail,
    YearSummaryDetail,
)
from econmap.selection.controller import SelectionController


def build_summary_detail(summary: YearSummary) -> YearSummaryDetail:
    return YearSummaryDetail(
        year=summary.year,
        means=dict(summary.means),
        counts=dict(summary.counts),
    )


def build_selection_detail(controller: SelectionController) -> SelectionDetail:
    return SelectionDetail(
        year=controller.current_year,
        valid_years=list(controller.valid_years),
    )


def build_country_values(values: dict[str, float | None]) -> list[CountryValueDetail]:
    """Country values sorted by country name for stable output."""
    return [
        CountryValueDetail(country=country, value=values[country]) for country in sorted(values)
    ]


def build_ranked_values(ranked: list[RankedValue]) -> list[RankedValueDetail]:
    return [
        RankedValueDetail(rank=row.rank, country=row.country, value=row.value, code=row.code)
        for row in ranked
    ]


def build_snapshot_detail(snapshot: YearSnapshot) -> YearSnapshotDetail:
    """Build YearSnapshotDetail from a YearSnapshot.

    Args:
        snapshot: View data for one year.

    Returns:
        YearSnapshotDetail model.
    """
    extent = None
    if snapshot.extent is not None:
        extent = ValueExtent(min=snapshot.extent[0], max=snapshot.extent[1])

    return YearSnapshotDetail(
        year=snapshot.year,
        indicator=snapshot.indicator,
        summary=build_summary_detail(snapshot.summary) if snapshot.summary else None,
        values=build_country_values(snapshot.values),
        top=build_ranked_values(snapshot.top),
        extent=extent,
    )
