"""Summaries API endpoint.

GET /api/summaries - Get the per-year summary table
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from econmap.api.app import get_dashboard_session
from econmap.api.payloads import build_summary_detail
from econmap.core.session import DashboardSession
from econmap.models.types import YearSummaryDetail

router = APIRouter()


@router.get("/summaries", response_model=list[YearSummaryDetail])
def list_summaries(
    session: DashboardSession = Depends(get_dashboard_session),
) -> list[YearSummaryDetail]:
    """Get the summary table, ascending by year.

    Args:
        session: Dashboard session (injected).

    Returns:
        One YearSummaryDetail per year with data.
    """
    return [build_summary_detail(summary) for summary in session.summaries]
