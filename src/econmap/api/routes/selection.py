"""Selection API endpoint.

GET /api/selection - Get the selected year
PUT /api/selection - Select a year (slider input)
POST /api/selection/reset - Redraw views at the selected year
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from econmap.api.app import get_dashboard_session
from econmap.api.payloads import build_selection_detail
from econmap.core.session import DashboardSession
from econmap.models.types import SelectionDetail, SelectionUpdate
from econmap.selection.controller import InvalidYear, ObserverError

router = APIRouter()


@router.get("/selection", response_model=SelectionDetail)
def get_selection(
    session: DashboardSession = Depends(get_dashboard_session),
) -> SelectionDetail:
    """Get the selected year and the selectable years."""
    return build_selection_detail(session.controller)


@router.put("/selection", response_model=SelectionDetail)
def update_selection(
    update: SelectionUpdate,
    session: DashboardSession = Depends(get_dashboard_session),
) -> SelectionDetail:
    """Select a year.

    Args:
        update: Requested year.
        session: Dashboard session (injected).

    Returns:
        SelectionDetail after the update.

    Raises:
        HTTPException: 422 if the year is not selectable (selection unchanged),
            500 if a subscribed view failed to redraw.
    """
    try:
        session.select(update.year)
    except InvalidYear as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except ObserverError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    return build_selection_detail(session.controller)


@router.post("/selection/reset", response_model=SelectionDetail)
def reset_selection(
    session: DashboardSession = Depends(get_dashboard_session),
) -> SelectionDetail:
    """Redraw every view at the selected year.

    Raises:
        HTTPException: 500 if a subscribed view failed to redraw.
    """
    try:
        session.reset()
    except ObserverError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e

    return build_selection_detail(session.controller)
