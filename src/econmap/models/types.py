"""Pydantic models for the econmap API.

Missing indicator values are serialized as null, never as 0.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class YearSummaryDetail(BaseModel):
    """Summary row for one year."""

    year: int
    means: dict[str, float | None]  # indicator -> mean, null when missing
    counts: dict[str, int]  # indicator -> number of present values


class SelectionDetail(BaseModel):
    """Current selection for API response."""

    year: int
    valid_years: list[int]


class SelectionUpdate(BaseModel):
    """Year selection request from the input control."""

    year: int


class CountryValueDetail(BaseModel):
    """One country's value for the map view."""

    country: str
    value: float | None


class RankedValueDetail(BaseModel):
    """One bar of the ranking view."""

    rank: int = Field(ge=1)
    country: str
    value: float
    code: str | None = None


class ValueExtent(BaseModel):
    """Domain of present values, used for colour and axis scales."""

    min: float
    max: float


class YearSnapshotDetail(BaseModel):
    """Everything both views need to draw one year."""

    year: int
    indicator: str
    summary: YearSummaryDetail | None
    values: list[CountryValueDetail]
    top: list[RankedValueDetail]
    extent: ValueExtent | None
