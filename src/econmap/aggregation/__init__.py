"""Aggregation module for indicator observations.

Boundary rules:
- Pure functions over already-parsed Observations (summaries, view data)
- Forbidden: file or network IO, selection state, rendering concerns
"""

from econmap.aggregation.summary import aggregate
from econmap.aggregation.views import (
    available_years,
    top_countries,
    value_extent,
    values_for_year,
)

__all__ = [
    "aggregate",
    "available_years",
    "top_countries",
    "value_extent",
    "values_for_year",
]
