"""Year summary aggregation.

Computes per-year indicator means from country observations.
Domain logic is pure - loading goes through the tabular adapter.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from econmap.models.domain import Observation, YearSummary

logger = logging.getLogger(__name__)


@dataclass
class YearGroup:
    """Internal grouping of present values by indicator for one year."""

    year: int
    values: dict[str, list[float]] = field(default_factory=dict)


def present_value(value: float | None) -> float | None:
    """Normalize a raw indicator value, mapping NaN/inf to missing."""
    if value is None:
        return None
    value = float(value)
    if not math.isfinite(value):
        return None
    return value


def aggregate(
    observations: Iterable[Observation],
    indicators: Iterable[str],
) -> list[YearSummary]:
    """Compute one summary per distinct year.

    Each indicator mean is taken over the observations of that year whose
    value is present. An observation missing one indicator still counts
    towards the others. A year where every value of an indicator is missing
    keeps that indicator as None (not zero) and is never dropped.

    Args:
        observations: Parsed observation rows.
        indicators: Indicator names to summarize.

    Returns:
        YearSummary list sorted ascending by year. Empty input gives an
        empty list.
    """
    indicator_names = sorted(set(indicators))

    # Group present values by year
    groups: dict[int, YearGroup] = {}
    for observation in observations:
        group = groups.get(observation.year)
        if group is None:
            group = YearGroup(
                year=observation.year,
                values={name: [] for name in indicator_names},
            )
            groups[observation.year] = group

        for name in indicator_names:
            value = present_value(observation.value(name))
            if value is not None:
                group.values[name].append(value)

    summaries = [_summarize_group(groups[year]) for year in sorted(groups)]

    logger.debug(f"Aggregated {len(summaries)} years for indicators {indicator_names}")
    return summaries


def _summarize_group(group: YearGroup) -> YearSummary:
    """Reduce one year group to a YearSummary.

    Pure function - no IO.
    """
    means: dict[str, float | None] = {}
    counts: dict[str, int] = {}

    for name, values in group.values.items():
        counts[name] = len(values)
        # No present values means the summary itself is missing
        means[name] = float(np.mean(values)) if values else None

    return YearSummary(year=group.year, means=means, counts=counts)
