"""Domain models for econmap.

Pure Python dataclasses representing the data flowing through the core.
These models are independent of pydantic and the HTTP layer.

Missing data is represented by ``None`` everywhere: an indicator whose value
is ``None`` (or absent from the mapping) has no data for that country-year.
It is never the same thing as ``0.0``.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


def _freeze(values: Mapping) -> Mapping:
    """Return a read-only copy of a mapping."""
    return MappingProxyType(dict(values))


# ============================================================================
# Source Data Domain
# ============================================================================


@dataclass(frozen=True)
class Observation:
    """One row of source data for a single country and year.

    Attributes:
        country: Country identifier as used by the map (e.g. "France").
        year: Observation year.
        values: Indicator name -> value, ``None`` when missing.
        code: Optional ISO code for the country.

    Raises:
        TypeError: If a value is neither None nor a real number.
    """

    country: str
    year: int
    values: Mapping[str, float | None] = field(default_factory=dict, hash=False)
    code: str | None = None

    def __post_init__(self) -> None:
        for indicator, value in self.values.items():
            # Missing is None; anything else must already be numeric
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, numbers.Real)
            ):
                raise TypeError(
                    f"{self.country} {self.year}: {indicator!r} must be a number or None, "
                    f"got {value!r}"
                )
        object.__setattr__(self, "values", _freeze(self.values))

    @property
    def indicators(self) -> frozenset[str]:
        """Indicator names declared on this observation."""
        return frozenset(self.values)

    def value(self, indicator: str) -> float | None:
        """Return the indicator value, or None when missing."""
        return self.values.get(indicator)


# ============================================================================
# Aggregation Domain
# ============================================================================


@dataclass(frozen=True)
class YearSummary:
    """Aggregated statistics for one year.

    Attributes:
        year: Summary year (unique key of the summary table).
        means: Indicator name -> mean of the non-missing values, None when
            every value for that year is missing.
        counts: Indicator name -> number of values contributing to the mean.
    """

    year: int
    means: Mapping[str, float | None] = field(default_factory=dict, hash=False)
    counts: Mapping[str, int] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "means", _freeze(self.means))
        object.__setattr__(self, "counts", _freeze(self.counts))

    def mean(self, indicator: str) -> float | None:
        """Return the mean for an indicator, or None when missing."""
        return self.means.get(indicator)

    def is_missing(self, indicator: str) -> bool:
        return self.means.get(indicator) is None


@dataclass(frozen=True)
class RankedValue:
    """A country's value for one indicator, positioned in a ranking."""

    rank: int
    country: str
    value: float
    code: str | None = None
