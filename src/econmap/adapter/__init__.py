"""Adapter layer for IO/system boundary operations.

Adapters handle:
- Reading local tabular files (OWID-style CSV)
- Turning text cells into typed Observations with explicit missing values

Adapters must NOT contain:
- Aggregation or ranking logic
- Selection state
"""

from econmap.adapter.tabular import (
    ObservationParseError,
    load_observations,
    parse_rows,
)

__all__ = [
    "ObservationParseError",
    "load_observations",
    "parse_rows",
]
