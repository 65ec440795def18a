"""Shared year selection.

Boundary rules:
- Owns the single "current year" that drives the map and chart views
- Notifies subscribed views synchronously, in registration order
- Forbidden: aggregation, IO, rendering
"""

from econmap.selection.controller import (
    InvalidYear,
    ObserverError,
    ReentrantUpdate,
    SelectionController,
    Subscription,
)

__all__ = [
    "InvalidYear",
    "ObserverError",
    "ReentrantUpdate",
    "SelectionController",
    "Subscription",
]
