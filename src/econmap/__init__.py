"""econmap: data core for a year-synchronised indicator map and chart."""

__version__ = "0.1.0"
