#!/usr/bin/env python3
"""Seed a demo observations file.

Writes a small OWID-style gross savings table to data/observations.csv,
including missing cells, so the API and smoke check have something to load.

Usage:
    python scripts/seed_demo.py
"""

from __future__ import annotations

import csv
import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from econmap.core.settings import DEFAULT_INDICATORS  # noqa: E402

# Constants
DEMO_DATA_PATH = PROJECT_ROOT / "data" / "observations.csv"
DEMO_INDICATOR = DEFAULT_INDICATORS[0]

# (Entity, Code) -> savings by year; None is written as an empty cell
DEMO_ROWS = {
    ("China", "CHN"): {2017: 46.1, 2018: 44.9, 2019: 44.6},
    ("France", "FRA"): {2017: 22.5, 2018: 22.9, 2019: 23.7},
    ("Germany", "DEU"): {2017: 28.0, 2018: 28.7, 2019: 28.4},
    ("Brazil", "BRA"): {2017: 14.6, 2018: 14.5, 2019: None},
    ("Nigeria", "NGA"): {2017: None, 2018: 19.4, 2019: 20.1},
    ("United States", "USA"): {2017: 18.4, 2018: 19.1, 2019: 19.2},
}


def write_demo_csv(path: Path) -> int:
    """Write the demo table. Returns the number of data rows."""
    path.parent.mkdir(parents=True, exist_ok=True)
    rows = 0
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["Entity", "Code", "Year", DEMO_INDICATOR])
        for (entity, code), by_year in DEMO_ROWS.items():
            for year, value in sorted(by_year.items()):
                writer.writerow([entity, code, year, "" if value is None else value])
                rows += 1
    return rows


def main() -> int:
    """Main entry point."""
    rows = write_demo_csv(DEMO_DATA_PATH)
    print(f"Wrote {rows} rows to {DEMO_DATA_PATH}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
