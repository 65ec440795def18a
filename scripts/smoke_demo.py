#!/usr/bin/env python3
"""Smoke test for the demo observations file.

Loads the seeded CSV, builds a dashboard session and checks the summary
table, the selection fan-out and the per-year view data.

Usage:
    python scripts/seed_demo.py
    python scripts/smoke_demo.py

Exit codes:
    0: All checks passed
    1: Some checks failed
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from econmap.adapter.tabular import load_observations  # noqa: E402
from econmap.core.session import DashboardSession  # noqa: E402
from econmap.core.settings import DEFAULT_INDICATORS  # noqa: E402
from econmap.selection.controller import InvalidYear  # noqa: E402

# Constants
DEMO_DATA_PATH = PROJECT_ROOT / "data" / "observations.csv"
DEMO_INDICATOR = DEFAULT_INDICATORS[0]


def check_data_exists() -> bool:
    """Check that the demo file exists."""
    if not DEMO_DATA_PATH.exists():
        print(f"FAIL: Demo data not found: {DEMO_DATA_PATH}")
        return False
    print(f"OK: Data exists: {DEMO_DATA_PATH}")
    return True


def check_summaries(session: DashboardSession) -> bool:
    """Check that every year has a summary row in ascending order."""
    years = [summary.year for summary in session.summaries]
    if not years or years != sorted(years):
        print(f"FAIL: Unexpected summary years: {years}")
        return False

    print(f"OK: {len(years)} summary rows")
    for summary in session.summaries:
        mean = summary.mean(DEMO_INDICATOR)
        shown = "missing" if mean is None else f"{mean:.2f}"
        print(f"    {summary.year}: {shown} ({summary.counts[DEMO_INDICATOR]} values)")
    return True


def check_selection(session: DashboardSession) -> bool:
    """Check that selection changes reach an observer and bad years are refused."""
    received: list[int] = []
    subscription = session.controller.subscribe(received.append)

    try:
        first_year = session.years[0]
        session.select(first_year)
        if received != [first_year]:
            print(f"FAIL: Observer received {received}, expected [{first_year}]")
            return False
        print(f"OK: Observer notified of {first_year}")

        try:
            session.select(session.years[-1] + 1)
        except InvalidYear as e:
            print(f"OK: Invalid year refused ({e})")
        else:
            print("FAIL: Invalid year accepted")
            return False

        if session.current_year != first_year:
            print(f"FAIL: Selection moved to {session.current_year}")
            return False
    finally:
        subscription.unsubscribe()

    return True


def check_snapshot(session: DashboardSession) -> bool:
    """Check that the selected year yields map and chart data."""
    snapshot = session.snapshot(DEMO_INDICATOR)
    if not snapshot.values:
        print(f"FAIL: No map values for {snapshot.year}")
        return False

    print(f"OK: {len(snapshot.values)} map values for {snapshot.year}")
    for row in snapshot.top:
        print(f"    #{row.rank} {row.country}: {row.value:.1f}")
    return True


def main() -> int:
    """Main entry point."""
    print("=" * 60)
    print("econmap Demo Smoke Test")
    print("=" * 60)

    print("\n[1/4] Checking data file...")
    if not check_data_exists():
        print("\n" + "=" * 60)
        print("RESULT: 0 passed, 1 failed")
        print("Run 'python scripts/seed_demo.py' first!")
        print("=" * 60)
        return 1

    session = DashboardSession(
        load_observations(DEMO_DATA_PATH, [DEMO_INDICATOR]),
        [DEMO_INDICATOR],
    )

    checks = [
        ("[2/4] Checking summaries...", check_summaries),
        ("[3/4] Checking selection...", check_selection),
        ("[4/4] Checking snapshot...", check_snapshot),
    ]
    checks_passed = 1
    checks_failed = 0

    for title, check in checks:
        print(f"\n{title}")
        if check(session):
            checks_passed += 1
        else:
            checks_failed += 1

    # Summary
    print("\n" + "=" * 60)
    if checks_failed == 0:
        print(f"RESULT: ALL PASSED ({checks_passed} checks)")
        print("=" * 60)
        return 0
    else:
        print(f"RESULT: {checks_passed} passed, {checks_failed} failed")
        print("=" * 60)
        return 1


if __name__ == "__main__":
    sys.exit(main())
