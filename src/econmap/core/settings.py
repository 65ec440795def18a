"""Environment-driven settings.

Variables:
- ECONMAP_DATA_PATH: CSV file with observations
- ECONMAP_INDICATORS: comma-separated indicator columns
- ECONMAP_TOP_N: bars in the ranking view
- ECONMAP_INITIAL_YEAR: optional starting year
- ECONMAP_CORS_ORIGINS: comma-separated origins allowed by the API
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DEFAULT_DATA_PATH = Path("data/observations.csv")
DEFAULT_INDICATORS = ("Gross savings (% of GDP)",)
DEFAULT_TOP_N = 20
DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",  # Dashboard dev server
    "http://127.0.0.1:3000",
)


@dataclass(frozen=True)
class Settings:
    """Resolved configuration."""

    data_path: Path = DEFAULT_DATA_PATH
    indicators: tuple[str, ...] = DEFAULT_INDICATORS
    top_n: int = DEFAULT_TOP_N
    initial_year: int | None = None
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS


def _split(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from the environment.

    Args:
        environ: Mapping to read instead of os.environ.

    Returns:
        Settings with defaults for unset variables.

    Raises:
        ValueError: If an integer variable is malformed or ECONMAP_TOP_N < 1.
    """
    env = os.environ if environ is None else environ

    data_path = Path(env.get("ECONMAP_DATA_PATH", str(DEFAULT_DATA_PATH)))

    indicators = _split(env.get("ECONMAP_INDICATORS", "")) or DEFAULT_INDICATORS

    top_n = _parse_int("ECONMAP_TOP_N", env.get("ECONMAP_TOP_N", str(DEFAULT_TOP_N)))
    if top_n < 1:
        raise ValueError(f"ECONMAP_TOP_N must be >= 1, got {top_n}")

    initial_year = None
    raw_year = env.get("ECONMAP_INITIAL_YEAR", "").strip()
    if raw_year:
        initial_year = _parse_int("ECONMAP_INITIAL_YEAR", raw_year)

    cors_origins = _split(env.get("ECONMAP_CORS_ORIGINS", "")) or DEFAULT_CORS_ORIGINS

    return Settings(
        data_path=data_path,
        indicators=indicators,
        top_n=top_n,
        initial_year=initial_year,
        cors_origins=cors_origins,
    )
