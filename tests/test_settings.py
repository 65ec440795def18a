"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from econmap.core.settings import (
    DEFAULT_CORS_ORIGINS,
    DEFAULT_INDICATORS,
    DEFAULT_TOP_N,
    load_settings,
)


class TestLoadSettings:
    """Test settings resolution."""

    def test_defaults(self):
        settings = load_settings({})
        assert settings.data_path == Path("data/observations.csv")
        assert settings.indicators == DEFAULT_INDICATORS
        assert settings.top_n == DEFAULT_TOP_N
        assert settings.initial_year is None
        assert settings.cors_origins == DEFAULT_CORS_ORIGINS

    def test_overrides(self):
        settings = load_settings(
            {
                "ECONMAP_DATA_PATH": "/tmp/savings.csv",
                "ECONMAP_INDICATORS": "sGross, gdpGrowth ,",
                "ECONMAP_TOP_N": "5",
                "ECONMAP_INITIAL_YEAR": "2018",
                "ECONMAP_CORS_ORIGINS": "http://example.org",
            }
        )
        assert settings.data_path == Path("/tmp/savings.csv")
        assert settings.indicators == ("sGross", "gdpGrowth")
        assert settings.top_n == 5
        assert settings.initial_year == 2018
        assert settings.cors_origins == ("http://example.org",)

    def test_blank_initial_year_is_none(self):
        assert load_settings({"ECONMAP_INITIAL_YEAR": " "}).initial_year is None

    def test_bad_integer_names_variable(self):
        with pytest.raises(ValueError, match="ECONMAP_TOP_N"):
            load_settings({"ECONMAP_TOP_N": "twenty"})

    def test_non_positive_top_n_rejected(self):
        with pytest.raises(ValueError, match=">= 1"):
            load_settings({"ECONMAP_TOP_N": "0"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("ECONMAP_TOP_N", "7")
        assert load_settings().top_n == 7
