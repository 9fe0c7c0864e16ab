"""
Unit tests for centralized configuration module.

Tests cover:
- Default configuration values
- Environment variable loading
- Settings validation
- Settings caching behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from fedanalogues.core.config import Settings, get_settings


class TestSettingsDefaults:
    """Test default configuration values."""

    def test_default_search_settings(self):
        settings = Settings()
        assert settings.default_top_n == 5
        assert settings.default_window_months == 12
        assert settings.min_time_gap_months == 6.0
        assert settings.exclude_unreliable is True

    def test_default_policy_settings(self):
        settings = Settings()
        assert settings.rate_indicator == "DFF"
        assert settings.min_significant_change_bps == 10
        assert settings.max_grouping_days == 30

    def test_default_diversity_bounds(self):
        settings = Settings()
        assert settings.diversity_min_multiplier == 0.5
        assert settings.diversity_max_multiplier == 2.0

    def test_default_logging_settings(self):
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.log_file == ""
        assert settings.log_json is False


class TestEnvironmentVariables:
    """Test loading settings from environment variables."""

    def test_env_var_with_prefix(self):
        with patch.dict(os.environ, {"FEDANALOGUES_DEFAULT_TOP_N": "8"}):
            assert Settings().default_top_n == 8

    def test_env_var_types(self):
        with patch.dict(
            os.environ,
            {
                "FEDANALOGUES_MIN_TIME_GAP_MONTHS": "12.5",
                "FEDANALOGUES_EXCLUDE_UNRELIABLE": "false",
                "FEDANALOGUES_RATE_INDICATOR": "FEDFUNDS",
            },
        ):
            settings = Settings()
            assert settings.min_time_gap_months == 12.5
            assert settings.exclude_unreliable is False
            assert settings.rate_indicator == "FEDFUNDS"

    def test_env_var_case_insensitive(self):
        with patch.dict(os.environ, {"fedanalogues_log_level": "DEBUG"}):
            assert Settings().log_level == "DEBUG"

    def test_unprefixed_env_var_ignored(self):
        with patch.dict(os.environ, {"DEFAULT_TOP_N": "9"}):
            assert Settings().default_top_n == 5


class TestSettingsValidation:
    """Test field constraints and cross-field validation."""

    def test_top_n_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(default_top_n=0)

    def test_negative_gap_rejected(self):
        with pytest.raises(ValidationError):
            Settings(min_time_gap_months=-1.0)

    def test_zero_gap_allowed(self):
        assert Settings(min_time_gap_months=0.0).min_time_gap_months == 0.0

    def test_multiplier_bounds_ordered(self):
        with pytest.raises(ValidationError, match="must not exceed"):
            Settings(diversity_min_multiplier=1.5, diversity_max_multiplier=1.0)

    def test_multiplier_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(diversity_min_multiplier=0.0)


class TestSettingsCaching:
    """Test get_settings caching behavior."""

    def test_same_instance(self):
        get_settings.cache_clear()
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        get_settings.cache_clear()
        with patch.dict(os.environ, {"FEDANALOGUES_DEFAULT_TOP_N": "3"}):
            assert get_settings().default_top_n == 3
        get_settings.cache_clear()
        assert get_settings().default_top_n == 5
