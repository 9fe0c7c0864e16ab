"""
Centralized Configuration for fed-analogues

Engine defaults managed with pydantic-settings. Values are read from
environment variables prefixed with ``FEDANALOGUES_`` or from a ``.env`` file.

Usage:
    from fedanalogues.core.config import get_settings

    settings = get_settings()
    print(settings.min_time_gap_months)

The era/recency multipliers themselves live in the era catalog
(``fedanalogues.data.eras``); only the clamp bounds are exposed here.
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    fed-analogues engine settings.

    All settings are loaded from environment variables with FEDANALOGUES_
    prefix or from a .env file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FEDANALOGUES_",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================================================
    # Search Defaults
    # ========================================================================

    default_top_n: int = Field(
        default=5,
        ge=1,
        description="Number of analogues returned when the caller does not ask for a count",
    )

    default_window_months: int = Field(
        default=12,
        ge=1,
        description="Number of recent points used as the target window",
    )

    min_time_gap_months: float = Field(
        default=6.0,
        ge=0.0,
        description="Minimum gap between any two selected analogue windows",
    )

    exclude_unreliable: bool = Field(
        default=True,
        description="Drop pre-1960 observations before matching",
    )

    # ========================================================================
    # Policy Action Extraction
    # ========================================================================

    rate_indicator: str = Field(
        default="DFF",
        description="Indicator holding the policy rate (percent)",
    )

    min_significant_change_bps: int = Field(
        default=10,
        ge=0,
        description="Smallest rate change, in basis points, treated as a decision",
    )

    max_grouping_days: int = Field(
        default=30,
        ge=0,
        description="Same-direction changes closer than this are merged into one action",
    )

    # ========================================================================
    # Temporal Diversity
    # ========================================================================

    diversity_min_multiplier: float = Field(
        default=0.5,
        gt=0.0,
        description="Lower clamp for the era bonus x recency penalty multiplier",
    )

    diversity_max_multiplier: float = Field(
        default=2.0,
        gt=0.0,
        description="Upper clamp for the era bonus x recency penalty multiplier",
    )

    # ========================================================================
    # Logging
    # ========================================================================

    log_level: str = Field(
        default="INFO",
        description="Root log level used by configure_from_settings",
    )

    log_file: str = Field(
        default="",
        description="Optional log file path; empty disables file logging",
    )

    log_json: bool = Field(
        default=False,
        description="Write JSON structured records to the log file",
    )

    @model_validator(mode="after")
    def _check_multiplier_bounds(self) -> "Settings":
        if self.diversity_min_multiplier > self.diversity_max_multiplier:
            raise ValueError(
                "diversity_min_multiplier must not exceed diversity_max_multiplier "
                f"({self.diversity_min_multiplier} > {self.diversity_max_multiplier})"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with configuration loaded from environment
    """
    return Settings()
