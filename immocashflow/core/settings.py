"""Application settings with environment variable support.

Uses pydantic-settings for typed configuration validation.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    # Engine defaults
    default_regime: str = Field(default="LMNP_MICRO", description="Regime preselected in the UI")
    default_tmi_pct: float = Field(default=30.0, ge=0, le=45, description="TMI used when no salary is given")
    social_contributions_pct: float = Field(default=17.2, ge=0, le=100)
    subsidy_fallback_amount: float = Field(default=30000.0, ge=0)
    default_zone: str = Field(default="B1", description="PTZ zone used when none is given")
    default_vacancy_months: float = Field(default=1.0, ge=0, le=12)

    # Projection
    projection_inflation_pct: float = Field(default=1.0, description="Yearly property appreciation %")

    # Persistence
    simulations_file: str = Field(default="simulations.json", description="Saved simulations JSON file")
    cities_file: str = Field(default="data/cities.json", description="Commune list for the location search")

    model_config = {
        "env_prefix": "IMMOCF_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> AppSettings:
    """Get cached application settings."""
    return AppSettings()
