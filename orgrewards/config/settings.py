"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

from decimal import Decimal

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from orgrewards.constants import DEFAULT_MINING_RATE, MINING_RATE_PRESETS


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Rewards
    mining_rate: Decimal = Field(
        default=DEFAULT_MINING_RATE,
        ge=0,
        lt=1,
        description="Fraction of own value paid as mining reward (0.007 = 0.7%)"
    )

    # Presentation
    currency_symbol: str = Field(
        default="$",
        description="Currency symbol used by text reports"
    )

    # Logging
    log_level: str = "INFO"
    log_file: str | None = "logs/orgrewards.log"
    log_rotation: str = "1 day"
    log_retention: str = "7 days"

    model_config = SettingsConfigDict(
        env_prefix="ORGREWARDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator('mining_rate')
    @classmethod
    def warn_non_preset_rate(cls, v: Decimal) -> Decimal:
        """Allow any rate in range, but flag rates outside the presets."""
        if v not in MINING_RATE_PRESETS:
            logger.warning(f"Configured mining rate {v} is not a preset rate")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator('log_file')
    @classmethod
    def empty_log_file_disables_sink(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v


# Global settings instance
settings = Settings()
