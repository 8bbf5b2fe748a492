"""Configuration system for FairShare.

This module provides Pydantic Settings-based configuration with environment
variable support and sensible defaults.

Usage:
    from fairshare_core.config import FairShareConfig, configure_logging

    # Load from environment variables and .env file
    config = FairShareConfig()
    configure_logging(config)

    # Use the published schedule instead of the bundled one
    # FAIRSHARE_SCHEDULE_PATH=/srv/fairshare/al_bcso.csv
    if config.schedule_path:
        print(f"Using schedule {config.schedule_path}")
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .bcso_schedule import DEFAULT_SCHEDULE, BcsoSchedule


class FairShareConfig(BaseSettings):
    """Root configuration for FairShare.

    Environment Variables:
        FAIRSHARE_ENV: Environment name (development, staging, production, test)
        FAIRSHARE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        FAIRSHARE_JSON_LOGS: Render log events as JSON
        FAIRSHARE_SCHEDULE_PATH: CSV file replacing the bundled BCSO schedule
        FAIRSHARE_CLAMP_INCOME: Clamp incomes outside the schedule to its edges
        FAIRSHARE_DEFAULT_STATE: Jurisdiction used when none is given
    """

    model_config = SettingsConfigDict(
        env_prefix="FAIRSHARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: str = Field(
        default="development",
        description="Environment name (development, staging, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(
        default=False,
        description="Render log events as JSON instead of console output",
    )
    schedule_path: Optional[Path] = Field(
        default=None,
        description="CSV file with the BCSO schedule (low,high,1..6)",
    )
    clamp_income: bool = Field(
        default=True,
        description="Resolve incomes outside the schedule to its first/last bracket",
    )
    default_state: str = Field(
        default="AL",
        min_length=2,
        max_length=2,
        description="Two-letter jurisdiction code used when none is given",
    )

    @field_validator("env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment name."""
        valid_envs = {"development", "staging", "production", "test"}
        v_lower = v.lower().strip()
        if v_lower not in valid_envs:
            raise ValueError(f"Invalid environment: {v}. Must be one of: {valid_envs}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper().strip()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of: {valid_levels}")
        return v_upper

    @field_validator("default_state", mode="before")
    @classmethod
    def normalize_state(cls, v):
        """Upper-case the state code."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.env == "production"

    @property
    def is_debug(self) -> bool:
        """Check if debug logging is enabled."""
        return self.log_level == "DEBUG"

    def load_schedule(self) -> BcsoSchedule:
        """Return the configured BCSO schedule with the configured edge policy.

        Raises:
            ConfigurationError: If ``schedule_path`` cannot be loaded.
        """
        if self.schedule_path is not None:
            return BcsoSchedule.from_csv(self.schedule_path, clamp=self.clamp_income)
        return DEFAULT_SCHEDULE.with_clamp(self.clamp_income)


def configure_logging(config: Optional[FairShareConfig] = None) -> None:
    """Configure structlog for the configured level and output format."""
    config = config or FairShareConfig()
    renderer = (
        structlog.processors.JSONRenderer()
        if config.json_logs
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(config.log_level)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
