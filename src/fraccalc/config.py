"""
Configuration management for fraccalc.

Handles loading configuration from environment variables and provides
defaults that match the calculator's documented behavior.
"""

import logging
import sys

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings."""
    
    model_config = SettingsConfigDict(
        env_prefix="FRACCALC_",
        extra="ignore",
    )
    
    # Application settings
    app_name: str = "Fraction/Decimal Calculator"
    log_level: str = "WARNING"
    
    # Evaluation settings
    precision: int = Field(2, ge=0, le=15)  # Decimal places results are rounded to
    max_denominator: int = Field(5000, ge=1)  # Largest denominator tried for fractions
    strict_tokens: bool = False  # Reject unknown characters instead of dropping them
    
    # Prompt loop settings
    prompt: str = "Enter expression: "
    exit_command: str = "exit"


# Global settings instance
settings = Settings()


def _stderr_logger_factory(*args) -> structlog.PrintLogger:
    # Resolve sys.stderr per logger so redirected streams are honored.
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str | None = None) -> None:
    """Route structlog output to stderr, filtered at the given level."""
    level_name = (level or settings.log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )
