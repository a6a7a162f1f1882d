"""
Library settings module.

This module provides configuration settings for the scoring library: which
assessment statuses count as approved, which item status vocabulary is in
use, which quality band table applies, and logging.
"""

# Standard Library Imports
import logging
import os

# Third-Party Imports
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_STATUS_SCHEMES = ["ternary", "binary"]


class Settings(BaseSettings):
    """Library settings using Pydantic for validation and environment variable loading."""

    # Environment
    TESTING: bool = False  # Flag to indicate when running in test environment
    ENVIRONMENT: str = "development"  # development, staging, production, test
    VERSION: str = "0.1.0"
    PROJECT_NAME: str = "CTAM+ Scoring"
    PROJECT_DESCRIPTION: str = "Hospital cybersecurity self-assessment scoring and aggregation"

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = False

    # Assessment workflow
    APPROVED_ASSESSMENT_STATUSES: list[str] = Field(
        default_factory=lambda: ["approved_regional", "completed"]
    )

    # Scoring
    ITEM_STATUS_SCHEME: str = "ternary"
    QUALITY_TABLE_VERSION: str = "ctam-plus-2568"
    STRICT_SCORE_RANGE: bool = False  # Reject out-of-range scores instead of banding them Critical

    # Fiscal year (Thai government fiscal year begins in October)
    FISCAL_YEAR_START_MONTH: int = 10

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one of the valid levels."""
        if v.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}")
        return v.upper()

    @field_validator("ITEM_STATUS_SCHEME")
    @classmethod
    def validate_status_scheme(cls, v: str) -> str:
        """Validate that the item status scheme is a known vocabulary."""
        if v.lower() not in VALID_STATUS_SCHEMES:
            raise ValueError(f"Item status scheme must be one of {VALID_STATUS_SCHEMES}")
        return v.lower()

    @field_validator("FISCAL_YEAR_START_MONTH")
    @classmethod
    def validate_fiscal_year_start_month(cls, v: int) -> int:
        """Validate that the fiscal year start month is a calendar month."""
        if not 1 <= v <= 12:
            raise ValueError("Fiscal year start month must be between 1 and 12")
        return v

    @field_validator("APPROVED_ASSESSMENT_STATUSES")
    @classmethod
    def validate_approved_statuses(cls, v: list[str]) -> list[str]:
        """Strip blanks and require at least one approved status."""
        cleaned = [status.strip() for status in v if status and status.strip()]
        if not cleaned:
            raise ValueError("At least one approved assessment status is required")
        return cleaned


# Create a global settings instance
settings = Settings()


def get_settings() -> Settings:
    """
    Factory function to get the library settings.

    Under pytest (or ENVIRONMENT=test) the global instance is flagged as a
    test configuration and file logging is switched off.

    Returns:
        The library settings instance
    """
    if os.environ.get("ENVIRONMENT") == "test" or os.environ.get("PYTEST_CURRENT_TEST"):
        global settings
        if not settings.TESTING:
            logger.info("Running in TEST environment")
        settings.TESTING = True
        settings.ENVIRONMENT = "test"
        settings.LOG_TO_FILE = False

    return settings
