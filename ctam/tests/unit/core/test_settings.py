"""
Unit tests for library settings.
"""

import pytest
from pydantic import ValidationError

from ctam.core.config import get_settings
from ctam.core.config.settings import Settings


class TestSettings:
    """Test suite for the pydantic-settings configuration."""

    def test_defaults(self, test_settings):
        assert test_settings.APPROVED_ASSESSMENT_STATUSES == ["approved_regional", "completed"]
        assert test_settings.ITEM_STATUS_SCHEME == "ternary"
        assert test_settings.QUALITY_TABLE_VERSION == "ctam-plus-2568"
        assert test_settings.STRICT_SCORE_RANGE is False
        assert test_settings.FISCAL_YEAR_START_MONTH == 10

    def test_environment_overrides(self, monkeypatch):
        # Arrange
        monkeypatch.setenv("ITEM_STATUS_SCHEME", "BINARY")
        monkeypatch.setenv("STRICT_SCORE_RANGE", "true")
        monkeypatch.setenv("APPROVED_ASSESSMENT_STATUSES", '["completed"]')
        monkeypatch.setenv("LOG_LEVEL", "debug")

        # Act
        settings = Settings(_env_file=None)

        # Assert
        assert settings.ITEM_STATUS_SCHEME == "binary"
        assert settings.STRICT_SCORE_RANGE is True
        assert settings.APPROVED_ASSESSMENT_STATUSES == ["completed"]
        assert settings.LOG_LEVEL == "DEBUG"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"LOG_LEVEL": "VERBOSE"},
            {"ITEM_STATUS_SCHEME": "quaternary"},
            {"FISCAL_YEAR_START_MONTH": 13},
            {"FISCAL_YEAR_START_MONTH": 0},
            {"APPROVED_ASSESSMENT_STATUSES": []},
            {"APPROVED_ASSESSMENT_STATUSES": ["  "]},
        ],
    )
    def test_invalid_values_are_rejected(self, overrides):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **overrides)

    def test_statuses_are_stripped(self):
        settings = Settings(_env_file=None, APPROVED_ASSESSMENT_STATUSES=[" completed ", ""])

        assert settings.APPROVED_ASSESSMENT_STATUSES == ["completed"]

    def test_get_settings_under_pytest_is_test_configuration(self):
        settings = get_settings()

        assert settings.TESTING is True
        assert settings.ENVIRONMENT == "test"
        assert settings.LOG_TO_FILE is False
