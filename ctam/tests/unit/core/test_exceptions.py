"""Unit tests for library and domain exceptions."""

from ctam.core.exceptions import (
    BaseApplicationError,
    ConfigurationError,
    RecordValidationError,
    ValidationError,
)
from ctam.domain.exceptions import DomainException, ScoreOutOfRangeError, ScoringError


class TestApplicationErrors:
    def test_hierarchy(self):
        assert issubclass(RecordValidationError, ValidationError)
        assert issubclass(ValidationError, BaseApplicationError)
        assert issubclass(ConfigurationError, BaseApplicationError)

    def test_record_validation_error_message(self):
        error = RecordValidationError("AssessmentRecord", 3, [{"loc": ("id",)}, {"loc": ("status",)}])

        assert str(error) == "Invalid AssessmentRecord record at row 3: 2 error(s)"
        assert error.record_type == "AssessmentRecord"
        assert error.index == 3
        assert len(error.errors) == 2

    def test_record_validation_error_without_row(self):
        error = RecordValidationError("CategoryRecord")

        assert str(error) == "Invalid CategoryRecord record: 0 error(s)"
        assert error.errors == []


class TestDomainErrors:
    def test_score_out_of_range(self):
        error = ScoreOutOfRangeError(11.0, 0.0, 10.0, "ctam-plus-2568")

        assert isinstance(error, ScoringError)
        assert isinstance(error, DomainException)
        assert error.score == 11.0
        assert "outside [0.0, 10.0]" in str(error)

    def test_default_messages(self):
        assert str(DomainException()) == "Scoring domain error"
        assert str(ScoringError()) == "Scoring failed"
        assert str(ScoringError("custom")) == "custom"
