"""
Base exception classes for the library.

This module defines base exception classes that are extended by other
exception classes in the library.
"""

from typing import Any


class BaseApplicationError(Exception):
    """Base class for all library exceptions."""

    def __init__(self, message: str = "An application error occurred") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ValidationError(BaseApplicationError):
    """Error raised when validation fails."""

    def __init__(self, message: str = "Validation failed") -> None:
        super().__init__(message)


class ConfigurationError(BaseApplicationError):
    """Error raised when configuration is invalid."""

    def __init__(self, message: str = "Invalid configuration") -> None:
        super().__init__(message)


class RecordValidationError(ValidationError):
    """
    Error raised when a record from the backing store cannot be adapted.

    Attributes:
        record_type: Name of the record model that rejected the row
        index: Position of the offending row in the batch, if known
        errors: Structured error list reported by the validator
    """

    def __init__(
        self,
        record_type: str,
        index: int | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.record_type = record_type
        self.index = index
        self.errors = errors or []
        location = f" at row {index}" if index is not None else ""
        super().__init__(f"Invalid {record_type} record{location}: {len(self.errors)} error(s)")
