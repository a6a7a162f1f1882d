"""
Core exceptions package.

This package contains the exceptions raised outside the pure scoring domain:
configuration problems and malformed input records.
"""

from ctam.core.exceptions.base_exceptions import (
    BaseApplicationError,
    ConfigurationError,
    RecordValidationError,
    ValidationError,
)

__all__ = [
    "BaseApplicationError",
    "ConfigurationError",
    "RecordValidationError",
    "ValidationError",
]
