"""
Scoring exceptions.

Scoring functions are total by default; these are raised only when a caller
opts into strict range checking.
"""

from ctam.domain.exceptions.base import DomainException


class ScoringError(DomainException):
    """Base exception for scoring failures."""

    default_message = "Scoring failed"


class ScoreOutOfRangeError(ScoringError):
    """Raised when a score falls outside the span of a quality band table."""

    def __init__(self, score: float, minimum: float, maximum: float, table_version: str):
        self.score = score
        self.minimum = minimum
        self.maximum = maximum
        self.table_version = table_version
        super().__init__(
            f"Score {score} is outside [{minimum}, {maximum}] for quality table '{table_version}'"
        )
