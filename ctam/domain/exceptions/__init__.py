"""
Exception classes for the scoring domain.
"""

from ctam.domain.exceptions.base import DomainException
from ctam.domain.exceptions.scoring_exceptions import (
    ScoreOutOfRangeError,
    ScoringError,
)

__all__ = [
    "DomainException",
    "ScoreOutOfRangeError",
    "ScoringError",
]
