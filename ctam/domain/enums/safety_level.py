"""
Safety Level Enum.

Traffic-light classification of a unit by the share of its evaluated
categories that passed.
"""

from enum import Enum


class SafetyLevel(str, Enum):
    """Unit safety classification used by the quantitative reports."""

    GREEN = "green"  # every evaluated category passed
    YELLOW = "yellow"  # at least half passed
    RED = "red"
    NOT_SUBMITTED = "not_submitted"  # no latest approved assessment

    def __str__(self) -> str:
        return self.value
