"""
Breach Severity Enum.

Size classes for a personal-data breach, each carrying the raw impact penalty
it deducts.
"""

from enum import Enum


class BreachSeverity(str, Enum):
    """Data breach severity by number of affected records."""

    NONE = "none"
    LOW = "low"  # 1-100 records
    MEDIUM = "medium"  # 101-1,000 records
    HIGH = "high"  # 1,001-10,000 records
    CRITICAL = "critical"  # more than 10,000 records

    def __str__(self) -> str:
        return self.value

    @property
    def penalty(self) -> int:
        """Raw impact points deducted for this severity."""
        return _BREACH_PENALTIES[self]


_BREACH_PENALTIES = {
    BreachSeverity.NONE: 0,
    BreachSeverity.LOW: 2,
    BreachSeverity.MEDIUM: 5,
    BreachSeverity.HIGH: 8,
    BreachSeverity.CRITICAL: 15,
}
