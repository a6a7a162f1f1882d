"""
Item Status Enum.

Status a reviewer assigns to one category of an assessment.
"""

from enum import Enum


class ItemStatus(str, Enum):
    """Statuses an assessment item can carry."""

    PASS = "pass"
    PARTIAL = "partial"
    FAIL = "fail"
    NOT_APPLICABLE = "not_applicable"

    def __str__(self) -> str:
        return self.value

