"""
Assessment Status Enum.

Workflow states of an assessment, from draft through provincial and regional
approval to completion.
"""

from enum import Enum


class AssessmentStatus(str, Enum):
    """Assessment workflow states."""

    DRAFT = "draft"
    SUBMITTED = "submitted"
    RETURNED = "returned"  # Sent back to the unit for correction
    APPROVED_PROVINCIAL = "approved_provincial"
    APPROVED_REGIONAL = "approved_regional"
    COMPLETED = "completed"

    def __str__(self) -> str:
        return self.value


APPROVED_STATUSES = frozenset(
    {AssessmentStatus.APPROVED_REGIONAL.value, AssessmentStatus.COMPLETED.value}
)


def is_approved_assessment_status(status: str | None) -> bool:
    """Default approval predicate: regionally approved or completed."""
    if isinstance(status, AssessmentStatus):
        status = status.value
    return status in APPROVED_STATUSES
