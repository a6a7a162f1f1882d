"""
Assessment entities.

This module defines an assessment of one hospital or health office and the
per-category items recorded against it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from ctam.domain.enums import ItemStatus, UnitType


@dataclass(frozen=True)
class AssessmentItem:
    """
    Outcome of one category within one assessment.

    ``score`` follows the item's status vocabulary (pass 1, partial 0.5,
    fail 0). When it is ``None`` the evaluator falls back to the weight the
    active status scheme assigns to ``status``.
    """

    id: str
    assessment_id: str
    category_id: str
    status: ItemStatus
    score: float | None = None

    @property
    def is_pass(self) -> bool:
        return self.status == ItemStatus.PASS


@dataclass(frozen=True)
class Assessment:
    """
    A self-assessment submitted by exactly one unit for one fiscal year.

    Exactly one of ``hospital_id`` and ``health_office_id`` identifies the
    unit. ``status`` is kept as the raw workflow string because status
    vocabularies differ between deployments.
    """

    id: str
    status: str
    fiscal_year: int  # Gregorian: 2026 covers Oct 2025 to Sep 2026
    hospital_id: str | None = None
    health_office_id: str | None = None
    quantitative_score: float | None = None
    assessment_period: str | None = None
    created_at: datetime | None = None

    @property
    def unit_id(self) -> str | None:
        """Identifier of the assessed unit, hospital first."""
        return self.hospital_id or self.health_office_id

    @property
    def unit_type(self) -> UnitType | None:
        if self.hospital_id:
            return UnitType.HOSPITAL
        if self.health_office_id:
            return UnitType.HEALTH_OFFICE
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "status": self.status,
            "fiscal_year": self.fiscal_year,
            "hospital_id": self.hospital_id,
            "health_office_id": self.health_office_id,
            "quantitative_score": self.quantitative_score,
            "assessment_period": self.assessment_period,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
