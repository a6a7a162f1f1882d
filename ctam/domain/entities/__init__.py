"""
Domain entities.

Immutable snapshots of records read from the assessment store.
"""

from ctam.domain.entities.assessment import Assessment, AssessmentItem
from ctam.domain.entities.category import Category
from ctam.domain.entities.organization import (
    HealthOffice,
    HealthRegion,
    Hospital,
    OrganizationHierarchy,
    Province,
)
from ctam.domain.entities.supplementary_scores import ImpactScore, QualitativeScore

__all__ = [
    "Assessment",
    "AssessmentItem",
    "Category",
    "HealthOffice",
    "HealthRegion",
    "Hospital",
    "ImpactScore",
    "OrganizationHierarchy",
    "Province",
    "QualitativeScore",
]
