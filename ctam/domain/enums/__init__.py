"""Domain enumerations."""

from ctam.domain.enums.area_level import AreaLevel
from ctam.domain.enums.assessment_status import AssessmentStatus, is_approved_assessment_status
from ctam.domain.enums.breach_severity import BreachSeverity
from ctam.domain.enums.item_status import ItemStatus
from ctam.domain.enums.safety_level import SafetyLevel
from ctam.domain.enums.unit_type import UnitType

__all__ = [
    "AreaLevel",
    "AssessmentStatus",
    "BreachSeverity",
    "ItemStatus",
    "SafetyLevel",
    "UnitType",
    "is_approved_assessment_status",
]
