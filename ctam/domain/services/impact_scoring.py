"""
Impact scoring rules.

Raw impact score of an assessment: 15 points minus deductions for a cyber
incident (by recovery time) and a personal-data breach (by severity),
floored at 0.
"""

from dataclasses import dataclass

from ctam.domain.entities import ImpactScore
from ctam.domain.enums import BreachSeverity

IMPACT_RAW_FULL_SCORE = 15

# (max recovery hours, deduction), checked in order
INCIDENT_RECOVERY_DEDUCTIONS: tuple[tuple[float, int], ...] = (
    (4, -2),
    (24, -5),
    (72, -8),
)
INCIDENT_SLOW_RECOVERY_DEDUCTION = -15


@dataclass(frozen=True)
class ImpactCriteria:
    """Answers of the impact section of the assessment form."""

    had_incident: bool = False
    incident_recovery_hours: float = 0
    had_data_breach: bool = False
    breach_severity: BreachSeverity = BreachSeverity.NONE


def incident_deduction(criteria: ImpactCriteria) -> int:
    """Zero without an incident, otherwise a deduction growing with recovery time."""
    if not criteria.had_incident:
        return 0
    for max_hours, deduction in INCIDENT_RECOVERY_DEDUCTIONS:
        if criteria.incident_recovery_hours <= max_hours:
            return deduction
    return INCIDENT_SLOW_RECOVERY_DEDUCTION


def breach_deduction(criteria: ImpactCriteria) -> int:
    if not criteria.had_data_breach:
        return 0
    return -BreachSeverity(criteria.breach_severity).penalty


def score_impact(assessment_id: str, criteria: ImpactCriteria) -> ImpactScore:
    """
    Compute the raw impact score record for an assessment.

    Args:
        assessment_id: Assessment the score belongs to
        criteria: Impact answers

    Returns:
        ImpactScore with non-positive deductions and a 0-15 total
    """
    incident = incident_deduction(criteria)
    breach = breach_deduction(criteria)
    return ImpactScore(
        assessment_id=assessment_id,
        had_incident=criteria.had_incident,
        incident_score=incident,
        had_data_breach=criteria.had_data_breach,
        breach_score=breach,
        total_score=max(0, IMPACT_RAW_FULL_SCORE + incident + breach),
    )
