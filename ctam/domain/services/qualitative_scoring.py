"""
Qualitative scoring rules.

Raw qualitative score of an assessment, from the leadership and
sustainability answers. Leadership and sustainability are each capped at 10
and the total at 15.
"""

from dataclasses import dataclass

from ctam.domain.entities import QualitativeScore

LEADERSHIP_CAP = 10
SUSTAINABLE_CAP = 10
QUALITATIVE_RAW_CAP = 15


@dataclass(frozen=True)
class QualitativeCriteria:
    """Answers of the qualitative section of the assessment form."""

    has_ciso: bool = False
    has_dpo: bool = False
    has_it_security_team: bool = False
    annual_training_count: int = 0
    uses_opensource: bool = False
    uses_freeware: bool = False


def leadership_points(criteria: QualitativeCriteria) -> int:
    points = 0
    if criteria.has_ciso:
        points += 3
    if criteria.has_dpo:
        points += 3
    if criteria.has_it_security_team:
        points += 4
    return min(points, LEADERSHIP_CAP)


def sustainable_points(criteria: QualitativeCriteria) -> int:
    points = 0
    if criteria.annual_training_count >= 4:
        points += 5
    elif criteria.annual_training_count >= 2:
        points += 3
    elif criteria.annual_training_count >= 1:
        points += 1

    if not criteria.uses_freeware and not criteria.uses_opensource:
        points += 5
    elif not criteria.uses_freeware:
        points += 3
    return min(points, SUSTAINABLE_CAP)


def score_qualitative(assessment_id: str, criteria: QualitativeCriteria) -> QualitativeScore:
    """
    Compute the raw qualitative score record for an assessment.

    Args:
        assessment_id: Assessment the score belongs to
        criteria: Qualitative answers

    Returns:
        QualitativeScore on the raw 0-15 scale
    """
    leadership = leadership_points(criteria)
    sustainable = sustainable_points(criteria)
    return QualitativeScore(
        assessment_id=assessment_id,
        leadership_score=leadership,
        sustainable_score=sustainable,
        total_score=min(leadership + sustainable, QUALITATIVE_RAW_CAP),
    )
