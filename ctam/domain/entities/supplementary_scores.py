"""
Qualitative and impact score entities.

Both are stored on a raw 0-15 scale and contribute to the composite score on
a 0-1.5 scale. At most one record of each exists per assessment.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class QualitativeScore:
    """Leadership (0-10) and sustainability (0-10) sub-scores, capped at 15 in total."""

    assessment_id: str
    leadership_score: float = 0.0
    sustainable_score: float = 0.0
    total_score: float = 0.0


@dataclass(frozen=True)
class ImpactScore:
    """
    Incident and data-breach deductions from a full raw score of 15.

    ``incident_score`` and ``breach_score`` are zero or negative.
    """

    assessment_id: str
    had_incident: bool = False
    incident_score: float = 0.0
    had_data_breach: bool = False
    breach_score: float = 0.0
    total_score: float = 15.0
