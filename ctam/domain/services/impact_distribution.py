"""
Impact level distribution.

Counts how the units of an area fall across the five quality levels on the
impact dimension, with incident and breach totals for the impact report.
"""

import logging
from collections.abc import Mapping, Sequence

from ctam.domain.entities import Assessment, ImpactScore
from ctam.domain.services.composite_score_calculator import CompositeScoreCalculator
from ctam.domain.services.impact_scoring import IMPACT_RAW_FULL_SCORE
from ctam.domain.value_objects import ImpactDistribution

logger = logging.getLogger(__name__)


def impact_percentage(impact_score: ImpactScore) -> float:
    """
    Raw 0-15 impact total expressed on 0-100.

    ``total_score`` is always read as the raw 0-15 value, the same value the
    composite score divides by 10. Stored totals that are already percentages
    and the per-assessment 0-3 impact column are deliberately not used, so the
    report and the composite score band the same number.
    """
    return float(impact_score.total_score) / IMPACT_RAW_FULL_SCORE * 100


def impact_distribution(
    unit_ids: Sequence[str],
    latest_by_unit: Mapping[str, Assessment],
    impact_by_assessment: Mapping[str, ImpactScore],
    calculator: CompositeScoreCalculator,
) -> ImpactDistribution:
    """
    Distribute the units of an area over the impact quality levels.

    A unit is not assessed when it has no latest approved assessment or that
    assessment has no impact record. Unlike the composite score, a missing
    record is not treated as full credit here.

    Args:
        unit_ids: Units in scope
        latest_by_unit: Latest approved assessment per unit
        impact_by_assessment: Impact record per assessment id
        calculator: Resolves percentage scores to quality levels

    Returns:
        ImpactDistribution over all units in scope
    """
    level_counts = {level.level: 0 for level in calculator.percent_table.levels}
    not_assessed = 0
    incidents = 0
    breaches = 0
    raw_scores: list[float] = []

    for unit_id in unit_ids:
        assessment = latest_by_unit.get(unit_id)
        impact = impact_by_assessment.get(assessment.id) if assessment else None
        if impact is None:
            not_assessed += 1
            continue

        raw_scores.append(float(impact.total_score))
        level = calculator.quality_level_from_percentage(impact_percentage(impact))
        level_counts[level.level] = level_counts.get(level.level, 0) + 1
        if impact.had_incident:
            incidents += 1
        if impact.had_data_breach:
            breaches += 1

    average = sum(raw_scores) / len(raw_scores) if raw_scores else None
    logger.debug("Impact distribution over %d units: %s", len(unit_ids), level_counts)
    return ImpactDistribution(
        total_units=len(unit_ids),
        level_counts=level_counts,
        not_assessed=not_assessed,
        incidents=incidents,
        breaches=breaches,
        average_raw_score=average,
    )
