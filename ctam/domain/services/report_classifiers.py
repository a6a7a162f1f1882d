"""
Report classifiers.

Traffic-light safety levels for units and the failed/passed category sets
used by the quantitative report filters.
"""

from collections.abc import Iterable, Sequence

from ctam.domain.enums import SafetyLevel
from ctam.domain.services.hierarchical_aggregator import HierarchicalAggregator
from ctam.domain.value_objects import AreaSummary, SafetySummary, UnitCategoryResult

YELLOW_THRESHOLD = 50.0
FULL_PASS_PERCENTAGE = 100.0


def classify_unit_safety(results: Sequence[UnitCategoryResult], assessed: bool = True) -> SafetyLevel:
    """
    Classify a unit by the share of its evaluated categories that passed.

    Categories without items are left out of the denominator.

    Args:
        results: Per-category results of the unit's latest approved assessment
        assessed: Whether the unit has such an assessment at all

    Returns:
        GREEN at 100%, YELLOW from 50%, RED below, NOT_SUBMITTED when unassessed
    """
    if not assessed:
        return SafetyLevel.NOT_SUBMITTED

    evaluated = [r for r in results if r.average is not None]
    passed = sum(1 for r in evaluated if r.average == 1)
    percentage = passed / len(evaluated) * 100 if evaluated else 0.0

    if percentage == FULL_PASS_PERCENTAGE:
        return SafetyLevel.GREEN
    if percentage >= YELLOW_THRESHOLD:
        return SafetyLevel.YELLOW
    return SafetyLevel.RED


def summarize_safety(aggregator: HierarchicalAggregator, unit_ids: Iterable[str]) -> SafetySummary:
    """Safety level of every unit in ``unit_ids``."""
    levels = {
        unit_id: classify_unit_safety(
            aggregator.unit_category_results(unit_id),
            assessed=aggregator.latest_assessment(unit_id) is not None,
        )
        for unit_id in unit_ids
    }
    return SafetySummary(levels_by_unit=levels)


def category_outcomes(
    category_ids: Iterable[str],
    area_rows: Sequence[AreaSummary] = (),
    unit_rows: Sequence[Sequence[UnitCategoryResult]] = (),
) -> tuple[set[str], set[str]]:
    """
    Split categories into failed and passed sets across report rows.

    A category is failed when any row with data for it misses it (area rows
    below 100%, unit rows with an average other than 1). It is passed when
    every row with data passes it, so a category no row has data for is
    passed and not failed.

    Args:
        category_ids: Categories to classify
        area_rows: Province or region summaries
        unit_rows: Per-category results of individual units

    Returns:
        ``(failed_ids, passed_ids)``
    """
    failed: set[str] = set()
    passed: set[str] = set()

    for category_id in category_ids:
        outcomes: list[bool] = []
        for summary in area_rows:
            result = summary.category(category_id)
            if result is not None and result.pass_percentage is not None:
                outcomes.append(result.pass_percentage == FULL_PASS_PERCENTAGE)
        for unit_results in unit_rows:
            for result in unit_results:
                if result.category_id == category_id and result.average is not None:
                    outcomes.append(result.average == 1)

        if not all(outcomes):
            failed.add(category_id)
        else:
            passed.add(category_id)

    return failed, passed
