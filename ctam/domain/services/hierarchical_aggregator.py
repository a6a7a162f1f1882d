"""
Hierarchical Aggregator.

Rolls per-unit outcomes up to province, region and country level for the
drill-down reports. Only the latest approved assessment of each unit counts
(see ``latest_assessment_selector``). Units without one stay in every
denominator: they are the "not yet assessed" bucket of the reports.
"""

import logging
from collections import defaultdict
from collections.abc import Callable, Iterable, Mapping, Sequence

from ctam.domain.entities import Assessment, AssessmentItem, Category
from ctam.domain.enums import AreaLevel
from ctam.domain.services.category_pass_evaluator import CategoryPassEvaluator
from ctam.domain.value_objects import (
    AreaCategoryResult,
    AreaScope,
    AreaSummary,
    UnitCategoryResult,
    UnitEvaluation,
)

logger = logging.getLogger(__name__)

ItemsByAssessment = Mapping[str, Sequence[AssessmentItem]]
AreaAggregateFn = Callable[[AreaScope], AreaSummary]

COUNTRY_AREA_ID = "country"


def index_items_by_assessment(items: Iterable[AssessmentItem]) -> dict[str, list[AssessmentItem]]:
    """Group items by assessment id, keeping input order."""
    index: dict[str, list[AssessmentItem]] = defaultdict(list)
    for item in items:
        index[item.assessment_id].append(item)
    return dict(index)


def _passed_category_ids(items: Sequence[AssessmentItem]) -> set[str]:
    return {item.category_id for item in items if item.is_pass}


def passed_all_categories(items: Sequence[AssessmentItem], categories: Sequence[Category]) -> bool:
    """
    True when every category has a passing item.

    An empty category list is not a pass.
    """
    if not categories:
        return False
    passed = _passed_category_ids(items)
    return all(category.id in passed for category in categories)


def aggregate_units_to_area(
    unit_ids: Sequence[str],
    categories: Sequence[Category],
    items_by_assessment: ItemsByAssessment,
    latest_by_unit: Mapping[str, Assessment],
    area_id: str = "",
    name: str = "",
    level: AreaLevel = AreaLevel.PROVINCE,
) -> AreaSummary:
    """
    Summarise the units of one area.

    Args:
        unit_ids: Units in scope, already filtered for visibility
        categories: Category set of the cycle
        items_by_assessment: Items grouped by assessment id
        latest_by_unit: Latest approved assessment per unit
        area_id: Identifier reported on the summary
        name: Display name reported on the summary
        level: Drill-down level of the area

    Returns:
        AreaSummary whose category percentages use every in-scope unit as
        denominator (None for an empty scope)
    """
    units_in_scope = len(unit_ids)
    units_assessed = 0
    units_passed_all = 0
    passed_per_category: dict[str, int] = {category.id: 0 for category in categories}

    for unit_id in unit_ids:
        assessment = latest_by_unit.get(unit_id)
        if assessment is None:
            continue
        units_assessed += 1

        items = items_by_assessment.get(assessment.id, ())
        passed = _passed_category_ids(items)
        for category_id in passed_per_category:
            if category_id in passed:
                passed_per_category[category_id] += 1

        if passed_all_categories(items, categories):
            units_passed_all += 1

    category_results = tuple(
        AreaCategoryResult(
            category_id=category.id,
            pass_percentage=(
                None
                if units_in_scope == 0
                else passed_per_category[category.id] / units_in_scope * 100
            ),
            passed_count=passed_per_category[category.id],
            total_count=units_in_scope,
        )
        for category in categories
    )

    logger.debug(
        "Aggregated area %s: %d in scope, %d assessed, %d passed all",
        area_id or "<unnamed>",
        units_in_scope,
        units_assessed,
        units_passed_all,
    )
    return AreaSummary(
        area_id=area_id,
        name=name,
        level=level,
        units_in_scope=units_in_scope,
        units_assessed=units_assessed,
        units_passed_all=units_passed_all,
        categories=category_results,
    )


def roll_up_region(
    region_id: str,
    name: str,
    province_scopes: Iterable[AreaScope],
    aggregate: AreaAggregateFn,
) -> AreaSummary:
    """Aggregate a region over the union of its province (and office) scopes."""
    scope = AreaScope.merge(region_id, name, AreaLevel.REGION, province_scopes)
    return aggregate(scope)


def roll_up_country(
    region_scopes: Iterable[AreaScope],
    aggregate: AreaAggregateFn,
    area_id: str = COUNTRY_AREA_ID,
    name: str = "ทั้งประเทศ",
) -> AreaSummary:
    """Aggregate the whole country over the union of its region scopes."""
    scope = AreaScope.merge(area_id, name, AreaLevel.COUNTRY, region_scopes)
    return aggregate(scope)


class HierarchicalAggregator:
    """
    Aggregator bound to one reporting snapshot.

    Holds the category set, the item index and the latest-assessment map so
    that report builders can aggregate many scopes without passing them
    around. It never mutates its inputs; aggregating the same scope twice
    returns equal summaries.
    """

    def __init__(
        self,
        categories: Sequence[Category],
        items: Iterable[AssessmentItem],
        latest_by_unit: Mapping[str, Assessment],
        evaluator: CategoryPassEvaluator | None = None,
    ) -> None:
        """
        Initialize the aggregator.

        Args:
            categories: Category set of the cycle, in display order
            items: Assessment items (at least those of the latest assessments)
            latest_by_unit: Latest approved assessment per unit
            evaluator: Evaluator used for unit-level results
        """
        self.categories = tuple(sorted(categories, key=lambda c: c.order_number))
        self.items_by_assessment = index_items_by_assessment(items)
        self.latest_by_unit = dict(latest_by_unit)
        self.evaluator = evaluator or CategoryPassEvaluator()

    def latest_assessment(self, unit_id: str) -> Assessment | None:
        return self.latest_by_unit.get(unit_id)

    def unit_items(self, unit_id: str) -> list[AssessmentItem]:
        """Items of the unit's latest approved assessment."""
        assessment = self.latest_by_unit.get(unit_id)
        if assessment is None:
            return []
        return list(self.items_by_assessment.get(assessment.id, ()))

    def unit_passed_all(self, unit_id: str) -> bool:
        if unit_id not in self.latest_by_unit:
            return False
        return passed_all_categories(self.unit_items(unit_id), self.categories)

    def evaluate_unit(self, unit_id: str) -> UnitEvaluation | None:
        """Quantitative evaluation of a unit, None when it has no approved assessment."""
        if unit_id not in self.latest_by_unit:
            return None
        return self.evaluator.evaluate_unit(self.unit_items(unit_id), self.categories)

    def unit_category_results(self, unit_id: str) -> list[UnitCategoryResult]:
        """Per-category results of a unit; all averages are None when unassessed."""
        return self.evaluator.evaluate_categories(self.unit_items(unit_id), self.categories)

    def aggregate(self, scope: AreaScope) -> AreaSummary:
        return aggregate_units_to_area(
            scope.unit_ids,
            self.categories,
            self.items_by_assessment,
            self.latest_by_unit,
            area_id=scope.area_id,
            name=scope.name,
            level=scope.level,
        )

    def roll_up_region(
        self, region_id: str, name: str, child_scopes: Iterable[AreaScope]
    ) -> AreaSummary:
        return roll_up_region(region_id, name, child_scopes, self.aggregate)

    def roll_up_country(self, region_scopes: Iterable[AreaScope]) -> AreaSummary:
        return roll_up_country(region_scopes, self.aggregate)

