"""
Drill-Down Report Use Case.

Builds the quantitative drill-down report: the country view lists health
regions, a region view lists its provinces and a province view lists its
hospitals and health offices with their category results and composite
scores.
"""

from collections.abc import Collection, Iterable, Sequence

from ctam.application.dtos.report import DrillDownReport, UnitReportRow
from ctam.application.scoring_context import ScoringContext
from ctam.core.exceptions import ValidationError
from ctam.core.utils.logging import get_logger, log_execution_time
from ctam.domain.entities import (
    Assessment,
    AssessmentItem,
    Category,
    HealthRegion,
    ImpactScore,
    OrganizationHierarchy,
    QualitativeScore,
)
from ctam.domain.enums import AreaLevel
from ctam.domain.services import (
    HierarchicalAggregator,
    latest_approved_by_unit,
    sort_by_creation,
)
from ctam.domain.services.hierarchical_aggregator import COUNTRY_AREA_ID
from ctam.domain.services.impact_distribution import impact_distribution
from ctam.domain.services.report_classifiers import (
    category_outcomes,
    classify_unit_safety,
    summarize_safety,
)
from ctam.domain.value_objects import AreaScope, AreaSummary, ImpactDistribution


class DrillDownReportUseCase:
    """
    Build drill-down reports over one loaded snapshot of assessment data.

    Assessments are ordered by creation time before the latest approved
    assessment of each unit is selected, so callers may pass them in any
    order.
    """

    def __init__(
        self,
        hierarchy: OrganizationHierarchy,
        categories: Sequence[Category],
        assessments: Iterable[Assessment],
        items: Iterable[AssessmentItem],
        qualitative_scores: Iterable[QualitativeScore] = (),
        impact_scores: Iterable[ImpactScore] = (),
        context: ScoringContext | None = None,
    ) -> None:
        """
        Initialize the use case with a data snapshot.

        Args:
            hierarchy: Regions, provinces and units
            categories: Category set of the cycle
            assessments: All assessments, any status and fiscal year
            items: Items of those assessments
            qualitative_scores: Qualitative records keyed by assessment
            impact_scores: Impact records keyed by assessment
            context: Scoring configuration, defaults to the library settings
        """
        self.hierarchy = hierarchy
        self.categories = tuple(categories)
        self.assessments = sort_by_creation(assessments)
        self.items = tuple(items)
        self.qualitative_by_assessment = {q.assessment_id: q for q in qualitative_scores}
        self.impact_by_assessment = {i.assessment_id: i for i in impact_scores}
        self.context = context or ScoringContext.from_settings()
        self.logger = get_logger(__name__)

    @log_execution_time
    def execute(
        self,
        fiscal_year: int | None = None,
        region_id: str | None = None,
        province_id: str | None = None,
        visible_unit_ids: Collection[str] | None = None,
    ) -> DrillDownReport:
        """
        Build the report for one drill-down level.

        Args:
            fiscal_year: Fiscal year to report on, defaults to the current one
            region_id: Report the provinces of this region
            province_id: Report the units of this province (takes precedence
                over ``region_id``)
            visible_unit_ids: Units the viewer may see; every scope is
                narrowed to these before aggregation. None means all units.

        Returns:
            DrillDownReport for the requested level

        Raises:
            ValidationError: If the region or province is unknown
        """
        year = fiscal_year if fiscal_year is not None else self.context.current_fiscal_year()
        latest = latest_approved_by_unit(self.assessments, self.context.is_approved, year)
        aggregator = HierarchicalAggregator(
            self.categories, self.items, latest, evaluator=self.context.evaluator
        )
        visible = set(visible_unit_ids) if visible_unit_ids is not None else None

        if province_id is not None:
            report = self._province_report(aggregator, province_id, year, visible)
        elif region_id is not None:
            report = self._region_report(aggregator, region_id, year, visible)
        else:
            report = self._country_report(aggregator, year, visible)

        self.logger.info(
            "Built %s report for %s (fiscal year %s): %d/%d units assessed",
            report.row_level.value,
            report.summary.name,
            year,
            report.summary.units_assessed,
            report.summary.units_in_scope,
        )
        return report

    def _country_report(
        self, aggregator: HierarchicalAggregator, year: int, visible: set[str] | None
    ) -> DrillDownReport:
        region_scopes = [self._region_scope(region, visible) for region in self.hierarchy.regions]
        rows = tuple(aggregator.aggregate(scope) for scope in region_scopes)
        summary = aggregator.roll_up_country(region_scopes)
        scope = AreaScope.merge(COUNTRY_AREA_ID, summary.name, AreaLevel.COUNTRY, region_scopes)
        return self._area_report(aggregator, year, AreaLevel.REGION, summary, scope, rows)

    def _region_report(
        self,
        aggregator: HierarchicalAggregator,
        region_id: str,
        year: int,
        visible: set[str] | None,
    ) -> DrillDownReport:
        region = self.hierarchy.get_region(region_id)
        if region is None:
            raise ValidationError(f"Unknown health region: {region_id}")

        province_scopes = [
            _narrow(scope, visible) for scope in self.hierarchy.region_province_scopes(region_id)
        ]
        rows = tuple(aggregator.aggregate(scope) for scope in province_scopes)
        scope = self._region_scope(region, visible)
        summary = aggregator.aggregate(scope)
        return self._area_report(aggregator, year, AreaLevel.PROVINCE, summary, scope, rows)

    def _province_report(
        self,
        aggregator: HierarchicalAggregator,
        province_id: str,
        year: int,
        visible: set[str] | None,
    ) -> DrillDownReport:
        if self.hierarchy.get_province(province_id) is None:
            raise ValidationError(f"Unknown province: {province_id}")

        scope = _narrow(self.hierarchy.province_scope(province_id), visible)
        summary = aggregator.aggregate(scope)
        rows = tuple(self._unit_row(aggregator, unit_id) for unit_id in scope.unit_ids)
        failed, passed = category_outcomes(
            [c.id for c in aggregator.categories],
            unit_rows=[row.categories for row in rows],
        )
        return DrillDownReport(
            fiscal_year=year,
            row_level=AreaLevel.UNIT,
            summary=summary,
            safety=summarize_safety(aggregator, scope.unit_ids),
            impact=self._impact(aggregator, scope),
            unit_rows=rows,
            failed_categories=frozenset(failed),
            passed_categories=frozenset(passed),
        )

    def _area_report(
        self,
        aggregator: HierarchicalAggregator,
        year: int,
        row_level: AreaLevel,
        summary: AreaSummary,
        scope: AreaScope,
        rows: tuple[AreaSummary, ...],
    ) -> DrillDownReport:
        failed, passed = category_outcomes([c.id for c in aggregator.categories], area_rows=rows)
        return DrillDownReport(
            fiscal_year=year,
            row_level=row_level,
            summary=summary,
            safety=summarize_safety(aggregator, scope.unit_ids),
            impact=self._impact(aggregator, scope),
            area_rows=rows,
            failed_categories=frozenset(failed),
            passed_categories=frozenset(passed),
        )

    def _region_scope(self, region: HealthRegion, visible: set[str] | None) -> AreaScope:
        """Provinces of the region plus its regional health offices."""
        children = [
            *self.hierarchy.region_province_scopes(region.id),
            self.hierarchy.regional_office_scope(region.id),
        ]
        merged = AreaScope.merge(region.id, region.display_name, AreaLevel.REGION, children)
        return _narrow(merged, visible)

    def _unit_row(self, aggregator: HierarchicalAggregator, unit_id: str) -> UnitReportRow:
        assessment = aggregator.latest_assessment(unit_id)
        results = tuple(aggregator.unit_category_results(unit_id))
        safety_level = classify_unit_safety(results, assessed=assessment is not None)
        name = self.hierarchy.unit_name(unit_id) or unit_id
        unit_type = self.hierarchy.unit_type(unit_id)

        if assessment is None:
            return UnitReportRow(
                unit_id=unit_id,
                name=name,
                unit_type=unit_type,
                safety_level=safety_level,
                categories=results,
            )

        evaluation = aggregator.evaluate_unit(unit_id)
        composite = self.context.calculator.calculate(
            evaluation,
            self.qualitative_by_assessment.get(assessment.id),
            self.impact_by_assessment.get(assessment.id),
        )
        progress = self.context.evaluator.evaluate_progress(
            aggregator.unit_items(unit_id), aggregator.categories
        )
        return UnitReportRow(
            unit_id=unit_id,
            name=name,
            unit_type=unit_type,
            safety_level=safety_level,
            categories=results,
            assessment_id=assessment.id,
            evaluation=evaluation,
            composite=composite,
            progress=progress,
        )

    def _impact(
        self, aggregator: HierarchicalAggregator, scope: AreaScope
    ) -> ImpactDistribution:
        return impact_distribution(
            scope.unit_ids,
            aggregator.latest_by_unit,
            self.impact_by_assessment,
            self.context.calculator,
        )


def _narrow(scope: AreaScope, visible: set[str] | None) -> AreaScope:
    """Restrict a scope to the units the viewer may see."""
    if visible is None:
        return scope
    return AreaScope(
        area_id=scope.area_id,
        name=scope.name,
        level=scope.level,
        unit_ids=tuple(unit_id for unit_id in scope.unit_ids if unit_id in visible),
    )
