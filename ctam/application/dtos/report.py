"""
Drill-down report DTOs.

Result structures of the drill-down report use case. Each report carries the
rows of one level (regions, provinces or units) together with the summary of
the parent area they belong to.
"""

from dataclasses import dataclass
from typing import Any

from ctam.domain.enums import AreaLevel, SafetyLevel, UnitType
from ctam.domain.value_objects import (
    AreaSummary,
    CompositeScore,
    ImpactDistribution,
    ItemProgress,
    SafetySummary,
    UnitCategoryResult,
    UnitEvaluation,
)


@dataclass(frozen=True)
class UnitReportRow:
    """One hospital or health office in a province report."""

    unit_id: str
    name: str
    unit_type: UnitType | None
    safety_level: SafetyLevel
    categories: tuple[UnitCategoryResult, ...] = ()
    assessment_id: str | None = None
    evaluation: UnitEvaluation | None = None
    composite: CompositeScore | None = None
    progress: ItemProgress | None = None

    @property
    def assessed(self) -> bool:
        return self.assessment_id is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "unit_id": self.unit_id,
            "name": self.name,
            "unit_type": self.unit_type.value if self.unit_type else None,
            "assessment_id": self.assessment_id,
            "safety_level": self.safety_level.value,
            "categories": [c.to_dict() for c in self.categories],
            "evaluation": self.evaluation.to_dict() if self.evaluation else None,
            "composite": self.composite.rounded() if self.composite else None,
            "progress": self.progress.to_dict() if self.progress else None,
        }


@dataclass(frozen=True)
class DrillDownReport:
    """
    Report for one drill-down level.

    ``row_level`` is REGION for the country view, PROVINCE for a region view
    and UNIT for a province view. ``area_rows`` is filled for the first two,
    ``unit_rows`` for the last.
    """

    fiscal_year: int | None
    row_level: AreaLevel
    summary: AreaSummary
    safety: SafetySummary
    impact: ImpactDistribution
    area_rows: tuple[AreaSummary, ...] = ()
    unit_rows: tuple[UnitReportRow, ...] = ()
    failed_categories: frozenset[str] = frozenset()
    passed_categories: frozenset[str] = frozenset()

    def safety_count(self, level: SafetyLevel) -> int:
        return self.safety.count(level)

    def to_dict(self) -> dict[str, Any]:
        return {
            "fiscal_year": self.fiscal_year,
            "row_level": self.row_level.value,
            "summary": self.summary.to_dict(),
            "area_rows": [row.to_dict() for row in self.area_rows],
            "unit_rows": [row.to_dict() for row in self.unit_rows],
            "failed_categories": sorted(self.failed_categories),
            "passed_categories": sorted(self.passed_categories),
            "safety": self.safety.to_dict(),
            "impact": self.impact.to_dict(),
        }
