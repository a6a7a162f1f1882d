"""
Result value objects produced by the scoring services.

Unit-level and area-level category results are distinct types: at unit level
a category has an average item score (1.0 means passed), at area level it has
the percentage of in-scope units that passed it.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ctam.domain.enums import AreaLevel, SafetyLevel
from ctam.domain.value_objects.quality_level import QualityLevel


@dataclass(frozen=True)
class UnitEvaluation:
    """Category pass count and quantitative score of one assessment."""

    passed_count: int
    total_categories: int
    percentage: float
    score_out_of_7: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed_count": self.passed_count,
            "total_categories": self.total_categories,
            "percentage": self.percentage,
            "score_out_of_7": self.score_out_of_7,
        }


@dataclass(frozen=True)
class UnitCategoryResult:
    """
    One category of one assessment.

    ``average`` is ``None`` when the assessment has no item for the category,
    1.0 when any item passed, and otherwise the mean item score.
    """

    category_id: str
    average: float | None
    passed: bool = False
    item_count: int = 0

    @property
    def has_data(self) -> bool:
        return self.average is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_id": self.category_id,
            "average": self.average,
            "passed": self.passed,
            "item_count": self.item_count,
        }


@dataclass(frozen=True)
class ItemProgress:
    """Pass/partial/fail tally of an assessment with partial-credit percentage."""

    pass_count: int
    partial_count: int
    fail_count: int
    total: int
    percentage: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "pass": self.pass_count,
            "partial": self.partial_count,
            "fail": self.fail_count,
            "total": self.total,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class AreaCategoryResult:
    """
    One category across all units of an area.

    ``pass_percentage`` is ``passed_count / total_count * 100`` where
    ``total_count`` counts every unit in scope, assessed or not. It is
    ``None`` for an empty scope.
    """

    category_id: str
    pass_percentage: float | None
    passed_count: int
    total_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "category_id": self.category_id,
            "pass_percentage": self.pass_percentage,
            "passed_count": self.passed_count,
            "total_count": self.total_count,
        }


@dataclass(frozen=True)
class AreaSummary:
    """Roll-up of the latest approved assessments of every unit in an area."""

    area_id: str
    name: str
    level: AreaLevel
    units_in_scope: int
    units_assessed: int
    units_passed_all: int
    categories: tuple[AreaCategoryResult, ...] = ()

    @property
    def units_not_assessed(self) -> int:
        return self.units_in_scope - self.units_assessed

    @property
    def pass_all_percentage(self) -> float | None:
        """Share of in-scope units that passed every category."""
        if self.units_in_scope == 0:
            return None
        return self.units_passed_all / self.units_in_scope * 100

    def category(self, category_id: str) -> AreaCategoryResult | None:
        return next((c for c in self.categories if c.category_id == category_id), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "area_id": self.area_id,
            "name": self.name,
            "level": self.level.value,
            "units_in_scope": self.units_in_scope,
            "units_assessed": self.units_assessed,
            "units_passed_all": self.units_passed_all,
            "units_not_assessed": self.units_not_assessed,
            "pass_all_percentage": self.pass_all_percentage,
            "categories": [c.to_dict() for c in self.categories],
        }


@dataclass(frozen=True)
class CompositeScore:
    """Weighted 0-10 assessment score and its quality level."""

    quantitative: float
    qualitative: float
    impact: float
    total: float
    level: QualityLevel

    def rounded(self, digits: int = 2) -> dict[str, Any]:
        """Presentation view; stored and compared values are never rounded."""
        return {
            "quantitative": round(self.quantitative, digits),
            "qualitative": round(self.qualitative, digits),
            "impact": round(self.impact, digits),
            "total": round(self.total, digits),
            "level": self.level.level,
            "level_name": self.level.name_en,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "quantitative": self.quantitative,
            "qualitative": self.qualitative,
            "impact": self.impact,
            "total": self.total,
            "level": self.level.to_dict(),
        }


@dataclass(frozen=True)
class ImpactDistribution:
    """Impact quality levels across an area, with incident and breach counts."""

    total_units: int
    level_counts: Mapping[int, int] = field(default_factory=dict, hash=False)
    not_assessed: int = 0
    incidents: int = 0
    breaches: int = 0
    average_raw_score: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "level_counts", MappingProxyType(dict(self.level_counts)))

    def count(self, level: int) -> int:
        return self.level_counts.get(level, 0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_units": self.total_units,
            "level_counts": {str(k): v for k, v in sorted(self.level_counts.items(), reverse=True)},
            "not_assessed": self.not_assessed,
            "incidents": self.incidents,
            "breaches": self.breaches,
            "average_raw_score": self.average_raw_score,
        }


@dataclass(frozen=True)
class SafetySummary:
    """Safety classification of each unit and the count per level."""

    levels_by_unit: Mapping[str, SafetyLevel] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "levels_by_unit", MappingProxyType(dict(self.levels_by_unit)))

    def count(self, level: SafetyLevel) -> int:
        return sum(1 for value in self.levels_by_unit.values() if value == level)

    @property
    def total(self) -> int:
        return len(self.levels_by_unit)

    def units_at(self, level: SafetyLevel) -> list[str]:
        return [unit_id for unit_id, value in self.levels_by_unit.items() if value == level]

    def to_dict(self) -> dict[str, Any]:
        counts = {level.value: self.count(level) for level in SafetyLevel}
        counts["all"] = self.total
        return counts
