"""Domain value objects."""

from ctam.domain.value_objects.area import AreaScope
from ctam.domain.value_objects.quality_level import (
    PERCENT_TABLE,
    QUALITY_TABLES,
    TEN_POINT_TABLE,
    QualityLevel,
    QualityLevelTable,
    get_quality_table,
)
from ctam.domain.value_objects.results import (
    AreaCategoryResult,
    AreaSummary,
    CompositeScore,
    ImpactDistribution,
    ItemProgress,
    SafetySummary,
    UnitCategoryResult,
    UnitEvaluation,
)
from ctam.domain.value_objects.status_scheme import (
    BINARY_SCHEME,
    TERNARY_SCHEME,
    StatusScheme,
    get_status_scheme,
)

__all__ = [
    "AreaCategoryResult",
    "AreaScope",
    "AreaSummary",
    "BINARY_SCHEME",
    "CompositeScore",
    "ImpactDistribution",
    "ItemProgress",
    "PERCENT_TABLE",
    "QUALITY_TABLES",
    "QualityLevel",
    "QualityLevelTable",
    "SafetySummary",
    "StatusScheme",
    "TEN_POINT_TABLE",
    "TERNARY_SCHEME",
    "UnitCategoryResult",
    "UnitEvaluation",
    "get_quality_table",
    "get_status_scheme",
]
