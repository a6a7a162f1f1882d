"""
Domain services.

Pure, synchronous scoring and aggregation over already-loaded records.
"""

from ctam.domain.services.category_pass_evaluator import CategoryPassEvaluator
from ctam.domain.services.composite_score_calculator import CompositeScoreCalculator
from ctam.domain.services.hierarchical_aggregator import (
    HierarchicalAggregator,
    aggregate_units_to_area,
    index_items_by_assessment,
    roll_up_country,
    roll_up_region,
)
from ctam.domain.services.latest_assessment_selector import (
    latest_approved_by_unit,
    latest_by_recency,
    sort_by_creation,
)

__all__ = [
    "CategoryPassEvaluator",
    "CompositeScoreCalculator",
    "HierarchicalAggregator",
    "aggregate_units_to_area",
    "index_items_by_assessment",
    "latest_approved_by_unit",
    "latest_by_recency",
    "roll_up_country",
    "roll_up_region",
    "sort_by_creation",
]
