"""
Composite Score Calculator.

Combines the quantitative (70%), qualitative (15%) and impact (15%)
components into a 0-10 total and resolves its quality level from an injected
band table.
"""

import logging
import math

from ctam.domain.entities import ImpactScore, QualitativeScore
from ctam.domain.exceptions import ScoreOutOfRangeError
from ctam.domain.services.category_pass_evaluator import QUANTITATIVE_MAX_SCORE
from ctam.domain.value_objects import (
    PERCENT_TABLE,
    TEN_POINT_TABLE,
    CompositeScore,
    QualityLevel,
    QualityLevelTable,
    UnitEvaluation,
)

logger = logging.getLogger(__name__)

QUALITATIVE_MAX_SCORE = 1.5
IMPACT_MAX_SCORE = 1.5
RAW_TO_COMPONENT_DIVISOR = 10  # raw 0-15 -> component 0-1.5


class CompositeScoreCalculator:
    """
    Weighted assessment score and quality level resolution.

    All methods are total. Scores outside a band table's span resolve to its
    lowest level unless ``strict`` is set, in which case they raise
    ScoreOutOfRangeError.
    """

    def __init__(
        self,
        quality_table: QualityLevelTable = TEN_POINT_TABLE,
        percent_table: QualityLevelTable = PERCENT_TABLE,
        strict: bool = False,
    ) -> None:
        """
        Initialize the calculator.

        Args:
            quality_table: Bands over the 0-10 composite score
            percent_table: Bands over 0-100 percentage scores
            strict: Reject out-of-range scores instead of banding them lowest
        """
        self.quality_table = quality_table
        self.percent_table = percent_table
        self.strict = strict

    @staticmethod
    def quantitative_component(passed_count: int, total_categories: int) -> float:
        if total_categories <= 0:
            return 0.0
        return passed_count / total_categories * QUANTITATIVE_MAX_SCORE

    @staticmethod
    def qualitative_component(qualitative_score: QualitativeScore | None) -> float:
        """No qualitative record earns no credit."""
        if qualitative_score is None:
            return 0.0
        return float(qualitative_score.total_score) / RAW_TO_COMPONENT_DIVISOR

    @staticmethod
    def impact_component(impact_score: ImpactScore | None) -> float:
        """No impact record means no reported incident: full credit."""
        if impact_score is None:
            return IMPACT_MAX_SCORE
        return min(float(impact_score.total_score) / RAW_TO_COMPONENT_DIVISOR, IMPACT_MAX_SCORE)

    @staticmethod
    def total_score(quantitative: float, qualitative: float, impact: float) -> float:
        return quantitative + qualitative + impact

    def quality_level(self, total_score: float) -> QualityLevel:
        """Quality level of a 0-10 composite score."""
        return self._resolve(total_score, self.quality_table)

    def quality_level_from_percentage(self, percent_score: float) -> QualityLevel:
        """Quality level of a 0-100 percentage score."""
        return self._resolve(percent_score, self.percent_table)

    def calculate(
        self,
        evaluation: UnitEvaluation,
        qualitative_score: QualitativeScore | None = None,
        impact_score: ImpactScore | None = None,
    ) -> CompositeScore:
        """
        Build the composite score of one assessment.

        Args:
            evaluation: Category pass evaluation of the assessment
            qualitative_score: Qualitative record, if any
            impact_score: Impact record, if any

        Returns:
            CompositeScore with unrounded components and the resolved level
        """
        quantitative = self.quantitative_component(
            evaluation.passed_count, evaluation.total_categories
        )
        qualitative = self.qualitative_component(qualitative_score)
        impact = self.impact_component(impact_score)
        total = self.total_score(quantitative, qualitative, impact)
        return CompositeScore(
            quantitative=quantitative,
            qualitative=qualitative,
            impact=impact,
            total=total,
            level=self.quality_level(total),
        )

    def _resolve(self, score: float, table: QualityLevelTable) -> QualityLevel:
        if not math.isnan(score):
            for level in table.levels:
                if level.contains(score):
                    return level

            # Inside the span but between two one-decimal bands (e.g. 5.55)
            if table.min_score <= score <= table.max_score:
                for level in table.levels:
                    if score >= level.min_score:
                        return level

        if self.strict:
            raise ScoreOutOfRangeError(score, table.min_score, table.max_score, table.version)

        logger.warning(
            "Score %s outside quality table '%s' [%s, %s]; using level %d",
            score,
            table.version,
            table.min_score,
            table.max_score,
            table.lowest.level,
        )
        return table.lowest
