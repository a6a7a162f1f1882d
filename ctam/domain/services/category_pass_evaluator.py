"""
Category Pass Evaluator.

Decides which CTAM+ categories an assessment passed and derives its 0-7
quantitative score. A category passes when at least one of its items has
status ``pass``; duplicate items for a category never dilute a pass.
"""

import logging
from collections.abc import Iterable, Sequence

from ctam.domain.entities import AssessmentItem, Category
from ctam.domain.enums import ItemStatus
from ctam.domain.value_objects import (
    TERNARY_SCHEME,
    ItemProgress,
    StatusScheme,
    UnitCategoryResult,
    UnitEvaluation,
)

logger = logging.getLogger(__name__)

QUANTITATIVE_MAX_SCORE = 7.0


class CategoryPassEvaluator:
    """
    Pure evaluator over the items of a single assessment.

    The status scheme supplies item weights for items stored without a
    numeric score and for partial-credit progress.
    """

    def __init__(self, status_scheme: StatusScheme = TERNARY_SCHEME) -> None:
        """
        Initialize the evaluator.

        Args:
            status_scheme: Status vocabulary of the item set being evaluated
        """
        self.status_scheme = status_scheme

    def item_score(self, item: AssessmentItem) -> float:
        """Numeric score of an item, falling back to its status weight."""
        if item.score is None:
            return self.status_scheme.weight(item.status)
        return float(item.score)

    def passed_category_ids(self, items: Iterable[AssessmentItem]) -> set[str]:
        """Distinct categories with at least one passing item."""
        return {item.category_id for item in items if item.is_pass}

    def evaluate_unit(
        self,
        items: Sequence[AssessmentItem],
        categories: Sequence[Category] | None = None,
    ) -> UnitEvaluation:
        """
        Count passed categories and compute the quantitative score.

        Args:
            items: All items of one assessment
            categories: The category set of the cycle. When omitted, the
                distinct categories present in ``items`` are the denominator.

        Returns:
            UnitEvaluation with ``percentage`` on 0-100 and ``score_out_of_7``
        """
        passed = self.passed_category_ids(items)
        if categories is not None:
            category_ids = {category.id for category in categories}
            passed &= category_ids
            total_categories = len(category_ids)
        else:
            total_categories = len({item.category_id for item in items})

        percentage = passed_percentage(len(passed), total_categories)
        evaluation = UnitEvaluation(
            passed_count=len(passed),
            total_categories=total_categories,
            percentage=percentage,
            score_out_of_7=percentage / 100 * QUANTITATIVE_MAX_SCORE,
        )
        logger.debug(
            "Evaluated %d items: %d/%d categories passed",
            len(items),
            evaluation.passed_count,
            evaluation.total_categories,
        )
        return evaluation

    def evaluate_category(
        self, items: Iterable[AssessmentItem], category_id: str
    ) -> UnitCategoryResult:
        """
        Evaluate one category of one assessment.

        Args:
            items: Items of the assessment (other categories are ignored)
            category_id: Category to evaluate

        Returns:
            UnitCategoryResult; ``average`` is None when no item matches and
            1.0 whenever any matching item passed
        """
        matching = [item for item in items if item.category_id == category_id]
        if not matching:
            return UnitCategoryResult(category_id=category_id, average=None)

        if any(item.is_pass for item in matching):
            return UnitCategoryResult(
                category_id=category_id, average=1.0, passed=True, item_count=len(matching)
            )

        average = sum(self.item_score(item) for item in matching) / len(matching)
        return UnitCategoryResult(
            category_id=category_id, average=average, passed=False, item_count=len(matching)
        )

    def evaluate_categories(
        self, items: Sequence[AssessmentItem], categories: Sequence[Category]
    ) -> list[UnitCategoryResult]:
        """Per-category results in category order."""
        return [self.evaluate_category(items, category.id) for category in categories]

    def evaluate_progress(
        self, items: Sequence[AssessmentItem], categories: Sequence[Category]
    ) -> ItemProgress:
        """
        Tally item statuses with partial credit.

        Categories without a pass or partial item count as failed, so
        ``fail_count = total - pass - partial``.

        Args:
            items: Items of one assessment
            categories: The category set of the cycle

        Returns:
            ItemProgress whose percentage weights each status by the scheme
        """
        pass_count = sum(1 for item in items if item.status == ItemStatus.PASS)
        partial_count = 0
        if self.status_scheme.has_partial:
            partial_count = sum(1 for item in items if item.status == ItemStatus.PARTIAL)

        total = len(categories)
        if total == 0:
            percentage = 0.0
        else:
            credit = pass_count * self.status_scheme.weight(ItemStatus.PASS)
            credit += partial_count * self.status_scheme.weight(ItemStatus.PARTIAL)
            percentage = credit / total * 100

        return ItemProgress(
            pass_count=pass_count,
            partial_count=partial_count,
            fail_count=total - pass_count - partial_count,
            total=total,
            percentage=percentage,
        )


def passed_percentage(passed_count: int, total_count: int) -> float:
    """``passed / total * 100``, or 0 when there is nothing to count."""
    if total_count <= 0:
        return 0.0
    return passed_count / total_count * 100
