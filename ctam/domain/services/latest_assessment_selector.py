"""
Latest assessment selection.

Reports only ever look at one assessment per unit: the latest approved one
within the selected fiscal year. Two selection strategies exist:

* ``latest_approved_by_unit`` keeps the last record seen per unit. It does
  **not** sort. Callers must pass assessments in ascending creation order
  (see ``sort_by_creation``); an unsorted input silently yields the last
  record in input order, not the newest.
* ``latest_by_recency`` compares fiscal year, assessment period and
  creation time explicitly and is independent of input order.
"""

import logging
import re
from collections.abc import Callable, Iterable
from typing import TypeVar

from ctam.domain.entities import Assessment
from ctam.domain.enums import is_approved_assessment_status
from ctam.domain.utils.fiscal_year import filter_by_fiscal_year

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=Assessment)

ApprovalPredicate = Callable[[str | None], bool]

_PERIOD_NUMBER = re.compile(r"\d+")


def latest_approved_by_unit(
    assessments: Iterable[A],
    is_approved: ApprovalPredicate = is_approved_assessment_status,
    fiscal_year: int | None = None,
) -> dict[str, A]:
    """
    Map each unit to its latest approved assessment, last write wins.

    PRECONDITION: ``assessments`` is sorted ascending by creation time. The
    record later in the input overwrites the earlier one, so for sorted input
    the most recently created assessment wins and ties resolve to the later
    record. Nothing is checked.

    Args:
        assessments: Assessments in ascending creation order
        is_approved: Predicate over the raw status string
        fiscal_year: Restrict to one fiscal year before approval filtering

    Returns:
        Dict of unit id to assessment; units without an approved assessment
        are absent
    """
    latest: dict[str, A] = {}
    for assessment in filter_by_fiscal_year(assessments, fiscal_year):
        if not is_approved(assessment.status):
            continue
        unit_id = assessment.unit_id
        if not unit_id:
            continue
        latest[unit_id] = assessment

    logger.debug(
        "Selected latest approved assessments for %d units (fiscal year %s)",
        len(latest),
        fiscal_year,
    )
    return latest


def sort_by_creation(assessments: Iterable[A]) -> list[A]:
    """Stable ascending sort by ``created_at``; undated records come first."""
    return sorted(
        assessments,
        key=lambda a: (0,) if a.created_at is None else (1, a.created_at),
    )


def _period_number(period: str | None) -> int | None:
    if not period:
        return None
    match = _PERIOD_NUMBER.search(period)
    return int(match.group()) if match else None


def compare_recency(a: Assessment, b: Assessment) -> int:
    """
    Positive when ``a`` is newer than ``b``, negative when older, 0 when tied.

    Fiscal year decides first, then the number inside ``assessment_period``,
    then the period text, then ``created_at``.
    """
    if a.fiscal_year != b.fiscal_year:
        return a.fiscal_year - b.fiscal_year

    a_period = _period_number(a.assessment_period)
    b_period = _period_number(b.assessment_period)
    if a_period is not None and b_period is not None and a_period != b_period:
        return a_period - b_period

    if a.assessment_period and b.assessment_period and a.assessment_period != b.assessment_period:
        return -1 if a.assessment_period < b.assessment_period else 1

    if a.created_at and b.created_at and a.created_at != b.created_at:
        return -1 if a.created_at < b.created_at else 1

    return 0


def latest_by_recency(
    assessments: Iterable[A],
    is_approved: ApprovalPredicate | None = None,
    fiscal_year: int | None = None,
) -> dict[str, A]:
    """
    Map each unit to its most recent assessment regardless of input order.

    Ties keep the record seen first.

    Args:
        assessments: Assessments in any order
        is_approved: Optional predicate; when given, other statuses are skipped
        fiscal_year: Restrict to one fiscal year first

    Returns:
        Dict of unit id to assessment
    """
    latest: dict[str, A] = {}
    for assessment in filter_by_fiscal_year(assessments, fiscal_year):
        if is_approved is not None and not is_approved(assessment.status):
            continue
        unit_id = assessment.unit_id
        if not unit_id:
            continue
        existing = latest.get(unit_id)
        if existing is None or compare_recency(assessment, existing) > 0:
            latest[unit_id] = assessment
    return latest
