"""
Test data factories.

Small builders for categories, assessments and items so tests can describe
scenarios by pass counts instead of spelling out every record.
"""

import itertools
from collections.abc import Sequence
from datetime import datetime, timedelta

from ctam.domain.entities import Assessment, AssessmentItem, Category
from ctam.domain.enums import AssessmentStatus, ItemStatus

_item_ids = itertools.count(1)

BASE_TIME = datetime(2025, 1, 1, 8, 0, 0)


def build_categories(count: int = 17) -> list[Category]:
    return [
        Category(
            id=f"cat-{n:02d}",
            code=f"C{n:02d}",
            order_number=n,
            name_th=f"หมวดที่ {n}",
            name_en=f"Category {n}",
        )
        for n in range(1, count + 1)
    ]


def make_item(
    assessment_id: str,
    category_id: str,
    status: ItemStatus = ItemStatus.PASS,
    score: float | None = None,
) -> AssessmentItem:
    return AssessmentItem(
        id=f"item-{next(_item_ids)}",
        assessment_id=assessment_id,
        category_id=category_id,
        status=status,
        score=score,
    )


def items_for(
    assessment_id: str,
    categories: Sequence[Category],
    passed: int,
    other_status: ItemStatus = ItemStatus.FAIL,
) -> list[AssessmentItem]:
    """One item per category; the first ``passed`` categories pass."""
    return [
        make_item(
            assessment_id,
            category.id,
            ItemStatus.PASS if index < passed else other_status,
        )
        for index, category in enumerate(categories)
    ]


def make_assessment(
    assessment_id: str,
    unit_id: str,
    status: str = AssessmentStatus.APPROVED_REGIONAL.value,
    fiscal_year: int = 2025,
    minutes: int | None = 0,
    health_office: bool = False,
    period: str | None = None,
) -> Assessment:
    """Assessment created ``minutes`` after BASE_TIME (undated when None)."""
    created_at = None if minutes is None else BASE_TIME + timedelta(minutes=minutes)
    return Assessment(
        id=assessment_id,
        status=status,
        fiscal_year=fiscal_year,
        hospital_id=None if health_office else unit_id,
        health_office_id=unit_id if health_office else None,
        assessment_period=period,
        created_at=created_at,
    )
