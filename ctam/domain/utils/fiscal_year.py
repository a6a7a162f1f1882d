"""
Fiscal year helpers.

Fiscal years are Gregorian integers named after the calendar year in which
they end. The Thai government fiscal year starts on 1 October: October 2025
falls in fiscal year 2026. Buddhist-era years (Gregorian + 543) are for
display only and never appear in stored data. Fiscal-year filtering happens before approval filtering and
latest-assessment selection, so each year's view picks its own latest
assessment per unit.
"""

import datetime
from collections.abc import Iterable
from typing import TypeVar

from ctam.domain.entities import Assessment

DEFAULT_FISCAL_YEAR_START_MONTH = 10

A = TypeVar("A", bound=Assessment)


def current_fiscal_year(
    today: datetime.date | None = None,
    start_month: int = DEFAULT_FISCAL_YEAR_START_MONTH,
) -> int:
    """
    Fiscal year containing ``today``.

    Args:
        today: Reference date, defaults to the local current date
        start_month: First calendar month of the fiscal year

    Returns:
        The fiscal year, named after the calendar year in which it ends
    """
    today = today or datetime.date.today()
    if start_month > 1 and today.month >= start_month:
        return today.year + 1
    return today.year


def available_fiscal_years(
    assessments: Iterable[Assessment],
    today: datetime.date | None = None,
    start_month: int = DEFAULT_FISCAL_YEAR_START_MONTH,
) -> list[int]:
    """The current fiscal year plus every year with an assessment, newest first."""
    years = {current_fiscal_year(today, start_month)}
    years.update(a.fiscal_year for a in assessments if a.fiscal_year)
    return sorted(years, reverse=True)


def filter_by_fiscal_year(assessments: Iterable[A], fiscal_year: int | None) -> list[A]:
    """Assessments of one fiscal year, or all of them when ``fiscal_year`` is None."""
    if fiscal_year is None:
        return list(assessments)
    return [a for a in assessments if a.fiscal_year == fiscal_year]
