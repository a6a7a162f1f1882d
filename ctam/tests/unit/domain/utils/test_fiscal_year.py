"""
Unit tests for fiscal year helpers.
"""

import datetime

import pytest

from ctam.domain.utils.fiscal_year import (
    available_fiscal_years,
    current_fiscal_year,
    filter_by_fiscal_year,
)
from ctam.tests.factories import make_assessment


class TestCurrentFiscalYear:
    @pytest.mark.parametrize(
        ("today", "expected"),
        [
            (datetime.date(2025, 9, 30), 2025),
            (datetime.date(2025, 10, 1), 2026),
            (datetime.date(2025, 12, 31), 2026),
            (datetime.date(2026, 1, 1), 2026),
        ],
    )
    def test_october_start(self, today, expected):
        assert current_fiscal_year(today) == expected

    def test_calendar_year_start(self):
        assert current_fiscal_year(datetime.date(2025, 12, 31), start_month=1) == 2025

    def test_defaults_to_today(self):
        assert current_fiscal_year() in {datetime.date.today().year, datetime.date.today().year + 1}


class TestAvailableFiscalYears:
    def test_current_year_plus_seen_years_newest_first(self):
        assessments = [
            make_assessment("a1", "h1", fiscal_year=2023),
            make_assessment("a2", "h2", fiscal_year=2024),
            make_assessment("a3", "h3", fiscal_year=2023),
        ]

        years = available_fiscal_years(assessments, today=datetime.date(2025, 11, 1))

        assert years == [2026, 2024, 2023]

    def test_default_fixture_year_shares_the_calendar(self):
        years = available_fiscal_years(
            [make_assessment("a1", "h1")], today=datetime.date(2025, 5, 1)
        )

        assert years == [2025]


class TestFilterByFiscalYear:
    def test_filter(self):
        assessments = [
            make_assessment("a1", "h1", fiscal_year=2024),
            make_assessment("a2", "h1", fiscal_year=2025),
        ]

        assert [a.id for a in filter_by_fiscal_year(assessments, 2025)] == ["a2"]
        assert len(filter_by_fiscal_year(assessments, None)) == 2
        assert filter_by_fiscal_year(assessments, 2027) == []
