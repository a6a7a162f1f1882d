"""
Unit tests for area scopes and result value objects.
"""

import pytest

from ctam.domain.enums import AreaLevel, SafetyLevel
from ctam.domain.value_objects import (
    TEN_POINT_TABLE,
    AreaCategoryResult,
    AreaScope,
    AreaSummary,
    CompositeScore,
    ImpactDistribution,
    SafetySummary,
)


class TestAreaScope:
    def test_unit_ids_become_a_tuple(self):
        scope = AreaScope("p1", "P1", AreaLevel.PROVINCE, ["h1", "h2"])

        assert scope.unit_ids == ("h1", "h2")
        assert scope.size == 2

    def test_merge_keeps_first_seen_order(self):
        a = AreaScope("p1", "P1", AreaLevel.PROVINCE, ("h1", "h2"))
        b = AreaScope("p2", "P2", AreaLevel.PROVINCE, ("h3", "h1", "o1"))

        merged = AreaScope.merge("r1", "R1", AreaLevel.REGION, [a, b])

        assert merged.unit_ids == ("h1", "h2", "h3", "o1")
        assert merged.level == AreaLevel.REGION


class TestAreaSummary:
    @pytest.fixture
    def summary(self):
        return AreaSummary(
            area_id="p1",
            name="P1",
            level=AreaLevel.PROVINCE,
            units_in_scope=10,
            units_assessed=6,
            units_passed_all=4,
            categories=(AreaCategoryResult("c1", 60.0, 6, 10),),
        )

    def test_derived_counts(self, summary):
        assert summary.units_not_assessed == 4
        assert summary.pass_all_percentage == pytest.approx(40.0)

    def test_category_lookup(self, summary):
        assert summary.category("c1").passed_count == 6
        assert summary.category("c2") is None

    def test_to_dict(self, summary):
        data = summary.to_dict()

        assert data["level"] == "province"
        assert data["units_not_assessed"] == 4
        assert data["categories"][0]["pass_percentage"] == 60.0


class TestCompositeScore:
    def test_rounded_view_keeps_raw_values(self):
        score = CompositeScore(
            quantitative=12 / 17 * 7,
            qualitative=0.0,
            impact=1.5,
            total=12 / 17 * 7 + 1.5,
            level=TEN_POINT_TABLE.get(3),
        )

        view = score.rounded()

        assert view["quantitative"] == 4.94
        assert view["total"] == 6.44
        assert score.quantitative == pytest.approx(4.941176, rel=1e-6)
        assert score.to_dict()["level"]["name_en"] == "Fair"


class TestDistributions:
    def test_impact_distribution_counts_are_read_only(self):
        distribution = ImpactDistribution(total_units=2, level_counts={5: 1, 1: 1})

        assert distribution.count(5) == 1
        assert distribution.count(3) == 0
        assert list(distribution.to_dict()["level_counts"]) == ["5", "1"]
        with pytest.raises(TypeError):
            distribution.level_counts[3] = 1  # type: ignore[index]

    def test_safety_summary(self):
        summary = SafetySummary(
            levels_by_unit={"h1": SafetyLevel.GREEN, "h2": SafetyLevel.RED, "h3": SafetyLevel.GREEN}
        )

        assert summary.total == 3
        assert summary.count(SafetyLevel.GREEN) == 2
        assert summary.units_at(SafetyLevel.RED) == ["h2"]
