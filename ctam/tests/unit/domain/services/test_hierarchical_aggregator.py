"""
Unit tests for the hierarchical aggregator.
"""

import pytest

from ctam.domain.enums import AreaLevel, ItemStatus
from ctam.domain.services import (
    HierarchicalAggregator,
    aggregate_units_to_area,
    index_items_by_assessment,
    roll_up_country,
    roll_up_region,
)
from ctam.domain.services.hierarchical_aggregator import passed_all_categories
from ctam.domain.value_objects import AreaScope
from ctam.tests.factories import items_for, make_assessment, make_item


@pytest.fixture
def province_snapshot(categories):
    """
    Ten hospitals; six assessed, of which four pass every category.

    h5 and h6 pass the first ten categories only.
    """
    unit_ids = [f"h{n}" for n in range(1, 11)]
    latest = {}
    items = []
    for n in range(1, 7):
        assessment = make_assessment(f"a{n}", f"h{n}")
        latest[f"h{n}"] = assessment
        items += items_for(assessment.id, categories, passed=17 if n <= 4 else 10)
    return unit_ids, latest, items


class TestAggregateUnitsToArea:
    """Tests for the province-level roll-up."""

    def test_unassessed_units_stay_in_denominator(self, categories, province_snapshot):
        # Arrange
        unit_ids, latest, items = province_snapshot

        # Act
        summary = aggregate_units_to_area(
            unit_ids, categories, index_items_by_assessment(items), latest, area_id="p1", name="P1"
        )

        # Assert
        assert summary.units_in_scope == 10
        assert summary.units_assessed == 6
        assert summary.units_not_assessed == 4
        assert summary.units_passed_all == 4
        assert summary.pass_all_percentage == pytest.approx(40.0)

    def test_category_percentages_use_units_in_scope(self, categories, province_snapshot):
        unit_ids, latest, items = province_snapshot

        summary = aggregate_units_to_area(
            unit_ids, categories, index_items_by_assessment(items), latest
        )

        first = summary.category(categories[0].id)
        last = summary.category(categories[-1].id)
        assert first.passed_count == 6
        assert first.total_count == 10
        assert first.pass_percentage == pytest.approx(60.0)
        assert last.pass_percentage == pytest.approx(40.0)

    def test_repeated_aggregation_is_identical(self, categories, province_snapshot):
        unit_ids, latest, items = province_snapshot
        index = index_items_by_assessment(items)

        first = aggregate_units_to_area(unit_ids, categories, index, latest, area_id="p1")
        second = aggregate_units_to_area(unit_ids, categories, index, latest, area_id="p1")

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_empty_scope_has_no_percentages(self, categories):
        summary = aggregate_units_to_area([], categories, {}, {})

        assert summary.units_in_scope == 0
        assert summary.pass_all_percentage is None
        assert all(c.pass_percentage is None for c in summary.categories)

    def test_assessed_unit_without_items_counts_as_assessed(self, categories):
        latest = {"h1": make_assessment("a1", "h1")}

        summary = aggregate_units_to_area(["h1"], categories, {}, latest)

        assert summary.units_assessed == 1
        assert summary.units_passed_all == 0

    def test_latest_outside_scope_is_ignored(self, categories, province_snapshot):
        _, latest, items = province_snapshot

        summary = aggregate_units_to_area(
            ["h1", "h7"], categories, index_items_by_assessment(items), latest
        )

        assert summary.units_in_scope == 2
        assert summary.units_assessed == 1


class TestPassedAllCategories:
    def test_empty_category_set_is_not_a_pass(self):
        assert passed_all_categories([make_item("a1", "c1")], []) is False

    def test_missing_category_fails(self, categories):
        items = items_for("a1", categories[:16], passed=16)

        assert passed_all_categories(items, categories) is False

    def test_one_passing_item_per_category_is_enough(self, categories):
        items = items_for("a1", categories, passed=17) + [
            make_item("a1", categories[0].id, ItemStatus.FAIL)
        ]

        assert passed_all_categories(items, categories) is True


class TestRollUp:
    """Tests for region and country roll-ups over unions of scopes."""

    def test_region_is_union_of_province_scopes(self, categories, province_snapshot):
        # Arrange
        _, latest, items = province_snapshot
        aggregator = HierarchicalAggregator(categories, items, latest)
        p1 = AreaScope("p1", "P1", AreaLevel.PROVINCE, ("h1", "h2", "h7"))
        p2 = AreaScope("p2", "P2", AreaLevel.PROVINCE, ("h5", "h8"))

        # Act
        region = roll_up_region("r1", "R1", [p1, p2], aggregator.aggregate)

        # Assert
        assert region.level == AreaLevel.REGION
        assert region.units_in_scope == 5
        assert region.units_assessed == 3
        assert region.units_passed_all == 2

    def test_region_does_not_average_province_percentages(self, categories, province_snapshot):
        _, latest, items = province_snapshot
        aggregator = HierarchicalAggregator(categories, items, latest)
        small = AreaScope("p1", "P1", AreaLevel.PROVINCE, ("h1",))
        large = AreaScope("p2", "P2", AreaLevel.PROVINCE, ("h7", "h8", "h9"))

        region = aggregator.roll_up_region("r1", "R1", [small, large])

        # (100% + 0%) / 2 would be 50%
        assert region.pass_all_percentage == pytest.approx(25.0)

    def test_overlapping_scopes_count_units_once(self, categories, province_snapshot):
        _, latest, items = province_snapshot
        aggregator = HierarchicalAggregator(categories, items, latest)
        r1 = AreaScope("r1", "R1", AreaLevel.REGION, ("h1", "h2"))
        r2 = AreaScope("r2", "R2", AreaLevel.REGION, ("h2", "h3"))

        country = roll_up_country([r1, r2], aggregator.aggregate)

        assert country.level == AreaLevel.COUNTRY
        assert country.area_id == "country"
        assert country.units_in_scope == 3
        assert country.units_passed_all == 3


class TestHierarchicalAggregator:
    """Tests for the snapshot-bound aggregator."""

    def test_categories_are_ordered_for_display(self, categories):
        aggregator = HierarchicalAggregator(list(reversed(categories)), [], {})

        assert [c.order_number for c in aggregator.categories] == list(range(1, 18))

    def test_unit_queries(self, categories, province_snapshot):
        # Arrange
        _, latest, items = province_snapshot
        aggregator = HierarchicalAggregator(categories, items, latest)

        # Act & Assert
        assert aggregator.latest_assessment("h1").id == "a1"
        assert aggregator.latest_assessment("h7") is None
        assert len(aggregator.unit_items("h1")) == 17
        assert aggregator.unit_items("h7") == []
        assert aggregator.unit_passed_all("h1") is True
        assert aggregator.unit_passed_all("h5") is False
        assert aggregator.unit_passed_all("h7") is False

    def test_evaluate_unit(self, categories, province_snapshot):
        _, latest, items = province_snapshot
        aggregator = HierarchicalAggregator(categories, items, latest)

        evaluation = aggregator.evaluate_unit("h5")

        assert evaluation.passed_count == 10
        assert evaluation.total_categories == 17
        assert aggregator.evaluate_unit("h7") is None

    def test_unit_category_results_of_unassessed_unit(self, categories, province_snapshot):
        _, latest, items = province_snapshot
        aggregator = HierarchicalAggregator(categories, items, latest)

        results = aggregator.unit_category_results("h7")

        assert len(results) == 17
        assert all(r.average is None for r in results)

    def test_inputs_are_not_mutated(self, categories, province_snapshot):
        _, latest, items = province_snapshot
        latest_before = dict(latest)
        items_before = list(items)

        aggregator = HierarchicalAggregator(categories, items, latest)
        aggregator.aggregate(AreaScope("p1", "P1", AreaLevel.PROVINCE, tuple(latest)))

        assert latest == latest_before
        assert items == items_before
