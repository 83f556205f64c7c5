"""
Unit tests for the item type/time filter predicate.
"""
import pytest

from regimen.data.filters import filter_items, matches
from regimen.data.schemas import Category, ItemView


DAILY = ItemView("Vitamin D", Category.SUPPLEMENT, ("morning", "midday", "night"))
NIGHT_HAIR = ItemView("Rosemary Oil", Category.HAIR, ("night",))
AM_PM_SKIN = ItemView("Sunscreen", Category.SKIN, ("morning", "night"))


class TestMatches:

    def test_all_all_matches_everything(self):
        assert all(matches(i, "all", "all") for i in (DAILY, NIGHT_HAIR, AM_PM_SKIN))

    @pytest.mark.parametrize("type_filter,expected", [
        ("supplement", True),
        ("hair", False),
        ("skin", False),
        ("all", True),
    ])
    def test_type_filter(self, type_filter, expected):
        assert matches(DAILY, type_filter, "all") is expected

    def test_daily_requires_three_periods(self):
        assert matches(DAILY, "all", "daily")
        assert not matches(AM_PM_SKIN, "all", "daily")
        assert not matches(NIGHT_HAIR, "all", "daily")

    def test_period_filter(self):
        assert matches(AM_PM_SKIN, "all", "night")
        assert not matches(AM_PM_SKIN, "all", "midday")

    def test_both_conditions_must_pass(self):
        assert matches(NIGHT_HAIR, "hair", "night")
        assert not matches(NIGHT_HAIR, "hair", "morning")
        assert not matches(NIGHT_HAIR, "skin", "night")

    @pytest.mark.parametrize("type_filter,time_filter", [
        ("vitamins", "all"),
        ("all", "evening"),
        ("SUPPLEMENT", "all"),
    ])
    def test_unknown_filter_values_match_nothing(self, type_filter, time_filter):
        assert not any(matches(i, type_filter, time_filter) for i in (DAILY, NIGHT_HAIR, AM_PM_SKIN))


def test_filter_items_keeps_order():
    items = [DAILY, NIGHT_HAIR, AM_PM_SKIN]
    assert filter_items(items, "all", "night") == [DAILY, NIGHT_HAIR, AM_PM_SKIN]
    assert filter_items(items, "all", "morning") == [DAILY, AM_PM_SKIN]
