"""
Item filters for the catalog view (type chips × time chips).
"""
from __future__ import annotations

from typing import Iterable

from regimen.config import ALL_FILTER, DAILY_FILTER
from regimen.data.schemas import PERIODS, ItemView


def matches(item: ItemView, type_filter: str = ALL_FILTER, time_filter: str = ALL_FILTER) -> bool:
    """Both the type and the time filter must pass.

    ``daily`` selects items seen in as many distinct periods as there are
    periods in a day. Unknown filter values match nothing.
    """
    category = getattr(item.category, "value", item.category)
    type_ok = type_filter == ALL_FILTER or type_filter == category
    if time_filter == ALL_FILTER:
        time_ok = True
    elif time_filter == DAILY_FILTER:
        time_ok = len(item.periods) == len(PERIODS)
    else:
        time_ok = time_filter in item.periods
    return type_ok and time_ok


def filter_items(
    items: Iterable[ItemView],
    type_filter: str = ALL_FILTER,
    time_filter: str = ALL_FILTER,
) -> list[ItemView]:
    return [item for item in items if matches(item, type_filter, time_filter)]
