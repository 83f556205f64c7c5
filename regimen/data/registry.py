"""
Item registry — one record per normalized item name.

The first occurrence of a name fixes its display casing and category. Later
occurrences only add their period and (date, time); a name that shows up
under a second category is folded into the first one.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from regimen.data.normalize import items_by_category, normalize_name
from regimen.data.schemas import (
    Category, ItemRecord, ItemView, Occurrence, RawEntry, period_sort_key,
)

logger = logging.getLogger(__name__)


@dataclass
class _Accumulator:
    display_name: str
    category: Category
    periods: set[str] = field(default_factory=set)
    occurrences: list[Occurrence] = field(default_factory=list)


WorkingRegistry = dict[str, _Accumulator]


def fold_row(
    working: WorkingRegistry,
    entry: RawEntry,
    extracted: list[tuple[Category, list[str]]],
) -> None:
    """Record every item of one row against its normalized name."""
    for category, names in extracted:
        for name in names:
            key = normalize_name(name)
            acc = working.get(key)
            if acc is None:
                acc = working[key] = _Accumulator(display_name=name, category=category)
            elif acc.category is not category:
                logger.debug(
                    "Item %r listed as %s on %s, keeping first-seen category %s",
                    name, category.value, entry.date, acc.category.value,
                )
            acc.periods.add(entry.period)
            acc.occurrences.append(Occurrence(entry.date, entry.time))


def freeze(working: WorkingRegistry) -> Mapping[str, ItemRecord]:
    return MappingProxyType({
        key: ItemRecord(
            key=key,
            display_name=acc.display_name,
            category=acc.category,
            periods=tuple(sorted(acc.periods, key=period_sort_key)),
            occurrences=tuple(acc.occurrences),
        )
        for key, acc in working.items()
    })


def build_registry(rows: Iterable[RawEntry]) -> Mapping[str, ItemRecord]:
    """Build the deduplicated item catalog for a full set of rows."""
    working: WorkingRegistry = {}
    for entry in rows:
        fold_row(working, entry, items_by_category(entry))
    return freeze(working)


# ---------------------------------------------------------------------------
# Materialization & lookups
# ---------------------------------------------------------------------------

def to_item_list(registry: Mapping[str, ItemRecord]) -> tuple[ItemView, ...]:
    """One view per unique item, in first-seen order."""
    return tuple(
        ItemView(name=rec.display_name, category=rec.category, periods=rec.periods)
        for rec in registry.values()
    )


def lookup(registry: Mapping[str, ItemRecord], name: str) -> ItemRecord | None:
    return registry.get(normalize_name(name))


def occurrences_of(registry: Mapping[str, ItemRecord], name: str) -> tuple[Occurrence, ...]:
    """Every (date, time) the item was scheduled; empty for unknown names."""
    rec = lookup(registry, name)
    return rec.occurrences if rec else ()


def occurrence_count_of(registry: Mapping[str, ItemRecord], name: str) -> int:
    return len(occurrences_of(registry, name))
