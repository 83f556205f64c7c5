"""
One-pass build of every derived structure for a loaded plan.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from regimen.data import registry as _registry
from regimen.data import schedule as _schedule
from regimen.data.normalize import items_by_category
from regimen.data.schemas import DaySchedule, ItemRecord, ItemView, RawEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegimenSnapshot:
    """Immutable result of one full load. Replaced wholesale, never patched."""
    rows: tuple[RawEntry, ...]
    days: Mapping[str, DaySchedule]
    registry: Mapping[str, ItemRecord]
    items: tuple[ItemView, ...]

    @classmethod
    def empty(cls) -> "RegimenSnapshot":
        return cls(rows=(), days=MappingProxyType({}), registry=MappingProxyType({}), items=())


def build_snapshot(rows: Iterable[RawEntry]) -> RegimenSnapshot:
    """Index, register and materialize ``rows`` in a single pass."""
    rows = tuple(rows)
    days: _schedule.WorkingSchedule = {}
    items: _registry.WorkingRegistry = {}
    for entry in rows:
        extracted = items_by_category(entry)
        _schedule.fold_row(days, entry, extracted)
        _registry.fold_row(items, entry, extracted)

    registry = _registry.freeze(items)
    snapshot = RegimenSnapshot(
        rows=rows,
        days=_schedule.freeze(days),
        registry=registry,
        items=_registry.to_item_list(registry),
    )
    logger.info("Built snapshot: %d rows, %d dates, %d items", len(rows), len(snapshot.days), len(snapshot.items))
    return snapshot
