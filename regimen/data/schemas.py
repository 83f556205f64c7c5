"""
Regimen data model: periods, categories, raw rows, day buckets, item records.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, NamedTuple, Optional


class Period(str, Enum):
    MORNING = "morning"
    MIDDAY = "midday"
    NIGHT = "night"


class Category(str, Enum):
    SUPPLEMENT = "supplement"
    HAIR = "hair"
    SKIN = "skin"


PERIODS: tuple[str, ...] = tuple(p.value for p in Period)

# Category → (raw field, bucket name). Adding a category means adding a row here.
CATEGORY_FIELDS: dict[Category, str] = {
    Category.SUPPLEMENT: "supplements",
    Category.HAIR: "hair_care",
    Category.SKIN: "skin_care",
}
CATEGORY_BUCKETS: dict[Category, str] = {
    Category.SUPPLEMENT: "sup",
    Category.HAIR: "hair",
    Category.SKIN: "skin",
}

_PERIOD_RANK = {p: i for i, p in enumerate(PERIODS)}


def period_sort_key(period: str) -> tuple[int, str]:
    """Known periods in display order, anything else after them alphabetically."""
    return _PERIOD_RANK.get(period, len(PERIODS)), period


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class RawEntry:
    """One dated schedule slot as it arrives from the plan file."""
    date: str = ""
    time: str = ""
    period: str = ""
    supplements: Optional[str] = None
    hair_care: Optional[str] = None
    skin_care: Optional[str] = None

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> "RawEntry":
        """Build from a decoded JSON object; missing keys become empty."""
        return cls(
            date=_text(record.get("date")).strip(),
            time=_text(record.get("time")).strip(),
            period=_text(record.get("period")).strip(),
            supplements=record.get("supplements"),
            hair_care=record.get("hair_care"),
            skin_care=record.get("skin_care"),
        )

    def field_value(self, category: Category) -> Optional[str]:
        return getattr(self, CATEGORY_FIELDS[category])


class Occurrence(NamedTuple):
    date: str
    time: str


@dataclass(frozen=True)
class SlotBuckets:
    """Items scheduled in one (date, period) slot, by category bucket."""
    sup: tuple[str, ...] = ()
    hair: tuple[str, ...] = ()
    skin: tuple[str, ...] = ()

    def bucket(self, category: Category) -> tuple[str, ...]:
        return getattr(self, CATEGORY_BUCKETS[category])

    @property
    def is_empty(self) -> bool:
        return not (self.sup or self.hair or self.skin)

    def all_items(self) -> list[str]:
        """Items in sup → hair → skin order."""
        return [*self.sup, *self.hair, *self.skin]

    def to_dict(self) -> dict[str, list[str]]:
        return {"sup": list(self.sup), "hair": list(self.hair), "skin": list(self.skin)}


# date → period → buckets
DaySchedule = Mapping[str, SlotBuckets]


@dataclass(frozen=True)
class ItemRecord:
    """One deduplicated item and everywhere it was scheduled."""
    key: str
    display_name: str
    category: Category
    periods: tuple[str, ...] = ()
    occurrences: tuple[Occurrence, ...] = ()

    @property
    def occurrence_count(self) -> int:
        return len(self.occurrences)


@dataclass(frozen=True)
class ItemView:
    """Catalog entry handed to presentation code (no occurrence payload)."""
    name: str
    category: Category
    periods: tuple[str, ...]

    def to_dict(self) -> dict:
        return {"name": self.name, "category": self.category.value, "periods": list(self.periods)}
