"""Plan loading, normalization, indexing, and the in-memory regimen store."""
from .loader import SourceUnavailable, load_plan, rows_from_records
from .normalize import split_items, normalize_name
from .schedule import index_by_date, has_entries
from .registry import build_registry, to_item_list, occurrences_of, occurrence_count_of
from .filters import matches, filter_items
from .snapshot import RegimenSnapshot, build_snapshot
from .store import DataStore
