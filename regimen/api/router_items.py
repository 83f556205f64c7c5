"""
Item catalog endpoints — filtered card list and per-item occurrences.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from regimen.data.store import DataStore
from regimen.api.dependencies import get_store, parse_item_filters
from regimen.api.response_models import ItemResponse, ItemsResponse, OccurrencesResponse

router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("", response_model=ItemsResponse)
def list_items(
    store: DataStore = Depends(get_store),
    filters: tuple[str, str] = Depends(parse_item_filters),
):
    """Unique items matching the type and time filters."""
    type_filter, time_filter = filters
    items = [
        ItemResponse(
            name=item.name,
            category=item.category.value,
            periods=list(item.periods),
            occurrences=count,
        )
        for item, count in store.items_with_counts(type_filter, time_filter)
    ]
    return ItemsResponse(items=items, count=len(items), type=type_filter, time=time_filter)



def _occurrences_response(name: str, store: DataStore) -> OccurrencesResponse:
    record = store.get_item(name)
    if record is None:
        raise HTTPException(404, f"Item not found: {name}")
    return OccurrencesResponse(
        name=record.display_name,
        count=record.occurrence_count,
        occurrences=[{"date": o.date, "time": o.time} for o in record.occurrences],
    )


@router.get("/occurrences", response_model=OccurrencesResponse)
def item_occurrences_by_query(
    name: str = Query(..., min_length=1),
    store: DataStore = Depends(get_store),
):
    """Same as the path form, for names with a ``/`` in them."""
    return _occurrences_response(name, store)


@router.get("/{name}/occurrences", response_model=OccurrencesResponse)
def item_occurrences(name: str, store: DataStore = Depends(get_store)):
    """Every (date, time) an item is scheduled, in plan order."""
    return _occurrences_response(name, store)
