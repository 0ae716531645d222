from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from ..schemas import ItemCreate, ItemOut, ListOut
from ..store import ListStore, get_list_store
from ..utils import list_envelope

router = APIRouter(
    prefix="/api/v1/list",
    tags=["list"],
)


def _get_store(store: ListStore = Depends(get_list_store)) -> ListStore:
    """
    Dependency wrapper for the list store to keep signatures clean.
    """
    return store


def _envelope(store: ListStore) -> ListOut:
    return ListOut(**list_envelope(ItemOut.from_item(item) for item in store.list))


# PUBLIC_INTERFACE
@router.get(
    "/",
    response_model=ListOut,
    summary="Get List",
    description="Return every item in insertion order.",
)
def get_list(store: ListStore = Depends(_get_store)) -> ListOut:
    return _envelope(store)


# PUBLIC_INTERFACE
@router.post(
    "/items",
    response_model=ItemOut,
    status_code=status.HTTP_201_CREATED,
    summary="Add Item",
    description=(
        "Append an item to the end of the list and persist the list. "
        "Ids are not de-duplicated."
    ),
    responses={
        201: {"description": "Item added"},
        422: {"description": "Validation error"},
    },
)
def add_item(payload: ItemCreate, store: ListStore = Depends(_get_store)) -> ItemOut:
    item = store.add_new_item(payload.text, checked=payload.checked, item_id=payload.id)
    return ItemOut.from_item(item)


# PUBLIC_INTERFACE
@router.patch(
    "/items/{item_id}/toggle",
    response_model=ItemOut,
    summary="Toggle Item",
    description="Flip the checked flag of the item(s) with this id and persist the list.",
    responses={
        200: {"description": "Item toggled"},
        404: {"description": "Item not found"},
    },
)
def toggle_item(item_id: str, store: ListStore = Depends(_get_store)) -> ItemOut:
    toggled = store.toggle_item(item_id)
    if not toggled:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return ItemOut.from_item(toggled[0])


# PUBLIC_INTERFACE
@router.delete(
    "/items/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove Item",
    description="Remove every item with this id. Returns 204 on success, 404 if nothing matched.",
    responses={
        204: {"description": "Item(s) removed"},
        404: {"description": "Item not found"},
    },
)
def remove_item(item_id: str, store: ListStore = Depends(_get_store)) -> None:
    if store.remove_item(item_id) == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return None


# PUBLIC_INTERFACE
@router.delete(
    "/",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear List",
    description="Remove all items and persist the empty list.",
)
def clear_list(store: ListStore = Depends(_get_store)) -> None:
    store.clear_list()
    return None


# PUBLIC_INTERFACE
@router.post(
    "/reload",
    response_model=ListOut,
    summary="Reload List",
    description=(
        "Append the persisted items to the in-memory list. Items already in memory "
        "are kept, so reloading without clearing duplicates them."
    ),
)
def reload_list(store: ListStore = Depends(_get_store)) -> ListOut:
    store.load()
    return _envelope(store)
