from __future__ import annotations

import json
import logging
import uuid
from functools import lru_cache
from threading import RLock
from typing import List, Optional

from .models import ListItem
from .settings import get_settings
from .storage import KeyValueStorage, get_storage

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "myList"


# PUBLIC_INTERFACE
class ListStore:
    """
    The whole todo list: an ordered collection of ListItems persisted as a
    single JSON array under one storage key.

    Every mutating call writes the full list back to storage before returning.
    Storage faults and malformed stored data are not caught here. Mutations
    and their save run under one re-entrant lock.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._lock = RLock()
        self._storage = storage
        self._key = key
        self._list: List[ListItem] = []

    @property
    def key(self) -> str:
        return self._key

    @property
    def list(self) -> List[ListItem]:
        """The live item list, in insertion order. Not a copy."""
        return self._list

    def load(self) -> None:
        """
        Append the persisted items to the in-memory list.

        A missing value is a no-op. Each restored item goes through add_item,
        so the list is re-saved once per item, and loading twice without an
        intervening clear duplicates the items.
        """
        with self._lock:
            stored = self._storage.get(self._key)
            if not isinstance(stored, str):
                return

            records = json.loads(stored)
            for record in records:
                self.add_item(ListItem.model_validate(record))
        logger.info("Loaded %d item(s) from key %r", len(records), self._key)

    def save(self) -> None:
        with self._lock:
            blob = json.dumps([item.to_record() for item in self._list])
            self._storage.set(self._key, blob)
            logger.debug("Saved %d item(s) to key %r", len(self._list), self._key)

    def clear_list(self) -> None:
        with self._lock:
            self._list = []
            self.save()

    def add_item(self, item: ListItem) -> None:
        with self._lock:
            self._list.append(item)
            self.save()

    def add_new_item(self, text: str, checked: bool = False, item_id: Optional[str] = None) -> ListItem:
        """
        Build an item, using next_item_id() when no id is given, and append it.
        The id is allocated and the item added under one lock.
        """
        with self._lock:
            item = ListItem(id=item_id or self.next_item_id(), text=text, checked=checked)
            self.add_item(item)
            return item

    def remove_item(self, item_id: str) -> int:
        """Remove every item whose id equals item_id, save, and return how many went."""
        with self._lock:
            before = len(self._list)
            self._list = [item for item in self._list if item.id != item_id]
            self.save()
            return before - len(self._list)

    def toggle_item(self, item_id: str) -> List[ListItem]:
        """
        Replace each item with the given id by a copy with its checked flag
        flipped, save, and return the replacements (empty if none matched).
        """
        toggled: List[ListItem] = []
        with self._lock:
            for index, item in enumerate(self._list):
                if item.id == item_id:
                    replacement = item.toggled()
                    self._list[index] = replacement
                    toggled.append(replacement)
            self.save()
        return toggled

    def next_item_id(self) -> str:
        """
        Id for a newly entered item: the last item's id plus one, or "1" for
        an empty list. A non-numeric last id yields a random hex id.
        """
        with self._lock:
            if not self._list:
                return "1"
            try:
                return str(int(self._list[-1].id) + 1)
            except ValueError:
                return uuid.uuid4().hex


# PUBLIC_INTERFACE
@lru_cache(maxsize=None)
def get_list_store() -> ListStore:
    """Return the process-wide ListStore, built from settings on first call."""
    settings = get_settings()
    return ListStore(get_storage(), key=settings.storage_key)
