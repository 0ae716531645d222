"""
Persisted todo list package.

Exposes the list store and item model; the FastAPI app lives in
`todolist.main`.
"""

from .models import ListItem
from .store import ListStore, get_list_store

__all__ = ["ListItem", "ListStore", "get_list_store"]
