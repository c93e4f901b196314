"""Database layer for fitness-catalog."""

from .engine import get_db_path, init_db
from .store import EntityStore, StoreSession

__all__ = [
    "EntityStore",
    "get_db_path",
    "init_db",
    "StoreSession",
]
