"""Database module."""

from .store import DataStore, LocalJSONStore, StorageError, get_store
from .repository import TrackerRepository

__all__ = ["DataStore", "LocalJSONStore", "StorageError", "get_store", "TrackerRepository"]
