"""Key-value storage of per-user data documents."""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from urllib.parse import quote

logger = logging.getLogger(__name__)

# Logical data keys of the persisted collections
WORKOUTS_KEY = "workouts"
DAILY_LOGS_KEY = "dailyLogs"
NUTRITION_GOALS_KEY = "nutritionGoals"


class StorageError(Exception):
    """Raised when a storage backend fails to read or write."""


class DataStore(ABC):
    """Per-user JSON documents addressed by a data key."""

    @abstractmethod
    def get(self, user_id: str, key: str) -> Optional[Any]:
        """Return the stored value, or None if absent."""

    @abstractmethod
    def set(self, user_id: str, key: str, value: Any) -> None:
        """Store a JSON-compatible value."""


class LocalJSONStore(DataStore):
    """One JSON file per user under a data directory.

    Writes go through a temp file and os.replace so a crash never leaves a
    half-written document behind.
    """

    def __init__(self, data_dir: str):
        self.data_dir = data_dir

    def _path(self, user_id: str) -> str:
        # Percent-encoding keeps distinct user ids in distinct files
        return os.path.join(self.data_dir, f"{quote(user_id, safe='')}.json")

    def _read(self, user_id: str) -> Dict[str, Any]:
        path = self._path(user_id)
        if not os.path.exists(path):
            return {}
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StorageError(f"Corrupt data file {path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Corrupt data file {path}: expected an object")
        return data

    def get(self, user_id: str, key: str) -> Optional[Any]:
        return self._read(user_id).get(key)

    def set(self, user_id: str, key: str, value: Any) -> None:
        data = self._read(user_id)
        data[key] = value

        path = self._path(user_id)
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            fd, tmp = tempfile.mkstemp(prefix=".tmp_", dir=self.data_dir)
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e

        try:
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
                os.replace(tmp, path)
            except BaseException:
                if os.path.exists(tmp):
                    os.remove(tmp)
                raise
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e


def get_store(user_id: str) -> DataStore:
    """Pick the storage backend for a user.

    The local user and deployments without Supabase credentials use local
    JSON files; everyone else goes to Supabase.
    """
    from fitstreak.config import get_settings

    settings = get_settings()
    use_local = (
        settings.storage_backend == "local"
        or user_id == settings.local_user_id
        or not settings.supabase_configured
    )
    if use_local:
        if settings.storage_backend == "supabase":
            logger.warning("Supabase is not configured, using local storage for %s", user_id)
        return LocalJSONStore(settings.data_dir)

    from fitstreak.db.supabase import SupabaseStore

    return SupabaseStore()
