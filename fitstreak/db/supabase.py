"""Supabase client and the user_data key-value table."""

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Optional

from postgrest.exceptions import APIError
from supabase import Client, create_client

from fitstreak.config import get_settings
from fitstreak.db.store import DataStore, StorageError

logger = logging.getLogger(__name__)

TABLE = "user_data"

# Relation does not exist (schema not applied yet)
MISSING_TABLE_CODE = "42P01"


@lru_cache()
def get_supabase_client() -> Client:
    """Get cached Supabase client."""
    settings = get_settings()
    return create_client(settings.supabase_url, settings.supabase_key)


def _is_missing_table(error: APIError) -> bool:
    return error.code == MISSING_TABLE_CODE or "Could not find the table" in (error.message or "")


class SupabaseStore(DataStore):
    """Data documents stored in the `user_data` table, one row per (user_id, data_key)."""

    def __init__(self, client: Optional[Client] = None):
        self.client = client or get_supabase_client()

    def get(self, user_id: str, key: str) -> Optional[Any]:
        try:
            result = (
                self.client.table(TABLE)
                .select("data_value")
                .eq("user_id", user_id)
                .eq("data_key", key)
                .limit(1)
                .execute()
            )
        except APIError as e:
            if _is_missing_table(e):
                logger.warning("Table '%s' missing or not accessible, no data for %s", TABLE, key)
                return None
            raise StorageError(f"Error fetching {key}: {e.message}") from e

        if result.data:
            return result.data[0]["data_value"]
        return None

    def set(self, user_id: str, key: str, value: Any) -> None:
        try:
            (
                self.client.table(TABLE)
                .upsert(
                    {
                        "user_id": user_id,
                        "data_key": key,
                        "data_value": value,
                        "updated_at": datetime.now(timezone.utc).isoformat(),
                    },
                    on_conflict="user_id,data_key",
                )
                .execute()
            )
        except APIError as e:
            if _is_missing_table(e):
                logger.warning("Table '%s' missing or not accessible, %s not saved", TABLE, key)
                return
            raise StorageError(f"Error saving {key}: {e.message}") from e
