"""Supabase repository for key-value settings."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from coffee_tracker.adapters.supabase_errors import execute_query
from coffee_tracker.services.entries import SettingRepository


@dataclass
class SupabaseSettingRepository(SettingRepository):
    """Supabase implementation for the settings table."""

    client: Client

    def get_setting(self, key: str) -> str | None:
        """Return the stored value for a key."""
        response = execute_query(
            self.client.table("settings").select("value").eq("key", key).limit(1),
            "get setting",
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def set_setting(self, key: str, value: str) -> None:
        """Insert or overwrite a setting."""
        execute_query(
            self.client.table("settings").upsert(
                {
                    "key": key,
                    "value": value,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="key",
            ),
            "set setting",
        )
