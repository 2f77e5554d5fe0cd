"""Error translation for Supabase queries."""

from typing import Protocol

import httpx
from supabase import PostgrestAPIError

from coffee_tracker.domain.errors import StoreUnavailableError


class QueryResponse(Protocol):
    """Response shape returned by executed Supabase queries."""

    data: list[dict[str, object]] | None


class Query(Protocol):
    """A Supabase query builder ready to execute."""

    def execute(self) -> QueryResponse:
        """Run the query."""


def execute_query(query: Query, action: str) -> QueryResponse:
    """Execute a query, raising StoreUnavailableError on API or HTTP failure."""
    try:
        return query.execute()
    except (PostgrestAPIError, httpx.HTTPError) as exc:
        raise StoreUnavailableError(f"Supabase {action} failed: {exc}") from exc
