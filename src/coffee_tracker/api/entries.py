"""Entry logging endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, Response, status

from coffee_tracker.api.models import EntryCreate, EntryPatch  # noqa: TC001
from coffee_tracker.api.security import require_passcode
from coffee_tracker.api.serializers import serialize_entry
from coffee_tracker.domain.entries import NewCoffeeEntry

if TYPE_CHECKING:
    from coffee_tracker.containers import AppContainer

router = APIRouter(prefix="/entries", tags=["entries"])


@router.get("")
async def list_entries(request: Request) -> dict[str, object]:
    """Return all entries, newest first."""
    container: AppContainer = request.app.state.container
    entries = container.entry_service.list_entries()
    return {"entries": [serialize_entry(entry) for entry in entries]}


@router.get("/dates")
async def list_dates(request: Request) -> dict[str, object]:
    """Return dates with entries, most recent first."""
    container: AppContainer = request.app.state.container
    dates = container.entry_service.list_dates()
    return {"dates": [day.isoformat() for day in dates]}


@router.get("/by-date/{day}")
async def entries_on(day: date, request: Request) -> dict[str, object]:
    """Return entries logged on one date."""
    container: AppContainer = request.app.state.container
    entries = container.entry_service.entries_on(day)
    return {
        "date": day.isoformat(),
        "entries": [serialize_entry(entry) for entry in entries],
    }


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_passcode)],
)
async def create_entry(payload: EntryCreate, request: Request) -> dict[str, object]:
    """Log a drink; caffeine is estimated from type and size."""
    container: AppContainer = request.app.state.container
    entry = container.entry_service.add_entry(
        NewCoffeeEntry(
            date=payload.date,
            time=payload.time,
            type=payload.type,
            size=payload.size,
            brewing_method=payload.brewing_method,
            notes=payload.notes,
        )
    )
    return serialize_entry(entry)


@router.patch("/{entry_id}", dependencies=[Depends(require_passcode)])
async def update_entry(
    entry_id: UUID, payload: EntryPatch, request: Request
) -> dict[str, str]:
    """Apply a partial update to an entry."""
    container: AppContainer = request.app.state.container
    container.entry_service.update_entry(entry_id, payload.changes())
    return {"status": "ok"}


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_passcode)],
)
async def delete_entry(entry_id: UUID, request: Request) -> Response:
    """Delete an entry; unknown ids are not an error."""
    container: AppContainer = request.app.state.container
    container.entry_service.delete_entry(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
