"""Admin API endpoints gated by the shared passcode."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, status

from coffee_tracker.api.models import PasscodeUpdate  # noqa: TC001
from coffee_tracker.api.security import require_passcode
from coffee_tracker.domain.errors import PasscodeChangeError

if TYPE_CHECKING:
    from coffee_tracker.containers import AppContainer

router = APIRouter(
    prefix="/admin", tags=["admin"], dependencies=[Depends(require_passcode)]
)


@router.get("/health")
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.put("/passcode")
async def change_passcode(payload: PasscodeUpdate, request: Request) -> dict[str, str]:
    """Replace the shared passcode."""
    container: AppContainer = request.app.state.container
    try:
        container.passcode_service.change(
            payload.new_passcode, payload.confirm_passcode
        )
    except PasscodeChangeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return {"status": "ok"}


@router.post("/catalog/refresh")
async def refresh_catalog(request: Request) -> dict[str, str]:
    """Reload the coffee catalog from its source."""
    container: AppContainer = request.app.state.container
    catalog = container.estimation_service.refresh()
    return {"status": "ok", "source": catalog.source}
