"""Passcode dependency for write and admin routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Header, Request

if TYPE_CHECKING:
    from coffee_tracker.containers import AppContainer


async def require_passcode(
    request: Request, x_passcode: str | None = Header(default=None)
) -> None:
    """Ensure requests carry the current shared passcode."""
    container: AppContainer = request.app.state.container
    container.passcode_service.require(x_passcode)
