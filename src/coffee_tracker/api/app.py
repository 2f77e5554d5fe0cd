"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Request, status
from fastapi.responses import JSONResponse

from coffee_tracker.api.admin import router as admin_router
from coffee_tracker.api.entries import router as entries_router
from coffee_tracker.api.models import PasscodeCheck
from coffee_tracker.api.serializers import (
    serialize_catalog,
    serialize_month,
    serialize_today,
    serialize_week,
)
from coffee_tracker.app_logging import configure_logging
from coffee_tracker.containers import AppContainer
from coffee_tracker.domain.errors import (
    EntryNotFoundError,
    InvalidPasscodeError,
    StoreUnavailableError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.container.passcode_service.ensure_default()
        except StoreUnavailableError:
            logger.exception("Failed to initialize default passcode")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(entries_router)
    app.include_router(admin_router)

    @app.exception_handler(StoreUnavailableError)
    async def store_unavailable(
        request: Request, exc: StoreUnavailableError
    ) -> JSONResponse:
        logger.error(
            "Store unavailable during %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Store unavailable"},
        )

    @app.exception_handler(EntryNotFoundError)
    async def entry_not_found(
        request: Request, exc: EntryNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(InvalidPasscodeError)
    async def invalid_passcode(
        request: Request, exc: InvalidPasscodeError
    ) -> JSONResponse:
        logger.info("Rejected passcode for %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": "Invalid passcode"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/catalog")
    async def catalog(request: Request) -> dict[str, object]:
        """Return valid labels and the caffeine table."""
        state_container: AppContainer = request.app.state.container
        return serialize_catalog(state_container.estimation_service.get_catalog())

    @app.get("/catalog/estimate")
    async def estimate(
        request: Request,
        coffee_type: str = Query(alias="type"),
        size: str = Query(),
    ) -> dict[str, int]:
        """Return the caffeine estimate for a type and size."""
        state_container: AppContainer = request.app.state.container
        return {
            "caffeine": state_container.estimation_service.estimate(coffee_type, size)
        }

    @app.get("/stats/today")
    async def stats_today(request: Request) -> dict[str, object]:
        """Return today's totals."""
        state_container: AppContainer = request.app.state.container
        return serialize_today(state_container.stats_service.get_today())

    @app.get("/stats/week")
    async def stats_week(
        request: Request, offset: int = Query(default=0, le=0)
    ) -> dict[str, object]:
        """Return the current or a past week."""
        state_container: AppContainer = request.app.state.container
        return serialize_week(state_container.stats_service.get_week(offset))

    @app.get("/stats/month")
    async def stats_month(
        request: Request, offset: int = Query(default=0, le=0)
    ) -> dict[str, object]:
        """Return the current or a past month."""
        state_container: AppContainer = request.app.state.container
        return serialize_month(state_container.stats_service.get_month(offset))

    @app.post("/passcode/verify")
    async def verify_passcode(
        payload: PasscodeCheck, request: Request
    ) -> dict[str, bool]:
        """Check a passcode without side effects."""
        state_container: AppContainer = request.app.state.container
        return {"valid": state_container.passcode_service.check(payload.passcode)}

    return app
