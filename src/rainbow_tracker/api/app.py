"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from uuid import UUID

from fastapi import Depends, FastAPI, Header, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rainbow_tracker.api.admin import router as admin_router
from rainbow_tracker.api.models import CreateItemRequest
from rainbow_tracker.app_logging import configure_logging
from rainbow_tracker.containers import AppContainer
from rainbow_tracker.domain.catalog import CatalogEntry
from rainbow_tracker.domain.insights import InsightsResult
from rainbow_tracker.domain.items import LoggedItem
from rainbow_tracker.services.items import ItemColorRequiredError

SHORT_WINDOW_DAYS = 7
LONG_WINDOW_DAYS = 30


async def require_user(x_user_id: str | None = Header(default=None)) -> UUID:
    """Return the caller's user id forwarded by the auth proxy."""
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated."
        )
    try:
        return UUID(x_user_id)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated."
        ) from exc


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.container.catalog_service.ensure_seeded()
        except Exception:
            logger.exception("Failed to seed produce catalog")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Invalid payload."},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/catalog")
    async def list_catalog(request: Request) -> JSONResponse:
        """Return the produce catalog."""
        state_container: AppContainer = request.app.state.container
        try:
            entries = state_container.catalog_service.list_entries()
        except Exception:
            logger.exception("Catalog route failed")
            return _failure("Failed to load catalog.")
        return JSONResponse(
            {"success": True, "entries": [_serialize_entry(e) for e in entries]}
        )

    @app.get("/items")
    async def list_items(
        request: Request, user_id: UUID = Depends(require_user)
    ) -> dict[str, object]:
        """Return the caller's logged items, most recent first."""
        state_container: AppContainer = request.app.state.container
        items = state_container.item_service.list_items(user_id)
        return {"success": True, "items": [_serialize_item(item) for item in items]}

    @app.post("/items", status_code=status.HTTP_201_CREATED)
    async def create_item(
        payload: CreateItemRequest,
        request: Request,
        user_id: UUID = Depends(require_user),
    ) -> dict[str, object]:
        """Log a produce item for the caller."""
        state_container: AppContainer = request.app.state.container
        try:
            item = state_container.item_service.log_item(
                user_id,
                name=payload.name,
                color_name=payload.color_name,
                color_hex=payload.color_hex,
                rainbow_band=payload.rainbow_band,
            )
        except ItemColorRequiredError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        logger.info("Logged item", extra={"user_id": str(user_id)})
        return {"success": True, "item": _serialize_item(item)}

    @app.get("/insights")
    async def insights(
        request: Request,
        window: str | None = None,
        user_id: UUID = Depends(require_user),
    ) -> JSONResponse:
        """Return rainbow insights for the caller's 7 or 30 day window."""
        state_container: AppContainer = request.app.state.container
        try:
            result = state_container.insights_service.get_insights(
                user_id, window_days=_parse_window_days(window)
            )
        except Exception:
            logger.exception("Insights route failed", extra={"user_id": str(user_id)})
            return _failure("Failed to build insights.")
        return JSONResponse({"success": True, "insights": serialize_insights(result)})

    return app


def _parse_window_days(value: str | None) -> int:
    if value == "7d":
        return SHORT_WINDOW_DAYS
    return LONG_WINDOW_DAYS


def _failure(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": message},
    )


def _serialize_entry(entry: CatalogEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "name": entry.name,
        "ukName": entry.uk_name,
        "colorName": entry.color_name,
        "colorHex": entry.color_hex,
        "rainbowBand": entry.rainbow_band,
        "type": entry.type,
    }


def _serialize_item(item: LoggedItem) -> dict[str, object]:
    return {
        "id": str(item.id),
        "name": item.name,
        "colorName": item.color_name,
        "colorHex": item.color_hex,
        "rainbowBand": item.rainbow_band,
        "createdAt": item.created_at,
    }


def serialize_insights(result: InsightsResult) -> dict[str, object]:
    """Convert insights into the camelCase JSON shape used by the dashboard."""
    return _camelize(asdict(result))


def _camelize(value: object) -> object:
    if isinstance(value, dict):
        return {_camel_key(str(key)): _camelize(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_camelize(item) for item in value]
    return value


def _camel_key(key: str) -> str:
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)
