"""Services for logging produce items."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from rainbow_tracker.domain.catalog import RainbowBand
from rainbow_tracker.domain.items import LoggedItem
from rainbow_tracker.services.catalog import CatalogService

CUSTOM_COLOR_NAME = "Custom"


class ItemColorRequiredError(ValueError):
    """Raised when an unknown food is logged without color fields."""

    def __init__(self, name: str) -> None:
        super().__init__(
            "Color is required for items not in the fruit and veg catalog."
        )
        self.name = name


class ItemRepository(Protocol):
    """Persistence interface for logged items."""

    def list_items(self, user_id: UUID) -> list[LoggedItem]:
        """Return all items for a user."""

    def create_item(  # noqa: PLR0913
        self,
        user_id: UUID,
        name: str,
        color_name: str,
        color_hex: str,
        rainbow_band: RainbowBand,
        created_at: int,
    ) -> LoggedItem:
        """Create an item and return it."""


@dataclass
class ItemService:
    """Application service for a user's logged items."""

    repository: ItemRepository
    catalog_service: CatalogService

    def list_items(self, user_id: UUID) -> list[LoggedItem]:
        """Return a user's items, most recent first."""
        items = self.repository.list_items(user_id)
        return sorted(items, key=lambda item: item.created_at, reverse=True)

    def log_item(
        self,
        user_id: UUID,
        name: str,
        color_name: str | None = None,
        color_hex: str | None = None,
        rainbow_band: RainbowBand | None = None,
    ) -> LoggedItem:
        """Log an item, taking color fields from the catalog when it matches."""
        match = self.catalog_service.find_by_name(name)
        if match:
            color_name = match.color_name
            color_hex = match.color_hex
            rainbow_band = match.rainbow_band
        elif not color_hex or not rainbow_band:
            raise ItemColorRequiredError(name)

        return self.repository.create_item(
            user_id=user_id,
            name=name,
            color_name=color_name or CUSTOM_COLOR_NAME,
            color_hex=color_hex,
            rainbow_band=rainbow_band,
            created_at=int(datetime.now(tz=UTC).timestamp() * 1000),
        )
