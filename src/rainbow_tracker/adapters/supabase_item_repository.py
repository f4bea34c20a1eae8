"""Supabase repository for logged produce items."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from rainbow_tracker.adapters.legacy_colors import is_legacy_row, translate_legacy_color
from rainbow_tracker.domain.catalog import RainbowBand
from rainbow_tracker.domain.items import LoggedItem
from rainbow_tracker.services.items import ItemRepository


@dataclass
class SupabaseItemRepository(ItemRepository):
    """Supabase implementation for item persistence."""

    client: Client
    table: str = "items"

    def list_items(self, user_id: UUID) -> list[LoggedItem]:
        """Return all items logged by a user."""
        response = (
            self.client.table(self.table)
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def create_item(  # noqa: PLR0913
        self,
        user_id: UUID,
        name: str,
        color_name: str,
        color_hex: str,
        rainbow_band: RainbowBand,
        created_at: int,
    ) -> LoggedItem:
        """Insert an item row and return it."""
        response = (
            self.client.table(self.table)
            .insert(
                {
                    "user_id": str(user_id),
                    "name": name,
                    "color_name": color_name,
                    "color_hex": color_hex,
                    "rainbow_band": rainbow_band,
                    "created_at": created_at,
                    "updated_at": created_at,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create item in Supabase")
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> LoggedItem:
    created_at = int(row.get("created_at") or 0)
    if is_legacy_row(row):
        legacy_color = row.get("color")
        color_name = str(legacy_color or "Unknown")
        color_hex, rainbow_band = translate_legacy_color(
            legacy_color if isinstance(legacy_color, str) else None
        )
    else:
        color_name = str(row.get("color_name") or "")
        color_hex = str(row["color_hex"])
        rainbow_band = row["rainbow_band"]
    return LoggedItem(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        color_name=color_name,
        color_hex=color_hex,
        rainbow_band=rainbow_band,
        user_id=UUID(str(row["user_id"])),
        created_at=created_at,
        updated_at=int(row.get("updated_at") or created_at),
    )
