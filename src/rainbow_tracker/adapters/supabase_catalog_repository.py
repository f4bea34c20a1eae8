"""Supabase repository for the produce catalog."""

from dataclasses import dataclass

from supabase import Client

from rainbow_tracker.adapters.legacy_colors import is_legacy_row, translate_legacy_color
from rainbow_tracker.data.nutrition import get_produce_meta
from rainbow_tracker.data.produce_catalog import catalog_id_for
from rainbow_tracker.domain.catalog import CatalogEntry, normalize_name
from rainbow_tracker.services.catalog import CatalogRepository


@dataclass
class SupabaseCatalogRepository(CatalogRepository):
    """Supabase-backed catalog repository."""

    client: Client
    table: str = "produce_catalog"

    def has_entries(self) -> bool:
        """Return True when the catalog table has any rows."""
        response = self.client.table(self.table).select("id").limit(1).execute()
        return bool(response.data)

    def insert_entries(self, entries: list[CatalogEntry]) -> None:
        """Insert catalog entries in a single request."""
        if not entries:
            return
        self.client.table(self.table).insert(
            [_serialize_entry(entry) for entry in entries]
        ).execute()

    def list_entries(self) -> list[CatalogEntry]:
        """Return every catalog entry."""
        response = self.client.table(self.table).select("*").execute()
        return [_parse_row(row) for row in response.data or []]

    def find_by_normalized_name(self, normalized_name: str) -> CatalogEntry | None:
        """Return the entry with a matching normalized name."""
        response = (
            self.client.table(self.table)
            .select("*")
            .eq("normalized_name", normalized_name)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def find_by_alias(self, normalized_alias: str) -> CatalogEntry | None:
        """Return the entry whose aliases include the given value."""
        response = (
            self.client.table(self.table)
            .select("*")
            .contains("normalized_aliases", [normalized_alias])
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])


def _serialize_entry(entry: CatalogEntry) -> dict[str, object]:
    return {
        "id": entry.id,
        "name": entry.name,
        "normalized_name": entry.normalized_name,
        "uk_name": entry.uk_name,
        "normalized_aliases": entry.normalized_aliases,
        "color_name": entry.color_name,
        "color_hex": entry.color_hex,
        "rainbow_band": entry.rainbow_band,
        "type": entry.type,
        "nutrients": entry.nutrients,
        "plain_benefit": entry.plain_benefit,
        "science_note": entry.science_note,
    }


def _parse_row(row: dict[str, object]) -> CatalogEntry:
    name = str(row.get("name", ""))
    if is_legacy_row(row):
        return _parse_legacy_row(row, name)
    return CatalogEntry(
        id=str(row.get("id") or catalog_id_for(name)),
        name=name,
        normalized_name=str(row.get("normalized_name") or normalize_name(name)),
        uk_name=str(row.get("uk_name") or ""),
        normalized_aliases=list(row.get("normalized_aliases") or []),
        color_name=str(row.get("color_name") or ""),
        color_hex=str(row["color_hex"]),
        rainbow_band=row["rainbow_band"],
        type=row.get("type", "vegetable"),
        nutrients=list(row.get("nutrients") or []),
        plain_benefit=str(row.get("plain_benefit") or ""),
        science_note=str(row.get("science_note") or ""),
    )


def _parse_legacy_row(row: dict[str, object], name: str) -> CatalogEntry:
    legacy_color = row.get("color")
    color_hex, band = translate_legacy_color(
        legacy_color if isinstance(legacy_color, str) else None
    )
    meta = get_produce_meta(name, band)
    nutrition = meta.nutrition
    return CatalogEntry(
        id=str(row.get("id") or catalog_id_for(name)),
        name=name,
        normalized_name=normalize_name(name),
        uk_name=meta.uk_name or name,
        normalized_aliases=[normalize_name(alias) for alias in meta.aliases],
        color_name=str(legacy_color or ""),
        color_hex=color_hex,
        rainbow_band=band,
        type=row.get("type", "vegetable"),
        nutrients=list(nutrition.nutrients) if nutrition else [],
        plain_benefit=nutrition.plain_benefit if nutrition else "",
        science_note=nutrition.science_note if nutrition else "",
    )
