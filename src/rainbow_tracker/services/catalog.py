"""Services for the reference produce catalog."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from rainbow_tracker.data.produce_catalog import default_catalog_entries
from rainbow_tracker.domain.catalog import CatalogEntry, normalize_name

logger = logging.getLogger(__name__)


class CatalogRepository(Protocol):
    """Persistence interface for catalog entries."""

    def has_entries(self) -> bool:
        """Return True when at least one catalog entry is stored."""

    def insert_entries(self, entries: list[CatalogEntry]) -> None:
        """Store catalog entries."""

    def list_entries(self) -> list[CatalogEntry]:
        """Return all catalog entries."""

    def find_by_normalized_name(self, normalized_name: str) -> CatalogEntry | None:
        """Return the entry with the given normalized name, if present."""

    def find_by_alias(self, normalized_alias: str) -> CatalogEntry | None:
        """Return the entry listing the given normalized alias, if present."""


@dataclass
class CatalogService:
    """Application service for catalog reads and seeding."""

    repository: CatalogRepository
    _seeded: bool = field(default=False, init=False, repr=False)

    def ensure_seeded(self, *, recheck: bool = False) -> int:
        """Seed the default catalog when the store is empty.

        Only the first call checks the store unless ``recheck`` is set.
        Returns the number of entries inserted.
        """
        if self._seeded and not recheck:
            return 0
        inserted = 0
        if not self.repository.has_entries():
            entries = default_catalog_entries()
            self.repository.insert_entries(entries)
            inserted = len(entries)
            logger.info("Seeded produce catalog", extra={"entries": inserted})
        self._seeded = True
        return inserted

    def list_entries(self) -> list[CatalogEntry]:
        """Return all entries sorted by name."""
        self.ensure_seeded()
        entries = self.repository.list_entries()
        return sorted(entries, key=lambda entry: entry.name.lower())

    def find_by_name(self, name: str) -> CatalogEntry | None:
        """Find an entry by canonical name or alias, ignoring case."""
        self.ensure_seeded()
        key = normalize_name(name)
        if not key:
            return None
        return self.repository.find_by_normalized_name(
            key
        ) or self.repository.find_by_alias(key)
