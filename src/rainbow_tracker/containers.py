"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from rainbow_tracker.adapters.supabase_catalog_repository import (
    SupabaseCatalogRepository,
)
from rainbow_tracker.adapters.supabase_item_repository import SupabaseItemRepository
from rainbow_tracker.config import Settings
from rainbow_tracker.services.catalog import CatalogService
from rainbow_tracker.services.insights import InsightsService
from rainbow_tracker.services.items import ItemService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    item_service: ItemService
    insights_service: InsightsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    catalog_repository = SupabaseCatalogRepository(
        supabase_client, table=resolved_settings.catalog_table
    )
    item_repository = SupabaseItemRepository(
        supabase_client, table=resolved_settings.items_table
    )
    catalog_service = CatalogService(catalog_repository)
    item_service = ItemService(
        repository=item_repository,
        catalog_service=catalog_service,
    )
    insights_service = InsightsService(
        item_service=item_service,
        catalog_service=catalog_service,
    )
    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        item_service=item_service,
        insights_service=insights_service,
    )
