"""Default produce catalog used to seed the catalog store."""

import re
from dataclasses import dataclass

from rainbow_tracker.data.nutrition import get_produce_meta
from rainbow_tracker.domain.catalog import (
    CatalogEntry,
    ProduceType,
    RainbowBand,
    normalize_name,
)


@dataclass(frozen=True)
class ProduceSeed:
    """Minimal description of a catalog food before enrichment."""

    name: str
    color_name: str
    color_hex: str
    rainbow_band: RainbowBand
    type: ProduceType


DEFAULT_PRODUCE_CATALOG: list[ProduceSeed] = [
    ProduceSeed("Apple", "Apple Red", "#C62828", "red", "fruit"),
    ProduceSeed("Bell pepper (red)", "Pepper Red", "#D84315", "red", "vegetable"),
    ProduceSeed("Cherry", "Cherry Red", "#B71C1C", "red", "fruit"),
    ProduceSeed("Grape (red)", "Grape Red", "#8E2430", "red", "fruit"),
    ProduceSeed("Radish", "Radish Pink", "#D81B60", "red", "vegetable"),
    ProduceSeed("Raspberry", "Raspberry Red", "#C2185B", "red", "fruit"),
    ProduceSeed("Strawberry", "Strawberry Red", "#E53935", "red", "fruit"),
    ProduceSeed("Tomato", "Tomato Red", "#D32F2F", "red", "fruit"),
    ProduceSeed("Watermelon", "Watermelon Red", "#EF5350", "red", "fruit"),
    ProduceSeed("Apricot", "Apricot Orange", "#FFB74D", "orange", "fruit"),
    ProduceSeed(
        "Butternut squash", "Squash Orange", "#F4A300", "orange", "vegetable"
    ),
    ProduceSeed("Carrot", "Carrot Orange", "#F57C00", "orange", "vegetable"),
    ProduceSeed("Mango", "Mango Orange", "#FFA000", "orange", "fruit"),
    ProduceSeed("Orange", "Orange", "#FB8C00", "orange", "fruit"),
    ProduceSeed("Pumpkin", "Pumpkin Orange", "#EF6C00", "orange", "vegetable"),
    ProduceSeed("Sweet potato", "Sweet Potato Orange", "#E65100", "orange", "vegetable"),
    ProduceSeed("Banana", "Banana Yellow", "#FFE135", "yellow", "fruit"),
    ProduceSeed(
        "Bell pepper (yellow)", "Pepper Yellow", "#FBC02D", "yellow", "vegetable"
    ),
    ProduceSeed("Lemon", "Lemon Yellow", "#F5E04B", "yellow", "fruit"),
    ProduceSeed("Pineapple", "Pineapple Yellow", "#FDD835", "yellow", "fruit"),
    ProduceSeed("Sweetcorn", "Sweetcorn Yellow", "#F9D71C", "yellow", "vegetable"),
    ProduceSeed("Avocado", "Avocado Green", "#568203", "green", "fruit"),
    ProduceSeed(
        "Bell pepper (green)", "Pepper Green", "#558B2F", "green", "vegetable"
    ),
    ProduceSeed("Broccoli", "Broccoli Green", "#388E3C", "green", "vegetable"),
    ProduceSeed("Courgette", "Courgette Green", "#4C8B43", "green", "vegetable"),
    ProduceSeed("Cucumber", "Cucumber Green", "#43A047", "green", "vegetable"),
    ProduceSeed("Grape (green)", "Grape Green", "#9CCC65", "green", "fruit"),
    ProduceSeed("Kale", "Kale Green", "#1B5E20", "green", "vegetable"),
    ProduceSeed("Kiwi", "Kiwi Green", "#8BC34A", "green", "fruit"),
    ProduceSeed("Peas", "Pea Green", "#66BB6A", "green", "vegetable"),
    ProduceSeed("Rocket", "Rocket Green", "#4CAF50", "green", "vegetable"),
    ProduceSeed("Spinach", "Spinach Green", "#2E7D32", "green", "vegetable"),
    ProduceSeed("Bilberry", "Bilberry Blue", "#2C3E91", "blue", "fruit"),
    ProduceSeed("Blueberry", "Blueberry Blue", "#3B4CCA", "blue", "fruit"),
    ProduceSeed("Blackberry", "Blackberry Indigo", "#2E1A47", "indigo", "fruit"),
    ProduceSeed("Blackcurrant", "Blackcurrant Indigo", "#2A1B3D", "indigo", "fruit"),
    ProduceSeed("Damson", "Damson Indigo", "#3E2F5B", "indigo", "fruit"),
    ProduceSeed("Aubergine", "Aubergine Purple", "#5D3A6E", "violet", "vegetable"),
    ProduceSeed("Beetroot", "Beetroot Purple", "#6A1B4D", "violet", "vegetable"),
    ProduceSeed("Fig", "Fig Purple", "#5E3A5A", "violet", "fruit"),
    ProduceSeed("Onion (red)", "Red Onion Purple", "#8E4585", "violet", "vegetable"),
    ProduceSeed("Plum", "Plum Purple", "#6D2E5B", "violet", "fruit"),
    ProduceSeed("Red cabbage", "Cabbage Purple", "#7B1FA2", "violet", "vegetable"),
]


def catalog_id_for(name: str) -> str:
    """Return the slug used as a catalog entry id."""
    return re.sub(r"[^a-z0-9]+", "-", normalize_name(name)).strip("-")


def build_catalog_entry(seed: ProduceSeed) -> CatalogEntry:
    """Enrich a seed with UK naming, aliases and nutrition metadata."""
    meta = get_produce_meta(seed.name, seed.rainbow_band)
    uk_name = meta.uk_name or seed.name
    normalized_name = normalize_name(seed.name)
    aliases: list[str] = []
    for alias in [*meta.aliases, uk_name]:
        key = normalize_name(alias)
        if key and key != normalized_name and key not in aliases:
            aliases.append(key)
    nutrition = meta.nutrition
    return CatalogEntry(
        id=catalog_id_for(seed.name),
        name=seed.name,
        normalized_name=normalized_name,
        uk_name=uk_name,
        normalized_aliases=aliases,
        color_name=seed.color_name,
        color_hex=seed.color_hex,
        rainbow_band=seed.rainbow_band,
        type=seed.type,
        nutrients=list(nutrition.nutrients) if nutrition else [],
        plain_benefit=nutrition.plain_benefit if nutrition else "",
        science_note=nutrition.science_note if nutrition else "",
    )


def default_catalog_entries() -> list[CatalogEntry]:
    """Return the enriched default catalog."""
    return [build_catalog_entry(seed) for seed in DEFAULT_PRODUCE_CATALOG]
