"""Domain models for the produce catalog."""

from dataclasses import dataclass, field
from typing import Literal

RainbowBand = Literal["red", "orange", "yellow", "green", "blue", "indigo", "violet"]
ProduceType = Literal["fruit", "vegetable"]

RAINBOW_ORDER: tuple[RainbowBand, ...] = (
    "red",
    "orange",
    "yellow",
    "green",
    "blue",
    "indigo",
    "violet",
)


@dataclass(frozen=True)
class CatalogEntry:
    """Reference produce entry with color and nutrition metadata."""

    id: str
    name: str
    normalized_name: str
    uk_name: str
    color_name: str
    color_hex: str
    rainbow_band: RainbowBand
    type: ProduceType
    normalized_aliases: list[str] = field(default_factory=list)
    nutrients: list[str] = field(default_factory=list)
    plain_benefit: str = ""
    science_note: str = ""


def normalize_name(value: str) -> str:
    """Return the lookup key for a food name."""
    return value.strip().lower()
