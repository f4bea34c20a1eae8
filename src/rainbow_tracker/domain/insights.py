"""Domain models for rainbow insights."""

from dataclasses import dataclass
from typing import Literal

from rainbow_tracker.domain.catalog import ProduceType, RainbowBand

SuggestionKind = Literal["missing_band", "balance", "variety"]
Dominance = Literal["fruit", "vegetable", "balanced", "unknown"]


@dataclass(frozen=True)
class SuggestedFood:
    """Catalog food recommended by a suggestion."""

    name: str
    uk_name: str
    type: ProduceType
    rainbow_band: RainbowBand
    color_hex: str
    plain_benefit: str


@dataclass(frozen=True)
class InsightSuggestion:
    """Ranked recommendation for the dashboard."""

    kind: SuggestionKind
    title: str
    reason: str
    foods: list[SuggestedFood]


@dataclass(frozen=True)
class InsightAdvice:
    """Nutrition advice for a food the user logged."""

    food_name: str
    nutrient_focus: list[str]
    plain_benefit: str
    science_note: str


@dataclass(frozen=True)
class InsightTotals:
    """Headline counts for the window."""

    items_in_window: int
    color_diversity: int


@dataclass(frozen=True)
class ColorCoverage:
    """Per-band counts and the bands with no items."""

    counts_by_band: dict[RainbowBand, int]
    missing_bands: list[RainbowBand]


@dataclass(frozen=True)
class FruitVegBalance:
    """Fruit and vegetable counts with a dominance verdict."""

    fruit_count: int
    vegetable_count: int
    dominant: Dominance


@dataclass(frozen=True)
class InsightsResult:
    """Computed insights for a user's logged items."""

    window_days: int
    generated_at: int
    disclaimer: str
    totals: InsightTotals
    color_coverage: ColorCoverage
    fruit_veg_balance: FruitVegBalance
    suggestions: list[InsightSuggestion]
    item_advice: list[InsightAdvice]
