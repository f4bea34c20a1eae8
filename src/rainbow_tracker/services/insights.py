"""Rainbow diversity insights computed from logged items."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from rainbow_tracker.domain.catalog import (
    RAINBOW_ORDER,
    CatalogEntry,
    RainbowBand,
    normalize_name,
)
from rainbow_tracker.domain.insights import (
    ColorCoverage,
    Dominance,
    FruitVegBalance,
    InsightAdvice,
    InsightsResult,
    InsightSuggestion,
    InsightTotals,
    SuggestedFood,
)
from rainbow_tracker.domain.items import LoggedItem
from rainbow_tracker.services.catalog import CatalogService
from rainbow_tracker.services.items import ItemService

DEFAULT_WINDOW_DAYS = 30
DAY_MS = 24 * 60 * 60 * 1000
DOMINANCE_THRESHOLD = 0.6
DIVERSITY_TARGET = 5
MAX_MISSING_BAND_SUGGESTIONS = 2
MAX_SUGGESTIONS = 4
MAX_ADVICE = 5
DISCLAIMER = "Nutrition guidance is general information and not medical advice."


def build_insights(
    items: Iterable[LoggedItem],
    catalog: list[CatalogEntry],
    now: int | None = None,
    window_days: int | None = None,
) -> InsightsResult:
    """Build rainbow insights for items logged within the trailing window.

    ``now`` is epoch milliseconds and defaults to the current time.
    """
    resolved_now = now if now is not None else _now_ms()
    resolved_window = window_days if window_days is not None else DEFAULT_WINDOW_DAYS
    window_items = filter_window(items, resolved_now, resolved_window)
    lookup = build_catalog_lookup(catalog)

    counts_by_band = count_bands(window_items)
    missing_bands = [band for band in RAINBOW_ORDER if counts_by_band[band] == 0]
    color_diversity = len({item.color_hex.lower() for item in window_items})
    balance = classify_balance(window_items, lookup)

    suggestions = build_suggestions(
        catalog=catalog,
        window_days=resolved_window,
        counts_by_band=counts_by_band,
        missing_bands=missing_bands,
        dominant=balance.dominant,
        color_diversity=color_diversity,
    )

    return InsightsResult(
        window_days=resolved_window,
        generated_at=resolved_now,
        disclaimer=DISCLAIMER,
        totals=InsightTotals(
            items_in_window=len(window_items),
            color_diversity=color_diversity,
        ),
        color_coverage=ColorCoverage(
            counts_by_band=counts_by_band,
            missing_bands=missing_bands,
        ),
        fruit_veg_balance=balance,
        suggestions=suggestions,
        item_advice=compile_advice(window_items, lookup),
    )


def build_catalog_lookup(catalog: Iterable[CatalogEntry]) -> dict[str, CatalogEntry]:
    """Index catalog entries by normalized name and every normalized alias."""
    lookup: dict[str, CatalogEntry] = {}
    for entry in catalog:
        lookup[entry.normalized_name] = entry
        for alias in entry.normalized_aliases:
            lookup[alias] = entry
    return lookup


def filter_window(
    items: Iterable[LoggedItem], now: int, window_days: int
) -> list[LoggedItem]:
    """Return items created at or after the window cutoff."""
    cutoff = now - window_days * DAY_MS
    return [item for item in items if item.created_at >= cutoff]


def count_bands(items: Iterable[LoggedItem]) -> dict[RainbowBand, int]:
    """Count items per rainbow band, zero-filled for every band."""
    counts: dict[RainbowBand, int] = dict.fromkeys(RAINBOW_ORDER, 0)
    for item in items:
        counts[item.rainbow_band] += 1
    return counts


def classify_balance(
    items: Iterable[LoggedItem], lookup: dict[str, CatalogEntry]
) -> FruitVegBalance:
    """Count matched fruit and vegetables and decide which one dominates."""
    fruit_count = 0
    vegetable_count = 0
    for item in items:
        matched = lookup.get(normalize_name(item.name))
        if matched is None:
            continue
        if matched.type == "fruit":
            fruit_count += 1
        elif matched.type == "vegetable":
            vegetable_count += 1

    return FruitVegBalance(
        fruit_count=fruit_count,
        vegetable_count=vegetable_count,
        dominant=_dominance(fruit_count, vegetable_count),
    )


def build_suggestions(  # noqa: PLR0913
    *,
    catalog: list[CatalogEntry],
    window_days: int,
    counts_by_band: dict[RainbowBand, int],
    missing_bands: list[RainbowBand],
    dominant: Dominance,
    color_diversity: int,
) -> list[InsightSuggestion]:
    """Return ranked suggestions: missing bands, then balance, then variety."""
    suggestions: list[InsightSuggestion] = []

    for band in missing_bands[:MAX_MISSING_BAND_SUGGESTIONS]:
        band_foods = [entry for entry in catalog if entry.rainbow_band == band]
        suggestions.append(
            InsightSuggestion(
                kind="missing_band",
                title=f"Add more {band} foods",
                reason=(
                    f"Your last {window_days} days are missing {band} "
                    "in your rainbow coverage."
                ),
                foods=_pick_foods(band_foods, 3),
            )
        )

    if dominant == "fruit":
        vegetables = [entry for entry in catalog if entry.type == "vegetable"]
        suggestions.append(
            InsightSuggestion(
                kind="balance",
                title="Increase vegetables for better balance",
                reason=(
                    f"Most logged items are fruit in your {window_days}-day window. "
                    "More vegetables improves nutrient spread."
                ),
                foods=_pick_foods(vegetables, 3),
            )
        )
    elif dominant == "vegetable":
        fruits = [entry for entry in catalog if entry.type == "fruit"]
        suggestions.append(
            InsightSuggestion(
                kind="balance",
                title="Add fruit to rebalance your week",
                reason=(
                    f"Most logged items are vegetables in your {window_days}-day "
                    "window. Add fruit for a broader profile."
                ),
                foods=_pick_foods(fruits, 3),
            )
        )

    if color_diversity < DIVERSITY_TARGET:
        sparse_bands = {band for band in RAINBOW_ORDER if counts_by_band[band] <= 1}
        variety_foods = [entry for entry in catalog if entry.rainbow_band in sparse_bands]
        suggestions.append(
            InsightSuggestion(
                kind="variety",
                title="Boost your color diversity",
                reason=(
                    "Try different shades to increase your distinct-color "
                    "variety score."
                ),
                foods=_pick_foods(variety_foods, 4),
            )
        )

    return suggestions[:MAX_SUGGESTIONS]


def compile_advice(
    items: Iterable[LoggedItem], lookup: dict[str, CatalogEntry]
) -> list[InsightAdvice]:
    """Return advice for distinct matched foods, most recently logged first."""
    seen: set[str] = set()
    advice: list[InsightAdvice] = []
    for item in sorted(items, key=lambda entry: entry.created_at, reverse=True):
        key = normalize_name(item.name)
        if key in seen:
            continue
        seen.add(key)
        matched = lookup.get(key)
        if matched is None:
            continue
        advice.append(
            InsightAdvice(
                food_name=matched.uk_name or matched.name,
                nutrient_focus=list(matched.nutrients[:3]),
                plain_benefit=matched.plain_benefit,
                science_note=matched.science_note,
            )
        )
        if len(advice) >= MAX_ADVICE:
            break
    return advice


def _dominance(fruit_count: int, vegetable_count: int) -> Dominance:
    total = fruit_count + vegetable_count
    if total == 0:
        return "unknown"
    if fruit_count / total > DOMINANCE_THRESHOLD:
        return "fruit"
    if vegetable_count / total > DOMINANCE_THRESHOLD:
        return "vegetable"
    return "balanced"


def _pick_foods(entries: list[CatalogEntry], limit: int) -> list[SuggestedFood]:
    return [
        SuggestedFood(
            name=entry.name,
            uk_name=entry.uk_name,
            type=entry.type,
            rainbow_band=entry.rainbow_band,
            color_hex=entry.color_hex,
            plain_benefit=entry.plain_benefit,
        )
        for entry in entries[:limit]
    ]


def _now_ms() -> int:
    return int(datetime.now(tz=UTC).timestamp() * 1000)


@dataclass
class InsightsService:
    """Builds insights from a user's stored items and the catalog."""

    item_service: ItemService
    catalog_service: CatalogService

    def get_insights(
        self, user_id: UUID, window_days: int, now: int | None = None
    ) -> InsightsResult:
        """Return insights for the user's trailing window."""
        items = self.item_service.list_items(user_id)
        catalog = self.catalog_service.list_entries()
        return build_insights(items, catalog, now=now, window_days=window_days)
