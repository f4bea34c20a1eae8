"""Translation of legacy color-name-only rows into hex and rainbow band."""

from rainbow_tracker.domain.catalog import RainbowBand

# Rows written before hex and band fields existed store only a color name.
LEGACY_COLORS: dict[str, tuple[str, RainbowBand]] = {
    "red": ("#c62828", "red"),
    "pink": ("#d81b60", "red"),
    "orange": ("#f57c00", "orange"),
    "yellow": ("#fbc02d", "yellow"),
    "green": ("#2e7d32", "green"),
    "blue": ("#1e88e5", "blue"),
    "indigo": ("#3949ab", "indigo"),
    "purple": ("#8e24aa", "violet"),
    "violet": ("#8e24aa", "violet"),
}
UNKNOWN_LEGACY_COLOR: tuple[str, RainbowBand] = ("#9e9e9e", "green")


def translate_legacy_color(color_name: str | None) -> tuple[str, RainbowBand]:
    """Return the hex and band for a legacy color name."""
    if not color_name:
        return UNKNOWN_LEGACY_COLOR
    return LEGACY_COLORS.get(color_name.strip().lower(), UNKNOWN_LEGACY_COLOR)


def is_legacy_row(row: dict[str, object]) -> bool:
    """Return True when a stored row predates the hex and band schema."""
    return not row.get("color_hex") or not row.get("rainbow_band")
