"""Nutrition metadata for rainbow bands and individual produce."""

from dataclasses import dataclass, field

from rainbow_tracker.domain.catalog import RainbowBand, normalize_name


@dataclass(frozen=True)
class NutritionMeta:
    """Nutrients and plain-language notes for a food."""

    nutrients: list[str]
    plain_benefit: str
    science_note: str


@dataclass(frozen=True)
class ProduceMeta:
    """Display name, aliases and nutrition for a produce item."""

    nutrition: NutritionMeta | None = None
    uk_name: str | None = None
    aliases: list[str] = field(default_factory=list)


BAND_NUTRITION: dict[RainbowBand, NutritionMeta] = {
    "red": NutritionMeta(
        nutrients=["lycopene", "vitamin C", "polyphenols"],
        plain_benefit=(
            "Red produce often supports heart health and recovery from daily "
            "oxidative stress."
        ),
        science_note=(
            "Compounds like lycopene and anthocyanin-type pigments are studied "
            "for cardiovascular support."
        ),
    ),
    "orange": NutritionMeta(
        nutrients=["beta-carotene", "vitamin C", "potassium"],
        plain_benefit=(
            "Orange produce is commonly linked to eye health, skin health, and "
            "immune support."
        ),
        science_note=(
            "Beta-carotene is converted into vitamin A, which contributes to "
            "normal vision and immunity."
        ),
    ),
    "yellow": NutritionMeta(
        nutrients=["vitamin C", "folate", "flavonoids"],
        plain_benefit=(
            "Yellow produce can help immune function and healthy energy metabolism."
        ),
        science_note=(
            "Vitamin C and citrus flavonoids are associated with immune and "
            "antioxidant pathways."
        ),
    ),
    "green": NutritionMeta(
        nutrients=["folate", "vitamin K", "lutein", "fiber"],
        plain_benefit=(
            "Green produce supports gut health, bone health, and overall "
            "micronutrient intake."
        ),
        science_note=(
            "Leafy greens provide folate and vitamin K, while fiber supports "
            "digestive regularity."
        ),
    ),
    "blue": NutritionMeta(
        nutrients=["anthocyanins", "vitamin C", "manganese"],
        plain_benefit="Blue foods are linked with healthy aging and immune support.",
        science_note=(
            "Anthocyanins are flavonoid pigments with antioxidant and "
            "anti-inflammatory research interest."
        ),
    ),
    "indigo": NutritionMeta(
        nutrients=["anthocyanins", "polyphenols", "fiber"],
        plain_benefit=(
            "Indigo produce contributes antioxidant compounds and supports "
            "dietary variety."
        ),
        science_note=(
            "Dark blue-indigo pigments are rich in polyphenol families often "
            "studied in immune resilience."
        ),
    ),
    "violet": NutritionMeta(
        nutrients=["anthocyanins", "polyphenols", "fiber"],
        plain_benefit=(
            "Violet produce can support vascular health and a diverse "
            "antioxidant profile."
        ),
        science_note=(
            "Purple pigments often contain anthocyanins, linked in research to "
            "vascular function support."
        ),
    ),
}

# Keyed by normalized canonical name.
PRODUCE_OVERRIDES: dict[str, ProduceMeta] = {
    "aubergine": ProduceMeta(
        aliases=["eggplant"],
        nutrition=NutritionMeta(
            nutrients=["nasunin", "fiber", "manganese"],
            plain_benefit=(
                "Aubergine adds fiber and antioxidant compounds that support gut "
                "and cell health."
            ),
            science_note=(
                "Its purple skin contains nasunin, an anthocyanin researched for "
                "antioxidant activity."
            ),
        ),
    ),
    "beetroot": ProduceMeta(aliases=["beet", "beets"]),
    "bell pepper (green)": ProduceMeta(uk_name="Green pepper"),
    "bell pepper (red)": ProduceMeta(uk_name="Red pepper"),
    "bell pepper (yellow)": ProduceMeta(uk_name="Yellow pepper"),
    "blueberry": ProduceMeta(
        aliases=["blueberries"],
        nutrition=NutritionMeta(
            nutrients=["anthocyanins", "vitamin C", "fiber"],
            plain_benefit=(
                "Blueberries are rich in anthocyanins that can help support "
                "immune function."
            ),
            science_note=(
                "Anthocyanins are flavonoids linked in research to antioxidant "
                "and immune-support pathways."
            ),
        ),
    ),
    "carrot": ProduceMeta(
        aliases=["carrots"],
        nutrition=NutritionMeta(
            nutrients=["beta-carotene", "fiber", "potassium"],
            plain_benefit=(
                "Carrots are high in beta-carotene, which supports normal eye "
                "function."
            ),
            science_note=(
                "Beta-carotene is a provitamin A carotenoid important for vision "
                "and immune health."
            ),
        ),
    ),
    "courgette": ProduceMeta(aliases=["zucchini"]),
    "fig": ProduceMeta(aliases=["fresh fig"]),
    "grape (green)": ProduceMeta(uk_name="Green grapes"),
    "grape (red)": ProduceMeta(uk_name="Red grapes"),
    "onion (red)": ProduceMeta(uk_name="Red onion"),
    "rocket": ProduceMeta(aliases=["arugula"]),
    "sweetcorn": ProduceMeta(aliases=["corn"]),
}


def get_produce_meta(name: str, band: RainbowBand) -> ProduceMeta:
    """Return produce metadata, falling back to the band's default nutrition."""
    override = PRODUCE_OVERRIDES.get(normalize_name(name), ProduceMeta())
    return ProduceMeta(
        nutrition=override.nutrition or BAND_NUTRITION[band],
        uk_name=override.uk_name,
        aliases=list(override.aliases),
    )
