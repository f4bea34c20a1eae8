"""Request models for the HTTP API."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from rainbow_tracker.domain.catalog import RainbowBand

ItemName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)
]
ColorName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=60)
]
ColorHex = Annotated[
    str, StringConstraints(strip_whitespace=True, pattern=r"^#[0-9A-Fa-f]{6}$")
]


class CreateItemRequest(BaseModel):
    """Payload for logging a produce item."""

    model_config = ConfigDict(populate_by_name=True)

    name: ItemName
    color_name: ColorName | None = Field(default=None, alias="colorName")
    color_hex: ColorHex | None = Field(default=None, alias="colorHex")
    rainbow_band: RainbowBand | None = Field(default=None, alias="rainbowBand")
