"""Domain models for logged produce items."""

from dataclasses import dataclass
from uuid import UUID

from rainbow_tracker.domain.catalog import RainbowBand


@dataclass(frozen=True)
class LoggedItem:
    """A fruit or vegetable a user has logged.

    Timestamps are epoch milliseconds.
    """

    id: UUID
    name: str
    color_name: str
    color_hex: str
    rainbow_band: RainbowBand
    user_id: UUID
    created_at: int
    updated_at: int
