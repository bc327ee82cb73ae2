from __future__ import annotations

import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Intent(str, Enum):
    search = "search"
    reservation = "reservation"
    preferences = "preferences"
    help = "help"
    list = "list"
    unknown = "unknown"


class SearchFilters(BaseModel):
    """Structured search intent derived from one free-text query."""

    model_config = ConfigDict(frozen=True)

    cuisine: str | None = None
    dietary: str | None = None
    price_level: int | None = Field(default=None, ge=1, le=4)
    amenity: str | None = None
    free_text: str = ""
    intent: Intent = Intent.unknown

    def requested_dimensions(self) -> list[str]:
        dims: list[str] = []
        if self.cuisine:
            dims.append("cuisine")
        if self.dietary:
            dims.append("dietary")
        if self.price_level is not None:
            dims.append("price_level")
        if self.amenity:
            dims.append("amenity")
        return dims


class ReservationDetails(BaseModel):
    party_size: int | None = Field(default=None, ge=1)
    date: dt.date | None = None
    time: str | None = None
    special_requests: str | None = None
