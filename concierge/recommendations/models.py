from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..dietary.models import CompatibilityResult

RESTAURANT_SCHEMA_VERSION = 1


def _as_tuple(value: Any) -> tuple:
    """Coerce an optional collection from a collaborator into a tuple."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


class GeoPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(default=0.0, ge=-90.0, le=90.0)
    lng: float = Field(default=0.0, ge=-180.0, le=180.0)


class DietaryOption(BaseModel):
    """A restaurant-declared accommodation entry for one dietary tag."""

    model_config = ConfigDict(frozen=True)

    tag: str = Field(..., min_length=1)
    available: bool = False
    note: str | None = None

    @field_validator("tag")
    @classmethod
    def _normalize_tag(cls, value: str) -> str:
        return value.strip().lower()


class RestaurantRecord(BaseModel):
    """Immutable catalog entry. The engine never mutates a record."""

    model_config = ConfigDict(frozen=True)

    schema_version: int = RESTAURANT_SCHEMA_VERSION
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    address: str = ""
    location: GeoPoint = Field(default_factory=GeoPoint)
    rating: float = Field(default=0.0, ge=0.0, le=5.0)
    price_level: int = Field(default=2, ge=1, le=4)
    cuisines: tuple[str, ...] = ()
    dietary_options: tuple[DietaryOption, ...] = ()
    popular_dishes: tuple[str, ...] = ()
    features: tuple[str, ...] = ()

    @field_validator("cuisines", "popular_dishes", "features", "dietary_options", mode="before")
    @classmethod
    def _default_empty(cls, value: Any) -> tuple:
        return _as_tuple(value)

    @field_validator("cuisines")
    @classmethod
    def _normalize_cuisines(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        seen: list[str] = []
        for cuisine in value:
            c = cuisine.strip().lower()
            if c and c not in seen:
                seen.append(c)
        return tuple(seen)

    def accommodation(self, tag: str) -> DietaryOption | None:
        """Return the first accommodation entry declared for ``tag``."""
        wanted = tag.strip().lower()
        for option in self.dietary_options:
            if option.tag == wanted:
                return option
        return None

    def available_tags(self) -> list[str]:
        return [opt.tag for opt in self.dietary_options if opt.available]


class RankedMatch(BaseModel):
    restaurant: RestaurantRecord
    score: float = Field(..., ge=0.0)
    matched_reasons: list[str] = Field(default_factory=list)
    compatibility: CompatibilityResult | None = None
