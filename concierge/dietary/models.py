from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator


def normalize_tags(values: Iterable[str] | None) -> tuple[str, ...]:
    """Lowercase, strip and deduplicate tags while keeping caller order."""
    if not values:
        return ()
    if isinstance(values, str):
        values = [values]
    out: list[str] = []
    for value in values:
        tag = str(value).strip().lower()
        if tag and tag not in out:
            out.append(tag)
    return tuple(out)


class DietaryProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    restrictions: tuple[str, ...] = ()
    allergies: tuple[str, ...] = ()

    @field_validator("restrictions", "allergies", mode="before")
    @classmethod
    def _normalize(cls, value) -> tuple[str, ...]:
        return normalize_tags(value)

    @property
    def is_empty(self) -> bool:
        return not self.restrictions and not self.allergies


class CompatibilityResult(BaseModel):
    compatible: bool = True
    score: int = Field(default=100, ge=0, le=100)
    warnings: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    compatible_tags: list[str] = Field(default_factory=list)
    incompatible_tags: list[str] = Field(default_factory=list)


class ParsedDietaryInfo(BaseModel):
    restrictions: list[str] = Field(default_factory=list)
    allergies: list[str] = Field(default_factory=list)
    preferences: list[str] = Field(default_factory=list)
    confidence: int = Field(default=0, ge=0, le=100)

    def to_profile(self) -> DietaryProfile:
        return DietaryProfile(restrictions=self.restrictions, allergies=self.allergies)
