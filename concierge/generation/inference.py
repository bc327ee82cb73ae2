from __future__ import annotations

import logging

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Rule tables (scanned in declaration order; first hit wins)
# ---------------------------------------------------------------------------

CUISINE_INDICATORS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("italian", ("pizza", "pasta", "giovanni", "mario", "luigi", "bella", "roma",
                 "milano", "trattoria", "osteria", "ristorante")),
    ("chinese", ("dragon", "golden", "panda", "wok", "china", "beijing", "shanghai",
                 "szechuan", "hunan")),
    ("mexican", ("casa", "el", "la", "taco", "burrito", "cantina", "fiesta", "sol",
                 "maria", "jose")),
    ("japanese", ("sushi", "ramen", "hibachi", "sake", "tokyo", "osaka", "zen", "mizu",
                  "hana")),
    ("indian", ("taj", "curry", "masala", "tandoor", "spice", "mumbai", "delhi", "punjab")),
    ("thai", ("thai", "bangkok", "pad", "som", "tom", "green", "red", "basil")),
    ("french", ("cafe", "bistro", "brasserie", "le", "la", "chez", "paris", "lyon")),
    ("american", ("grill", "diner", "tavern", "pub", "kitchen", "house", "bar", "steakhouse")),
    ("mediterranean", ("olive", "mediterranean", "greco", "cyprus", "athens", "santorini")),
    ("korean", ("kim", "seoul", "korean", "bbq", "bulgogi", "kimchi")),
)

DEFAULT_CUISINE = "american"

# (markers, restaurant_type, price_level, expected_quality)
RESTAURANT_STYLES: tuple[tuple[tuple[str, ...], str, int, float], ...] = (
    (("fine", "prime"), "fine_dining", 4, 4.5),
    (("fast", "quick", "express"), "fast_casual", 1, 3.5),
    (("cafe", "coffee"), "cafe", 2, 4.0),
    (("bar", "pub", "tavern"), "bar_restaurant", 2, 3.8),
)

DEFAULT_STYLE = ("casual_dining", 2, 4.0)

URBAN_MARKERS = ("downtown", "city center", "main st", "broadway", "avenue", "plaza")
UPSCALE_MARKERS = ("hills", "heights", "park", "gardens", "estates")

URBAN_MULTIPLIER = 1.3
UPSCALE_MULTIPLIER = 1.5

BASE_CONFIDENCE = 75
CUISINE_HIT_BONUS = 10
DEFAULT_CUISINE_PENALTY = 20
MAX_CONFIDENCE = 95


class NameAnalysis(BaseModel):
    cuisines: list[str]
    restaurant_type: str
    price_level_base: int = Field(..., ge=1, le=4)
    expected_quality: float
    confidence: int = Field(..., ge=0, le=100)


class LocationAnalysis(BaseModel):
    price_multiplier: float
    location_style: str


class InferredAttributes(BaseModel):
    """
    Attributes guessed from a restaurant's name and address.

    ``confidence`` is advisory metadata for human review and never used to
    exclude a restaurant. ``price_multiplier`` applies to menu item prices,
    not to ``price_level_base``.
    """

    cuisines: list[str]
    price_level_base: int = Field(..., ge=1, le=4)
    restaurant_type: str
    expected_quality: float
    confidence: int = Field(..., ge=0, le=100)
    price_multiplier: float = 1.0
    location_style: str = "suburban"


def analyze_name(name: str) -> NameAnalysis:
    name_lower = (name or "").lower()
    cuisines: list[str] = []
    confidence = BASE_CONFIDENCE

    # Only one cuisine is inferred from a name.
    for cuisine, indicators in CUISINE_INDICATORS:
        if any(indicator in name_lower for indicator in indicators):
            cuisines.append(cuisine)
            confidence += CUISINE_HIT_BONUS
            break

    if not cuisines:
        cuisines.append(DEFAULT_CUISINE)
        confidence -= DEFAULT_CUISINE_PENALTY

    restaurant_type, price_level, expected_quality = DEFAULT_STYLE
    for markers, style, level, quality in RESTAURANT_STYLES:
        if any(marker in name_lower for marker in markers):
            restaurant_type, price_level, expected_quality = style, level, quality
            break

    return NameAnalysis(
        cuisines=cuisines,
        restaurant_type=restaurant_type,
        price_level_base=price_level,
        expected_quality=expected_quality,
        confidence=min(confidence, MAX_CONFIDENCE),
    )


def analyze_location(address: str) -> LocationAnalysis:
    address_lower = (address or "").lower()
    multiplier = 1.0
    style = "suburban"

    if any(marker in address_lower for marker in URBAN_MARKERS):
        multiplier, style = URBAN_MULTIPLIER, "urban"

    # Upscale markers override urban ones.
    if any(marker in address_lower for marker in UPSCALE_MARKERS):
        multiplier, style = UPSCALE_MULTIPLIER, "upscale"

    return LocationAnalysis(price_multiplier=multiplier, location_style=style)


def infer(name: str, address: str) -> InferredAttributes:
    by_name = analyze_name(name)
    by_location = analyze_location(address)
    inferred = InferredAttributes(
        **by_name.model_dump(),
        price_multiplier=by_location.price_multiplier,
        location_style=by_location.location_style,
    )
    logger.debug("Inferred %s for %r at %r", inferred.model_dump(), name, address)
    return inferred
