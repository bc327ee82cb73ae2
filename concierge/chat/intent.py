from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Mapping

from .models import Intent, SearchFilters

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")

# ---------------------------------------------------------------------------
# Keyword tables (one per filter dimension, scanned in declaration order)
# ---------------------------------------------------------------------------

CUISINE_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "italian": ("italian", "pizza", "pasta"),
    "chinese": ("chinese", "asian", "dim sum"),
    "mexican": ("mexican", "tacos", "burrito"),
    "japanese": ("japanese", "sushi", "ramen"),
    "indian": ("indian", "curry"),
    "thai": ("thai", "pad thai"),
    "french": ("french", "bistro"),
    # must precede american ("korean bbq")
    "korean": ("korean", "bibimbap", "kimchi"),
    "american": ("american", "burger", "bbq"),
    "mediterranean": ("mediterranean", "greek", "falafel"),
})

DIETARY_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "vegan": ("vegan", "plant based", "plant-based"),
    "vegetarian": ("vegetarian", "veggie", "meatless"),
    "gluten-free": ("gluten free", "gluten-free", "celiac", "coeliac"),
    "dairy-free": ("dairy free", "dairy-free", "lactose"),
    "nut-free": ("nut free", "nut-free", "nut allergy", "peanut allergy"),
    "shellfish-free": ("shellfish free", "shellfish-free", "shellfish allergy"),
    "halal": ("halal",),
    "kosher": ("kosher",),
    "keto": ("keto",),
    "paleo": ("paleo",),
    "low-carb": ("low carb", "low-carb"),
    "diabetic-friendly": ("diabetic", "sugar free", "sugar-free"),
})

# Price tiers in precedence order: cheap beats expensive beats moderate.
PRICE_KEYWORDS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (1, ("cheap", "budget", "affordable", "inexpensive")),
    (4, ("expensive", "upscale", "fine dining", "high end", "high-end", "luxury")),
    (2, ("moderate", "mid-range", "mid range")),
)

AMENITY_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "outdoor_seating": ("outdoor", "patio", "terrace", "al fresco"),
    "live_music": ("live music",),
    "private_dining": ("private dining", "private room"),
    "delivery": ("delivery",),
    "takeout": ("takeout", "take-out", "take out"),
    "parking": ("parking",),
    "wheelchair_accessible": ("wheelchair",),
    "family_friendly": ("family", "kid friendly", "kid-friendly"),
    "wine_list": ("wine",),
    "catering": ("catering",),
})

INTENT_KEYWORDS: tuple[tuple[Intent, tuple[str, ...]], ...] = (
    (Intent.search, ("find", "search", "restaurant", "looking for", "eat", "food")),
    (Intent.reservation, ("book", "reserve", "reservation", "table")),
    (Intent.preferences, ("allergic", "allergy", "my diet", "preference")),
    (Intent.help, ("help",)),
    (Intent.list, ("list", "show")),
)

_GREETINGS = frozenset({"hi", "hello"})


def normalize_text(text: str | None) -> str:
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", str(text).lower()).strip()


def _first_match(text: str, table: Mapping[str, tuple[str, ...]]) -> str | None:
    for tag, keywords in table.items():
        if any(keyword in text for keyword in keywords):
            return tag
    return None


def _match_price_level(text: str) -> int | None:
    for level, keywords in PRICE_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return level
    return None


def amenity_matches(amenity: str, feature: str) -> bool:
    """True when a restaurant feature string satisfies an amenity tag."""
    feature_lower = feature.lower()
    keywords = AMENITY_KEYWORDS.get(amenity, ())
    if any(keyword in feature_lower for keyword in keywords):
        return True
    return amenity.replace("_", " ") in feature_lower


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


def detect_intent(text: str | None) -> Intent:
    lower = normalize_text(text)
    if not lower:
        return Intent.unknown
    for intent, keywords in INTENT_KEYWORDS:
        if any(keyword in lower for keyword in keywords):
            return intent
    if lower in _GREETINGS:
        return Intent.help
    return Intent.unknown


def extract_filters(text: str | None) -> SearchFilters:
    """
    Parse a free-text request into search filters.

    Each dimension is resolved independently against its own keyword table,
    so one query may set cuisine, dietary, price and amenity together.
    """
    lower = normalize_text(text)
    if not lower:
        return SearchFilters()

    filters = SearchFilters(
        cuisine=_first_match(lower, CUISINE_KEYWORDS),
        dietary=_first_match(lower, DIETARY_KEYWORDS),
        price_level=_match_price_level(lower),
        amenity=_first_match(lower, AMENITY_KEYWORDS),
        free_text=lower,
        intent=detect_intent(lower),
    )
    logger.debug("Extracted filters %s from %r", filters.model_dump(exclude_defaults=True), lower)
    return filters
