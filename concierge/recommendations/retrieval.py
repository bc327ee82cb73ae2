from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from ..chat.intent import amenity_matches
from ..chat.models import SearchFilters
from ..config import (
    DEFAULT_DIETARY_CONFIG,
    DEFAULT_SCORING_CONFIG,
    DietaryConfig,
    ScoringConfig,
)
from ..dietary.analyzer import analyze
from ..dietary.models import CompatibilityResult, DietaryProfile
from .models import RankedMatch, RestaurantRecord

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"[\w']+")
_MIN_NAME_TOKEN_LEN = 3
_NAME_STOPWORDS = frozenset({"the", "and", "for", "with", "near", "restaurant", "restaurants"})


def _dedupe(catalog: Iterable[RestaurantRecord]) -> list[RestaurantRecord]:
    seen: set[str] = set()
    unique: list[RestaurantRecord] = []
    for restaurant in catalog:
        if restaurant.id in seen:
            continue
        seen.add(restaurant.id)
        unique.append(restaurant)
    return unique


def _name_matches(name: str, text: str) -> bool:
    """
    The whole name appears in the query, or the query is a partial name.

    A partial name needs at least one significant token, and every
    significant query token must be a whole word of the name, so single
    letters and filler words never match.
    """
    if not text:
        return False
    if name in text:
        return True
    tokens = [
        t for t in _WORD_RE.findall(text)
        if len(t) >= _MIN_NAME_TOKEN_LEN and t not in _NAME_STOPWORDS
    ]
    if not tokens:
        return False
    name_words = set(_WORD_RE.findall(name))
    return all(t in name_words for t in tokens)


def _violates_hard_filters(restaurant: RestaurantRecord, filters: SearchFilters) -> str | None:
    """Return the reason a restaurant must be excluded, or None if it passes."""
    if filters.cuisine and filters.cuisine.lower() not in restaurant.cuisines:
        return f"cuisine {filters.cuisine!r} not served"
    if filters.price_level is not None and restaurant.price_level != filters.price_level:
        return f"price level {restaurant.price_level} != {filters.price_level}"
    if filters.dietary:
        option = restaurant.accommodation(filters.dietary)
        if option is None or not option.available:
            return f"no {filters.dietary} accommodation"
    return None


def _dietary_analysis(
    restaurant: RestaurantRecord,
    filters: SearchFilters,
    profile: DietaryProfile,
    config: DietaryConfig,
) -> CompatibilityResult:
    restrictions = list(profile.restrictions)
    if filters.dietary and filters.dietary.lower() not in restrictions:
        restrictions.append(filters.dietary.lower())
    return analyze(restaurant, restrictions, profile.allergies, config)


def _score_restaurant(
    restaurant: RestaurantRecord,
    filters: SearchFilters,
    profile: DietaryProfile | None,
    weights: ScoringConfig,
    dietary_config: DietaryConfig,
) -> RankedMatch | None:
    """Accumulate the additive score for one restaurant that passed hard filters."""
    text = filters.free_text
    name = restaurant.name.lower()
    score = 0.0
    reasons: list[str] = []
    satisfied: list[str] = []

    if _name_matches(name, text):
        score += weights.name_match
        reasons.append(f"name matches '{restaurant.name}'")

    cuisine_hits = [
        c for c in restaurant.cuisines
        if c == (filters.cuisine or "").lower() or (text and c in text)
    ]
    if cuisine_hits:
        score += weights.cuisine_match
        reasons.append(f"cuisine: {', '.join(cuisine_hits)}")

    dish_hits = [d for d in restaurant.popular_dishes if text and d.lower() in text]
    if dish_hits:
        score += weights.popular_dish_match
        reasons.append(f"popular dish: {', '.join(dish_hits)}")

    feature_hits = [f for f in restaurant.features if text and f.lower() in text]
    if feature_hits:
        score += weights.feature_match
        reasons.append(f"feature: {', '.join(feature_hits)}")

    if filters.cuisine:
        satisfied.append("cuisine")
    if filters.price_level is not None:
        satisfied.append("price_level")
        reasons.append(f"price level {restaurant.price_level}")

    compatibility: CompatibilityResult | None = None
    if filters.dietary:
        satisfied.append("dietary")
        if profile is not None:
            compatibility = _dietary_analysis(restaurant, filters, profile, dietary_config)
            if filters.dietary.lower() in compatibility.compatible_tags:
                score += weights.dietary_bonus
            reasons.append(
                f"dietary: {filters.dietary} (compatibility {compatibility.score}/100)"
            )
        else:
            reasons.append(f"dietary: {filters.dietary}")

    # Stacks with the free-text feature match above.
    if filters.amenity:
        amenity_hits = [f for f in restaurant.features if amenity_matches(filters.amenity, f)]
        if amenity_hits:
            score += weights.amenity_filter_match
            satisfied.append("amenity")
            reasons.append(f"amenity: {', '.join(amenity_hits)}")

    if score <= 0 and not satisfied:
        return None

    return RankedMatch(
        restaurant=restaurant,
        score=score,
        matched_reasons=reasons,
        compatibility=compatibility,
    )


def rank_restaurants(
    catalog: Iterable[RestaurantRecord],
    filters: SearchFilters,
    profile: DietaryProfile | None = None,
    weights: ScoringConfig = DEFAULT_SCORING_CONFIG,
    dietary_config: DietaryConfig = DEFAULT_DIETARY_CONFIG,
) -> list[RankedMatch]:
    """
    Score a catalog against extracted filters and return ranked matches.

    Cuisine, price and dietary filters are pass/fail: a restaurant failing
    any of them is dropped regardless of score. Amenity filters only add to
    the score. Results are sorted by score, then rating, then catalog order.
    """
    matches: list[RankedMatch] = []
    excluded = 0

    for restaurant in _dedupe(catalog or []):
        reason = _violates_hard_filters(restaurant, filters)
        if reason:
            excluded += 1
            logger.debug("Excluding %s: %s", restaurant.id, reason)
            continue

        match = _score_restaurant(restaurant, filters, profile, weights, dietary_config)
        if match is not None:
            matches.append(match)

    # sorted() is stable, so equal (score, rating) pairs keep catalog order
    ranked = sorted(matches, key=lambda m: (-m.score, -m.restaurant.rating))
    logger.debug("Ranked %d restaurants (%d excluded by hard filters)", len(ranked), excluded)
    return ranked
