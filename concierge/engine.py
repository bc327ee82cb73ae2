"""
Public entry points of the concierge engine.

Every function here is pure and total: unrecognised text yields empty
filters, unknown dietary tags count as incompatible, and the only failure a
caller sees is an empty result list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .chat.intent import extract_filters as _extract_filters
from .chat.models import SearchFilters
from .dietary.analyzer import analyze
from .dietary.models import CompatibilityResult, DietaryProfile
from .recommendations.models import RankedMatch, RestaurantRecord
from .recommendations.retrieval import rank_restaurants as _rank_restaurants

logger = logging.getLogger(__name__)


def extract_filters(text: str | None) -> SearchFilters:
    return _extract_filters(text)


def analyze_dietary(
    restaurant: RestaurantRecord,
    restrictions: Iterable[str] | None,
    allergies: Iterable[str] | None = None,
) -> CompatibilityResult:
    return analyze(restaurant, restrictions, allergies)


def rank_restaurants(
    catalog: Iterable[RestaurantRecord],
    filters: SearchFilters,
    profile: DietaryProfile | None = None,
) -> list[RankedMatch]:
    return _rank_restaurants(catalog, filters, profile)


def search(
    catalog: Iterable[RestaurantRecord],
    text: str | None,
    profile: DietaryProfile | None = None,
) -> tuple[SearchFilters, list[RankedMatch]]:
    """Extract filters from ``text`` and rank ``catalog`` against them."""
    filters = _extract_filters(text)
    matches = _rank_restaurants(catalog, filters, profile)
    if not matches:
        logger.info("No matches for %r", text)
    return filters, matches
