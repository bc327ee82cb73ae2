from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..config import DEFAULT_DIETARY_CONFIG, DietaryConfig
from ..recommendations.models import RestaurantRecord
from .models import CompatibilityResult, normalize_tags
from .tables import (
    CUISINE_ALLERGY_RISKS,
    CUISINE_SUITABILITY,
    DISPLAY_NAMES,
    SUBSUMPTIONS,
)

logger = logging.getLogger(__name__)

NO_RESTRICTIONS_MESSAGE = "No dietary restrictions specified - all options should be available"


def display_name(tag: str) -> str:
    return DISPLAY_NAMES.get(tag, tag)


def is_critical(tag: str, config: DietaryConfig = DEFAULT_DIETARY_CONFIG) -> bool:
    return tag.strip().lower() in config.critical_restrictions


# ---------------------------------------------------------------------------
# Passes (run in this fixed order by ``analyze``)
# ---------------------------------------------------------------------------


def _accommodation_pass(
    restaurant: RestaurantRecord,
    restrictions: Sequence[str],
    result: CompatibilityResult,
    config: DietaryConfig,
) -> int:
    score = 0
    for tag in restrictions:
        option = restaurant.accommodation(tag)
        if option is not None and option.available:
            result.compatible_tags.append(tag)
            result.recommendations.append(f"{display_name(tag)} options available")
            continue

        result.incompatible_tags.append(tag)
        score -= config.missing_restriction_penalty
        result.warnings.append(
            f"Limited {display_name(tag)} options may be available "
            f"(no confirmed {tag} accommodation)"
        )
        if is_critical(tag, config):
            result.compatible = False
            score -= config.critical_restriction_penalty
    return score


def _conflict_notes(restrictions: Sequence[str], result: CompatibilityResult) -> None:
    for primary, covered in SUBSUMPTIONS.items():
        if primary in restrictions and any(c in restrictions for c in covered):
            result.recommendations.append(
                f"Note: {primary} diet includes {', '.join(covered)} restrictions"
            )


def _cuisine_suitability_pass(
    cuisines: Sequence[str],
    restrictions: Sequence[str],
    result: CompatibilityResult,
    config: DietaryConfig,
) -> None:
    for cuisine in cuisines:
        table = CUISINE_SUITABILITY.get(cuisine.lower())
        if not table:
            continue
        label = cuisine.title()
        for tag in restrictions:
            suitability = table.get(tag)
            if suitability is None:
                continue
            if suitability >= config.excellent_threshold:
                result.recommendations.append(
                    f"{label} cuisine is excellent for {display_name(tag)} diets"
                )
            elif suitability >= config.good_threshold:
                result.recommendations.append(
                    f"{label} cuisine has good {display_name(tag)} options"
                )
            elif suitability < config.poor_threshold:
                result.warnings.append(
                    f"{label} cuisine may have limited {display_name(tag)} options"
                )


def _allergy_risk_pass(
    cuisines: Sequence[str],
    allergies: Sequence[str],
    result: CompatibilityResult,
    config: DietaryConfig,
) -> int:
    score = 0
    for cuisine in cuisines:
        risks = CUISINE_ALLERGY_RISKS.get(cuisine.lower())
        if not risks:
            continue
        overlapping = [risk for risk in risks if any(risk in allergy for allergy in allergies)]
        if overlapping:
            result.warnings.append(
                f"{cuisine.title()} cuisine commonly uses {', '.join(overlapping)} - "
                "please inform the restaurant of your allergies"
            )
            score -= config.allergy_risk_penalty
    return score


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze(
    restaurant: RestaurantRecord,
    restrictions: Iterable[str] | None,
    allergies: Iterable[str] | None = None,
    config: DietaryConfig = DEFAULT_DIETARY_CONFIG,
) -> CompatibilityResult:
    """
    Score how well a restaurant serves a set of restrictions and allergies.

    Restrictions and allergies are evaluated in the order given, so message
    ordering is reproducible for ordered inputs. The returned score is always
    clamped into [0, 100].
    """
    restriction_tags = normalize_tags(restrictions)
    allergy_tags = normalize_tags(allergies)
    result = CompatibilityResult(score=config.base_score)

    if not restriction_tags and not allergy_tags:
        result.recommendations.append(NO_RESTRICTIONS_MESSAGE)
        return result

    score = config.base_score
    score += _accommodation_pass(restaurant, restriction_tags, result, config)
    _conflict_notes(restriction_tags, result)
    _cuisine_suitability_pass(restaurant.cuisines, restriction_tags, result, config)
    score += _allergy_risk_pass(restaurant.cuisines, allergy_tags, result, config)

    if len(restaurant.available_tags()) > config.extensive_options_threshold:
        score += config.extensive_options_bonus
        result.recommendations.append("Restaurant has extensive dietary accommodation options")

    result.score = max(0, min(100, score))
    logger.debug(
        "Dietary analysis for %s: score=%d compatible=%s",
        restaurant.id, result.score, result.compatible,
    )
    return result


def filter_by_dietary(
    catalog: Iterable[RestaurantRecord],
    restrictions: Iterable[str] | None,
    allergies: Iterable[str] | None = None,
    min_score: int | None = None,
    config: DietaryConfig = DEFAULT_DIETARY_CONFIG,
) -> list[tuple[RestaurantRecord, CompatibilityResult]]:
    """Analyze every restaurant, keep those at or above ``min_score``, best first."""
    threshold = config.min_compatibility_score if min_score is None else min_score
    restriction_tags = normalize_tags(restrictions)
    allergy_tags = normalize_tags(allergies)

    scored = [
        (restaurant, analyze(restaurant, restriction_tags, allergy_tags, config))
        for restaurant in catalog
    ]
    kept = [pair for pair in scored if pair[1].score >= threshold]
    kept.sort(key=lambda pair: pair[1].score, reverse=True)
    return kept


def dietary_advice(
    results: Sequence[tuple[RestaurantRecord, CompatibilityResult]],
    restrictions: Iterable[str] | None,
    config: DietaryConfig = DEFAULT_DIETARY_CONFIG,
) -> list[str]:
    """Summary guidance for a ranked list produced by ``filter_by_dietary``."""
    advice: list[str] = []

    if not results:
        advice.append("No restaurants found matching your dietary requirements. Consider:")
        advice.append("Expanding your search radius")
        advice.append("Calling restaurants directly to inquire about accommodations")
        advice.append("Looking for restaurants that specialize in your dietary needs")
        return advice

    top_restaurant, top_result = results[0]
    if top_result.score >= 90:
        advice.append(f"{top_restaurant.name} is highly recommended for your dietary needs")

    if any(is_critical(tag, config) for tag in normalize_tags(restrictions)):
        advice.append("Please always confirm critical dietary restrictions with the restaurant")
        advice.append("Ask about cross-contamination prevention")
        advice.append("Inquire about ingredient lists for complex dishes")
        advice.append("Consider calling ahead to discuss your needs")

    return advice
