from __future__ import annotations

import re

from .analyzer import display_name
from .models import ParsedDietaryInfo
from .tables import ALLERGY_KEYWORDS, RESTRICTION_KEYWORDS

_RESTRICTION_HIT_WEIGHT = 10
_ALLERGY_HIT_WEIGHT = 15  # allergies are more safety-relevant than preferences
_PREFERENCE_HIT_WEIGHT = 5

_PREFERENCE_PATTERNS = (
    re.compile(r"prefer (\w+)"),
    re.compile(r"like (\w+)"),
    re.compile(r"love (\w+)"),
    re.compile(r"enjoy (\w+)"),
)


def parse_dietary_information(text: str | None) -> ParsedDietaryInfo:
    """Detect restrictions, allergies and loose food preferences in free text."""
    normalized = (text or "").lower().strip()
    if not normalized:
        return ParsedDietaryInfo()

    restrictions: list[str] = []
    allergies: list[str] = []
    preferences: list[str] = []
    confidence = 0

    for restriction, keywords in RESTRICTION_KEYWORDS.items():
        hits = sum(1 for keyword in keywords if keyword in normalized)
        if hits:
            restrictions.append(restriction)
            confidence += hits * _RESTRICTION_HIT_WEIGHT

    for allergy, keywords in ALLERGY_KEYWORDS.items():
        hits = sum(1 for keyword in keywords if keyword in normalized)
        if hits:
            allergies.append(allergy)
            confidence += hits * _ALLERGY_HIT_WEIGHT

    for pattern in _PREFERENCE_PATTERNS:
        for match in pattern.finditer(normalized):
            preferences.append(match.group(1))
            confidence += _PREFERENCE_HIT_WEIGHT

    return ParsedDietaryInfo(
        restrictions=restrictions,
        allergies=allergies,
        preferences=preferences,
        confidence=min(confidence, 100),
    )


def search_suggestions(text: str | None) -> list[str]:
    parsed = parse_dietary_information(text)
    suggestions: list[str] = []

    if parsed.restrictions:
        labels = ", ".join(display_name(r) for r in parsed.restrictions)
        suggestions.append(f"Search for restaurants with {labels} options")
    if parsed.allergies:
        suggestions.append(
            f"Filter out restaurants that commonly use {', '.join(parsed.allergies)}"
        )
    if parsed.preferences:
        suggestions.append(f"Look for restaurants featuring {', '.join(parsed.preferences)}")

    return suggestions
