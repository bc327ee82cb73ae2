"""
Static rule tables for dietary analysis.

All tables are read-only mappings built once at import time. Keys are
lowercase tags; iteration order is the declaration order below.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

DISPLAY_NAMES: Mapping[str, str] = MappingProxyType({
    "vegetarian": "Vegetarian",
    "vegan": "Vegan",
    "gluten-free": "Gluten-Free",
    "dairy-free": "Dairy-Free",
    "nut-free": "Nut-Free",
    "shellfish-free": "Shellfish-Free",
    "halal": "Halal",
    "kosher": "Kosher",
    "keto": "Keto/Ketogenic",
    "paleo": "Paleo",
    "low-carb": "Low-Carb",
    "diabetic-friendly": "Diabetic-Friendly",
})

# requirement -> restrictions it already covers
SUBSUMPTIONS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "vegan": ("vegetarian",),
    "keto": ("low-carb",),
    "paleo": ("gluten-free",),
})

# cuisine -> expected suitability (0-100) per restriction
CUISINE_SUITABILITY: Mapping[str, Mapping[str, int]] = MappingProxyType({
    "indian": MappingProxyType({
        "vegetarian": 90, "vegan": 70, "gluten-free": 60, "dairy-free": 40, "halal": 80,
    }),
    "mediterranean": MappingProxyType({
        "vegetarian": 85, "vegan": 65, "gluten-free": 70, "dairy-free": 60, "halal": 70,
    }),
    "japanese": MappingProxyType({
        "vegetarian": 60, "vegan": 50, "gluten-free": 40, "dairy-free": 80, "shellfish-free": 30,
    }),
    "italian": MappingProxyType({
        "vegetarian": 75, "vegan": 55, "gluten-free": 40, "dairy-free": 35,
    }),
    "mexican": MappingProxyType({
        "vegetarian": 70, "vegan": 60, "gluten-free": 50, "dairy-free": 45, "halal": 60,
    }),
    "chinese": MappingProxyType({
        "vegetarian": 80, "vegan": 70, "gluten-free": 45, "dairy-free": 75, "halal": 50,
    }),
})

# cuisine -> allergen categories commonly present
CUISINE_ALLERGY_RISKS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "asian": ("soy", "sesame", "shellfish", "fish"),
    "japanese": ("fish", "shellfish", "soy"),
    "chinese": ("soy", "sesame", "shellfish", "nuts"),
    "thai": ("shellfish", "fish", "nuts"),
    "indian": ("nuts", "dairy"),
    "mediterranean": ("nuts", "fish", "sesame"),
    "middle_eastern": ("sesame", "nuts"),
    "italian": ("eggs", "dairy"),
})

# Free-text parsing tables. Keyword lists overlap on purpose ("no pork"
# signals both halal and kosher); every matching tag is reported.
RESTRICTION_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "vegetarian": (
        "vegetarian", "veggie", "no meat", "no fish", "no chicken", "no beef",
        "no pork", "plant based", "meatless",
    ),
    "vegan": (
        "vegan", "plant based", "no dairy", "no eggs", "no animal products",
        "no cheese", "no milk", "no butter", "plant only",
    ),
    "gluten-free": (
        "gluten free", "gluten-free", "celiac", "no gluten", "no wheat",
        "no barley", "no rye", "wheat free",
    ),
    "dairy-free": (
        "dairy free", "dairy-free", "no dairy", "no milk", "no cheese",
        "no yogurt", "no cream", "lactose intolerant", "lactose free",
    ),
    "nut-free": (
        "nut free", "nut-free", "no nuts", "no peanuts", "no almonds",
        "nut allergy", "peanut allergy", "tree nut free",
    ),
    "shellfish-free": (
        "shellfish free", "shellfish-free", "no shellfish", "no shrimp",
        "no crab", "no lobster", "shellfish allergy", "seafood allergy",
    ),
    "halal": (
        "halal", "islamic", "muslim", "no pork", "no alcohol", "halal certified",
        "sharia compliant",
    ),
    "kosher": (
        "kosher", "jewish", "kashrus", "kashrut", "no pork", "no shellfish",
        "kosher certified", "pareve", "parve",
    ),
    "keto": (
        "keto", "ketogenic", "low carb", "no carbs", "no sugar", "no bread",
        "no pasta", "no rice", "high fat low carb",
    ),
    "paleo": (
        "paleo", "paleolithic", "caveman diet", "no grains", "no legumes",
        "no processed", "whole foods", "primal",
    ),
    "low-carb": (
        "low carb", "low-carb", "no carbs", "reduced carbs", "carb free",
        "no bread", "no pasta", "no rice", "no potatoes",
    ),
    "diabetic-friendly": (
        "diabetic", "diabetes friendly", "sugar free", "no sugar", "low sugar",
        "diabetic diet", "blood sugar friendly", "glucose friendly",
    ),
})

ALLERGY_KEYWORDS: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "nuts": ("nut", "peanut", "almond", "walnut", "cashew", "pistachio", "hazelnut", "pecan"),
    "shellfish": ("shellfish", "shrimp", "crab", "lobster", "oyster", "mussel", "scallop"),
    "fish": ("fish", "salmon", "tuna", "cod", "halibut", "seafood"),
    "eggs": ("egg", "eggs", "mayonnaise", "mayo"),
    "soy": ("soy", "soya", "tofu", "tempeh", "miso", "edamame"),
    "sesame": ("sesame", "tahini", "sesame seed", "sesame oil"),
    "sulfites": ("sulfite", "sulfur dioxide", "preservative"),
})
