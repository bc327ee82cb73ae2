from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class ScoringConfig:
    """Additive weights used by the matcher, one per independent factor."""

    name_match: float = 10.0
    cuisine_match: float = 8.0
    popular_dish_match: float = 6.0
    feature_match: float = 4.0
    dietary_bonus: float = 5.0
    amenity_filter_match: float = 3.0


@dataclass(frozen=True)
class DietaryConfig:
    """
    Heuristic constants for the dietary compatibility analyzer.

    The critical set and the suitability thresholds have no documented
    derivation; they are kept here so they can be tuned without touching
    the analyzer passes.
    """

    base_score: int = 100
    missing_restriction_penalty: int = 30
    critical_restriction_penalty: int = 20
    allergy_risk_penalty: int = 10
    extensive_options_bonus: int = 10
    extensive_options_threshold: int = 5
    excellent_threshold: int = 80
    good_threshold: int = 60
    poor_threshold: int = 40
    critical_restrictions: frozenset[str] = field(
        default_factory=lambda: frozenset(
            {"vegan", "gluten-free", "nut-free", "shellfish-free", "halal", "kosher"}
        )
    )
    min_compatibility_score: int = int(os.getenv("CONCIERGE_MIN_COMPATIBILITY_SCORE", "60"))


_DATA_DIR = Path(__file__).resolve().parent / "data"


@dataclass(frozen=True)
class CatalogConfig:
    catalog_path: Path = Path(
        os.getenv("CONCIERGE_CATALOG_PATH", str(_DATA_DIR / "restaurants.csv"))
    )


DEFAULT_SCORING_CONFIG = ScoringConfig()
DEFAULT_DIETARY_CONFIG = DietaryConfig()
DEFAULT_CATALOG_CONFIG = CatalogConfig()
