from __future__ import annotations

from concierge.config import DietaryConfig
from concierge.dietary.analyzer import (
    NO_RESTRICTIONS_MESSAGE,
    analyze,
    dietary_advice,
    display_name,
    filter_by_dietary,
    is_critical,
)
from concierge.dietary.models import DietaryProfile
from concierge.dietary.parser import parse_dietary_information, search_suggestions
from concierge.recommendations.models import DietaryOption, RestaurantRecord


def _restaurant(
    cuisines=("american",),
    options=(),
    rid="r1",
    name="Test Kitchen",
) -> RestaurantRecord:
    return RestaurantRecord(
        id=rid,
        name=name,
        address="1 Test St",
        rating=4.0,
        price_level=2,
        cuisines=list(cuisines),
        dietary_options=[DietaryOption(tag=t, available=a) for t, a in options],
    )


# ── Fast Path ────────────────────────────────────────────────────────────


class TestNoRestrictions:
    def test_empty_profile_is_fully_compatible(self):
        result = analyze(_restaurant(), [], [])
        assert result.compatible is True
        assert result.score == 100
        assert result.warnings == []
        assert result.recommendations == [NO_RESTRICTIONS_MESSAGE]

    def test_none_inputs_behave_like_empty(self):
        result = analyze(_restaurant(), None, None)
        assert result.score == 100


# ── Accommodation Pass ───────────────────────────────────────────────────


class TestAccommodation:
    def test_available_tag_is_compatible(self):
        result = analyze(_restaurant(options=[("vegetarian", True)]), ["vegetarian"], [])
        assert result.compatible is True
        assert result.score == 100
        assert result.compatible_tags == ["vegetarian"]
        assert result.incompatible_tags == []
        assert any("Vegetarian" in r for r in result.recommendations)

    def test_missing_non_critical_costs_thirty(self):
        result = analyze(_restaurant(), ["keto"], [])
        assert result.compatible is True
        assert result.score == 70
        assert result.incompatible_tags == ["keto"]

    def test_missing_critical_marks_incompatible(self):
        result = analyze(_restaurant(), ["halal"], [])
        assert result.compatible is False
        assert result.score == 50
        assert any("halal" in w.lower() for w in result.warnings)

    def test_unavailable_entry_counts_as_missing(self):
        result = analyze(_restaurant(options=[("vegan", False)]), ["vegan"], [])
        assert result.compatible is False
        assert result.incompatible_tags == ["vegan"]

    def test_unknown_tag_is_incompatible_not_error(self):
        result = analyze(_restaurant(), ["carnivore"], [])
        assert result.incompatible_tags == ["carnivore"]
        assert result.compatible is True

    def test_score_clamped_at_zero(self):
        critical = ["vegan", "gluten-free", "nut-free", "halal", "kosher"]
        result = analyze(_restaurant(), critical, ["nuts"])
        assert result.score == 0
        assert result.compatible is False

    def test_duplicate_restrictions_counted_once(self):
        result = analyze(_restaurant(), ["keto", "KETO", " keto "], [])
        assert result.score == 70
        assert result.incompatible_tags == ["keto"]


# ── Conflict Notes ───────────────────────────────────────────────────────


class TestConflictNotes:
    def test_vegan_and_vegetarian_note(self):
        options = [("vegan", True), ("vegetarian", True)]
        result = analyze(_restaurant(options=options), ["vegan", "vegetarian"], [])
        assert "Note: vegan diet includes vegetarian restrictions" in result.recommendations
        assert result.score == 100

    def test_no_note_without_overlap(self):
        result = analyze(_restaurant(options=[("vegan", True)]), ["vegan"], [])
        assert not any(r.startswith("Note:") for r in result.recommendations)


# ── Cuisine Suitability ──────────────────────────────────────────────────


class TestCuisineSuitability:
    def test_excellent_suitability(self):
        result = analyze(_restaurant(cuisines=["indian"], options=[("vegetarian", True)]), ["vegetarian"], [])
        assert "Indian cuisine is excellent for Vegetarian diets" in result.recommendations
        assert result.score == 100

    def test_good_suitability(self):
        result = analyze(_restaurant(cuisines=["indian"], options=[("vegan", True)]), ["vegan"], [])
        assert "Indian cuisine has good Vegan options" in result.recommendations

    def test_poor_suitability_warns_without_changing_score(self):
        options = [("shellfish-free", True)]
        result = analyze(_restaurant(cuisines=["japanese"], options=options), ["shellfish-free"], [])
        assert "Japanese cuisine may have limited Shellfish-Free options" in result.warnings
        assert result.score == 100
        assert result.compatible is True

    def test_neutral_band_emits_nothing(self):
        options = [("vegan", True)]
        result = analyze(_restaurant(cuisines=["japanese"], options=options), ["vegan"], [])
        assert not any("Japanese" in m for m in result.recommendations + result.warnings)


# ── Allergy Risk ─────────────────────────────────────────────────────────


class TestAllergyRisk:
    def test_chinese_nuts_costs_exactly_ten(self):
        result = analyze(_restaurant(cuisines=["chinese"]), [], ["nuts"])
        assert result.score == 90
        assert any("nuts" in w for w in result.warnings)

    def test_penalty_once_per_cuisine(self):
        result = analyze(_restaurant(cuisines=["chinese"]), [], ["nuts", "soy", "sesame"])
        assert result.score == 90
        assert len(result.warnings) == 1
        assert "soy, sesame, nuts" in result.warnings[0]

    def test_penalty_per_matching_cuisine(self):
        result = analyze(_restaurant(cuisines=["chinese", "thai"]), [], ["shellfish"])
        assert result.score == 80
        assert len(result.warnings) == 2

    def test_allergy_containment(self):
        result = analyze(_restaurant(cuisines=["thai"]), [], ["peanuts"])
        assert result.score == 90

    def test_no_overlap(self):
        result = analyze(_restaurant(cuisines=["italian"]), [], ["shellfish"])
        assert result.score == 100
        assert result.warnings == []


# ── Bonus & Ordering ─────────────────────────────────────────────────────


class TestBonusAndOrdering:
    def test_extensive_options_bonus(self):
        tags = ["vegetarian", "vegan", "gluten-free", "dairy-free", "nut-free", "halal"]
        restaurant = _restaurant(options=[(t, True) for t in tags])
        result = analyze(restaurant, ["keto"], [])
        assert result.score == 80
        assert result.recommendations[-1] == "Restaurant has extensive dietary accommodation options"

    def test_exactly_five_gets_no_bonus(self):
        tags = ["vegetarian", "vegan", "gluten-free", "dairy-free", "nut-free"]
        result = analyze(_restaurant(options=[(t, True) for t in tags]), ["keto"], [])
        assert result.score == 70

    def test_message_order_follows_input_order(self):
        restaurant = _restaurant(cuisines=["indian"])
        first = analyze(restaurant, ["keto", "paleo"], [])
        second = analyze(restaurant, ["paleo", "keto"], [])
        assert first.incompatible_tags == ["keto", "paleo"]
        assert second.incompatible_tags == ["paleo", "keto"]
        assert first.warnings[0].startswith("Limited Keto")
        assert analyze(restaurant, ["keto", "paleo"], []) == first

    def test_custom_config(self):
        config = DietaryConfig(critical_restrictions=frozenset({"keto"}))
        result = analyze(_restaurant(), ["keto"], [], config=config)
        assert result.compatible is False
        assert result.score == 50


# ── Helpers ──────────────────────────────────────────────────────────────


class TestHelpers:
    def test_display_name(self):
        assert display_name("gluten-free") == "Gluten-Free"
        assert display_name("carnivore") == "carnivore"

    def test_is_critical(self):
        assert is_critical("Halal")
        assert not is_critical("keto")

    def test_filter_by_dietary_sorts_and_thresholds(self):
        good = _restaurant(rid="good", options=[("vegan", True)])
        bad = _restaurant(rid="bad")
        results = filter_by_dietary([bad, good], ["vegan"], [])
        assert [r.id for r, _ in results] == ["good"]

    def test_filter_by_dietary_custom_threshold(self):
        bad = _restaurant(rid="bad")
        assert len(filter_by_dietary([bad], ["vegan"], [], min_score=0)) == 1

    def test_advice_when_empty(self):
        advice = dietary_advice([], ["vegan"])
        assert advice[0].startswith("No restaurants found")

    def test_advice_for_top_and_critical(self):
        good = _restaurant(name="Green Leaf", options=[("vegan", True)])
        results = filter_by_dietary([good], ["vegan"], [])
        advice = dietary_advice(results, ["vegan"])
        assert advice[0] == "Green Leaf is highly recommended for your dietary needs"
        assert "Ask about cross-contamination prevention" in advice

    def test_profile_normalizes(self):
        profile = DietaryProfile(restrictions=["Vegan", "vegan", " Halal "], allergies="Nuts")
        assert profile.restrictions == ("vegan", "halal")
        assert profile.allergies == ("nuts",)
        assert not profile.is_empty


# ── Free-text Parsing ────────────────────────────────────────────────────


class TestParseDietaryInformation:
    def test_detects_restrictions_and_allergies(self):
        parsed = parse_dietary_information("I'm vegan and have a shrimp allergy")
        assert "vegan" in parsed.restrictions
        assert "shellfish" in parsed.allergies
        assert parsed.confidence > 0

    def test_overlapping_keywords_report_every_tag(self):
        parsed = parse_dietary_information("no pork please")
        assert "halal" in parsed.restrictions
        assert "kosher" in parsed.restrictions

    def test_preferences(self):
        parsed = parse_dietary_information("I love spicy food")
        assert parsed.preferences == ["spicy"]
        assert parsed.confidence == 5

    def test_confidence_capped(self):
        text = "vegan vegetarian gluten free dairy free nut free halal kosher keto paleo peanut shrimp"
        assert parse_dietary_information(text).confidence == 100

    def test_empty_text(self):
        parsed = parse_dietary_information("")
        assert parsed.restrictions == []
        assert parsed.confidence == 0

    def test_to_profile(self):
        profile = parse_dietary_information("halal, allergic to sesame").to_profile()
        assert profile.restrictions == ("halal",)
        assert profile.allergies == ("sesame",)

    def test_search_suggestions(self):
        suggestions = search_suggestions("gluten free and I enjoy noodles")
        assert suggestions[0] == "Search for restaurants with Gluten-Free options"
        assert suggestions[-1] == "Look for restaurants featuring noodles"
