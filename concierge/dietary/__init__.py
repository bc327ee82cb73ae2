"""
Dietary compatibility.

Responsibilities:
- Score a restaurant against a user's restrictions and allergies.
- Flag cuisine-level suitability and allergen risks.
- Parse restrictions and allergies out of free text.
"""
