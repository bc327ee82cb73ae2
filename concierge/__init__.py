"""
Restaurant concierge engine.

Responsibilities:
- Turn free-text dining requests into structured search filters.
- Score restaurants against a user's dietary restrictions and allergies.
- Rank a restaurant catalog against extracted filters.
- Infer attributes for synthetic catalog entries from a name and address.
"""
