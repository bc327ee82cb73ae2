"""
Restaurant matching engine.

Responsibilities:
- Define the immutable restaurant catalog schema.
- Apply cuisine, price and dietary hard filters.
- Score and rank surviving restaurants with additive heuristics.
- Load catalog snapshots from flat CSV exports.
"""
