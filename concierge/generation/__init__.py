"""
Synthetic catalog generation.

Responsibilities:
- Infer cuisine, style, price tier and location pricing from a name and address.
- Build complete catalog entries (dietary options, menu, features) from those guesses.
"""
