"""
Query understanding.

Responsibilities:
- Extract cuisine, dietary, price and amenity filters from free text.
- Label the coarse intent of a message (search, reservation, help, ...).
- Parse reservation details such as party size, date and time.
"""
