"""
Search & filtering engine.

Responsibilities:
- Accept filter criteria (text, price, categories, canteens, nearest, open now).
- Filter the catalog snapshot down to matching tenants and foods.
- Report what the user's dietary preferences hid along the way.
- Return a deterministic, name-ordered result ready for API serialisation.
"""
