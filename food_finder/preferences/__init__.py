"""
Dietary preference layer.

Responsibilities:
- Store the user's selected presets and individual categories.
- Expand the selections into the flat set of ignored categories.
- Decide which foods and tenants are hidden by those preferences.
"""
