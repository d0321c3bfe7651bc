"""
Catalog layer.

Responsibilities:
- Define the canteen, tenant and food value types.
- Load the catalog snapshot from the bundled CSV files.
- Resolve tenant -> canteen and tenant -> foods relationships.
"""
