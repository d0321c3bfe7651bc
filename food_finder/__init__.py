"""
Campus food finder service.

Responsibilities:
- Load the canteen / tenant / food catalog.
- Evaluate search and filter criteria against the catalog.
- Apply persistent dietary preferences to hide foods and tenants.
"""
