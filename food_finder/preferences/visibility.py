from __future__ import annotations

from collections.abc import Iterable, Set

from ..catalog.models import Canteen, Catalog, Food, Tenant


def is_food_hidden(food: Food, ignored_categories: Set[str]) -> bool:
    """True when any of the food's categories is ignored."""
    if not ignored_categories:
        return False
    return any(category.value in ignored_categories for category in food.categories)


def is_tenant_hidden(
    tenant: Tenant,
    foods_of_tenant: Iterable[Food],
    ignored_categories: Set[str],
) -> bool:
    """
    True when every food of the tenant is hidden.

    A tenant without foods is never hidden by preference.
    """
    foods = list(foods_of_tenant)
    if not foods:
        return False
    return all(is_food_hidden(food, ignored_categories) for food in foods)


def visible_tenants_in_canteen(
    catalog: Catalog,
    canteen: Canteen,
    ignored_categories: Set[str],
) -> list[Tenant]:
    return [
        tenant
        for tenant in catalog.tenants_in(canteen)
        if not is_tenant_hidden(tenant, catalog.foods_for(tenant), ignored_categories)
    ]
