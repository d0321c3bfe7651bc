from __future__ import annotations

import random
from collections.abc import Set

from ..catalog.models import Catalog, Food
from ..preferences.visibility import is_food_hidden
from .models import SurpriseFood

SURPRISE_TRIGGER = "bingung"


def is_surprise_trigger(search_term: str) -> bool:
    return search_term.lower() == SURPRISE_TRIGGER


def permissible_foods(catalog: Catalog, ignored_categories: Set[str]) -> list[Food]:
    """Every food not hidden by preference, tenants in name order."""
    foods: list[Food] = []
    for tenant in catalog.tenants:
        foods.extend(
            food for food in catalog.foods_for(tenant)
            if not is_food_hidden(food, ignored_categories)
        )
    return foods


def pick_surprise_food(
    catalog: Catalog,
    ignored_categories: Set[str],
    rng: random.Random | None = None,
) -> SurpriseFood | None:
    foods = permissible_foods(catalog, ignored_categories)
    if not foods:
        return None

    food = (rng or random).choice(foods)
    tenant = catalog.tenant_for(food)
    canteen = catalog.canteen_for(tenant) if tenant else None
    return SurpriseFood(
        name=food.name,
        description=food.description,
        categories=", ".join(c.value for c in food.categories),
        tenant_name=tenant.name if tenant else "Unknown Tenant",
        canteen_name=canteen.name if canteen else "Unknown Canteen",
    )
