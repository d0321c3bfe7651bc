from __future__ import annotations

import logging
from collections.abc import Callable, Set
from datetime import datetime, time

from ..catalog.models import Catalog, Food, Tenant
from ..preferences.profile import PreferenceProfile
from ..preferences.visibility import is_food_hidden, is_tenant_hidden
from .geo import resolve_nearest_canteen
from .hours import is_open_now
from .models import CategorizedResult, FilterCriteria
from .pricing import price_range_matches

logger = logging.getLogger(__name__)


def _matches_categories(selected: Set[str], food: Food) -> bool:
    # AND semantics: the food must carry every selected tag
    return not selected or selected <= food.category_tags


def _food_matches(food: Food, tenant: Tenant, term: str, criteria: FilterCriteria) -> bool:
    if term and term not in food.name.lower() and term not in tenant.name.lower():
        return False
    return (
        _matches_categories(criteria.food_types, food)
        and _matches_categories(criteria.cooking_styles, food)
        and _matches_categories(criteria.taste_types, food)
    )


def evaluate(
    catalog: Catalog,
    criteria: FilterCriteria,
    profile: PreferenceProfile,
    now: datetime | time,
) -> CategorizedResult:
    """
    Compute the visible / hidden tenants and foods for *criteria*.

    Pure function of its arguments: nothing is cached between calls and the
    catalog, criteria and profile are never modified. *now* is only read by
    the open-now filter.
    """
    ignored = profile.get_ignored_categories()
    term = criteria.search_term.lower()
    filtering = criteria.is_filtering

    # --- Effective canteen filter ---
    nearest_name: str | None = None
    unresolved = False
    if criteria.nearest:
        nearest = resolve_nearest_canteen(catalog.canteens, criteria.user_location)
        if nearest is not None:
            nearest_name = nearest.name
            effective_canteens = {nearest.name}
        else:
            unresolved = True
            effective_canteens = set()
    else:
        effective_canteens = set(criteria.canteen_names)

    if unresolved:
        candidates: list[Tenant] = []
    elif effective_canteens:
        candidates = [
            t for t in catalog.tenants
            if catalog.canteen_name_for(t) in effective_canteens
        ]
    else:
        candidates = list(catalog.tenants)

    # --- Hard filters ---
    if criteria.open_now:
        candidates = [t for t in candidates if is_open_now(t.operational_hours, now)]

    if criteria.price_filter_active:
        candidates = [
            t for t in candidates
            if price_range_matches(t.price_range, criteria.price_min, criteria.price_max)
        ]

    # --- Preference visibility & food matching ---
    visible: dict[str, Tenant] = {}
    foods_by_tenant: dict[str, list[Food]] = {}
    hidden_tenant_names: set[str] = set()
    hidden_food_names: set[str] = set()

    for tenant in candidates:
        foods = catalog.foods_for(tenant)

        if is_tenant_hidden(tenant, foods, ignored):
            if filtering:
                hidden_tenant_names.add(tenant.name)
            continue

        if not filtering:
            # Browse state: tenant list only, foods left unpopulated
            visible[tenant.id] = tenant
            foods_by_tenant[tenant.id] = []
            continue

        matching: list[Food] = []
        for food in foods:
            if is_food_hidden(food, ignored):
                hidden_food_names.add(food.name)
                continue
            if _food_matches(food, tenant, term, criteria):
                matching.append(food)

        if matching:
            visible[tenant.id] = tenant
            foods_by_tenant[tenant.id] = sorted(matching, key=lambda f: (f.name, f.id))
        elif term and term in tenant.name.lower() and not criteria.category_filters_active:
            # Found by tenant name alone
            visible[tenant.id] = tenant
            foods_by_tenant[tenant.id] = []

    result = CategorizedResult(
        visible_tenants=sorted(visible.values(), key=lambda t: (t.name, t.id)),
        visible_foods_by_tenant=foods_by_tenant,
        hidden_tenant_names=sorted(hidden_tenant_names),
        hidden_food_names=sorted(hidden_food_names),
        no_nearest_canteen_found=unresolved,
        nearest_canteen=nearest_name,
    )
    logger.debug(
        "Search %r: %d candidates -> %d visible, %d hidden tenants, %d hidden foods",
        criteria.search_term, len(candidates), len(result.visible_tenants),
        len(result.hidden_tenant_names), len(result.hidden_food_names),
    )
    return result


def read_catalog(load_catalog: Callable[[], Catalog]) -> Catalog:
    """Call the catalog collaborator; an empty catalog stands in when it fails."""
    try:
        return load_catalog()
    except Exception:
        logger.warning("Catalog read failed, continuing with an empty catalog", exc_info=True)
        return Catalog()


def run_search(
    load_catalog: Callable[[], Catalog],
    criteria: FilterCriteria,
    profile: PreferenceProfile,
    now: datetime | time,
) -> CategorizedResult:
    """``evaluate`` against a freshly read catalog; never raises for read failures."""
    return evaluate(read_catalog(load_catalog), criteria, profile, now)
