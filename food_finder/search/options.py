from __future__ import annotations

from collections.abc import Set

from ..catalog.models import FoodCategory
from ..preferences.presets import DIETARY_PRESETS

FOOD_TYPE_CATEGORIES: tuple[FoodCategory, ...] = (
    FoodCategory.fish,
    FoodCategory.mushroom,
    FoodCategory.soy,
    FoodCategory.gluten,
    FoodCategory.chicken,
    FoodCategory.rice,
    FoodCategory.seafood,
    FoodCategory.snacks,
    FoodCategory.meat,
    FoodCategory.vegetables,
    FoodCategory.eggs,
    FoodCategory.nuts,
    FoodCategory.pork_and_lard,
)
COOKING_STYLE_CATEGORIES: tuple[FoodCategory, ...] = (
    FoodCategory.soup,
    FoodCategory.fried,
    FoodCategory.steamed,
    FoodCategory.roasted,
)
TASTE_TYPE_CATEGORIES: tuple[FoodCategory, ...] = (
    FoodCategory.sour,
    FoodCategory.spicy,
    FoodCategory.sweet,
    FoodCategory.savory,
)

FILTER_GROUPS: dict[str, tuple[FoodCategory, ...]] = {
    "food_types": FOOD_TYPE_CATEGORIES,
    "cooking_styles": COOKING_STYLE_CATEGORIES,
    "taste_types": TASTE_TYPE_CATEGORIES,
}


def available_filter_options(ignored_categories: Set[str]) -> dict[str, list[str]]:
    """Filter-sheet chips per group, sorted, without the categories already ignored."""
    return {
        group: sorted(c.value for c in categories if c.value not in ignored_categories)
        for group, categories in FILTER_GROUPS.items()
    }


def preference_options(presets: dict = DIETARY_PRESETS) -> dict:
    categories = {c.value for group in FILTER_GROUPS.values() for c in group}
    return {
        "presets": {name: [c.value for c in cats] for name, cats in presets.items()},
        "preset_names": sorted(presets),
        "categories": sorted(categories),
    }
