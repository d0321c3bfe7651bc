from __future__ import annotations

from ..catalog.models import FoodCategory, canonical_tag

# Named bundles a user can pick instead of selecting every category by hand.
DIETARY_PRESETS: dict[str, tuple[FoodCategory, ...]] = {
    "Ahimsa": (
        FoodCategory.meat,
        FoodCategory.chicken,
        FoodCategory.fish,
        FoodCategory.seafood,
        FoodCategory.eggs,
    ),
    "Treif": (FoodCategory.fish, FoodCategory.seafood),
    "Pescatarian": (FoodCategory.meat, FoodCategory.chicken),
    "GERD-Triggers": (FoodCategory.spicy, FoodCategory.fried, FoodCategory.sour),
}


def expand_selections(
    selections: set[str] | frozenset[str],
    presets: dict[str, tuple[FoodCategory, ...]] = DIETARY_PRESETS,
) -> frozenset[str]:
    """Flatten preset names and raw category tags into the ignored-category set."""
    ignored: set[str] = set()
    for selection in selections:
        preset = presets.get(selection)
        if preset is not None:
            ignored.update(category.value for category in preset)
        else:
            ignored.add(canonical_tag(selection))
    return frozenset(ignored)
