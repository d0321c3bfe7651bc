from food_finder.preferences.presets import DIETARY_PRESETS, expand_selections
from food_finder.preferences.profile import (
    IGNORED_CATEGORIES_KEY,
    SELECTED_PREFERENCES_KEY,
    PreferenceProfile,
)


def test_empty_store_has_no_ignored_categories():
    profile = PreferenceProfile()
    assert profile.get_selected_preferences() == frozenset()
    assert profile.get_ignored_categories() == frozenset()


def test_preset_expands_to_its_categories():
    assert expand_selections({"Ahimsa"}) == {"Meat", "Chicken", "Fish", "Seafood", "Eggs"}


def test_raw_categories_pass_through_canonicalised():
    assert expand_selections({"nuts", "Pork and Lard"}) == {"Nuts", "Pork and Lard"}


def test_presets_and_categories_are_unioned():
    ignored = expand_selections({"Treif", "Pescatarian", "Soy"})
    assert ignored == {"Fish", "Seafood", "Meat", "Chicken", "Soy"}


def test_all_presets_defined():
    assert set(DIETARY_PRESETS) == {"Ahimsa", "Treif", "Pescatarian", "GERD-Triggers"}


def test_save_writes_selections_and_derivation_together():
    store: dict = {}
    profile = PreferenceProfile(store)
    ignored = profile.save_selected_preferences({"GERD-Triggers"})

    assert ignored == {"Spicy", "Fried", "Sour"}
    assert store[SELECTED_PREFERENCES_KEY] == ["GERD-Triggers"]
    assert store[IGNORED_CATEGORIES_KEY]["source"] == ["GERD-Triggers"]
    assert sorted(store[IGNORED_CATEGORIES_KEY]["categories"]) == ["Fried", "Sour", "Spicy"]


def test_missing_derivation_is_recomputed_and_cached():
    store = {SELECTED_PREFERENCES_KEY: ["Treif"]}
    profile = PreferenceProfile(store)

    assert profile.get_ignored_categories() == {"Fish", "Seafood"}
    assert IGNORED_CATEGORIES_KEY in store


def test_stale_derivation_is_not_trusted():
    store = {
        SELECTED_PREFERENCES_KEY: ["Pescatarian"],
        IGNORED_CATEGORIES_KEY: {"source": ["Treif"], "categories": ["Fish", "Seafood"]},
    }
    profile = PreferenceProfile(store)
    assert profile.get_ignored_categories() == {"Meat", "Chicken"}


def test_clear_erases_both():
    store: dict = {}
    profile = PreferenceProfile(store)
    profile.save_selected_preferences({"Ahimsa"})
    profile.clear_all_preferences()

    assert store == {}
    assert profile.get_ignored_categories() == frozenset()


def test_profiles_are_independent():
    a = PreferenceProfile()
    b = PreferenceProfile()
    a.save_selected_preferences({"Chicken"})
    assert b.get_ignored_categories() == frozenset()
