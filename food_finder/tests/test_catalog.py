from __future__ import annotations

import pytest

from food_finder.catalog import data_store
from food_finder.catalog.config import CatalogConfig
from food_finder.catalog.data_store import load_catalog
from food_finder.catalog.models import Food, FoodCategory, canonical_tag


@pytest.fixture(scope="module")
def bundled():
    return load_catalog()


class TestBundledCatalog:
    def test_counts(self, bundled):
        assert len(bundled.canteens) == 4
        assert len(bundled.tenants) == 13
        assert len(bundled.foods) > 0

    def test_sorted_by_name(self, bundled):
        names = [t.name for t in bundled.tenants]
        assert names == sorted(names)
        assert [c.name for c in bundled.canteens] == sorted(c.name for c in bundled.canteens)

    def test_kasturi_belongs_to_green_eatery(self, bundled):
        kasturi = next(t for t in bundled.tenants if t.name == "Kasturi")
        assert bundled.canteen_name_for(kasturi) == "Green Eatery"
        assert kasturi.price_range == "13.000-20.000"
        assert kasturi.operational_hours == "09:00-14:00"
        assert kasturi.is_halal is True

    def test_kasturi_foods(self, bundled):
        kasturi = next(t for t in bundled.tenants if t.name == "Kasturi")
        foods = {f.name: f for f in bundled.foods_for(kasturi)}
        assert foods["Ayam Bakar"].category_tags == {"Chicken", "Roasted", "Sweet", "Savory"}
        assert foods["Sawi Putih"].category_tags == {"Vegetables", "Steamed", "Savory"}

    def test_every_food_has_a_tenant(self, bundled):
        assert all(bundled.tenant_for(food) is not None for food in bundled.foods)

    def test_canteen_named(self, bundled):
        assert bundled.canteen_named("GOP 1 Canteen").id == "gop-1"
        assert bundled.canteen_named("Nowhere") is None


def _write(path, text):
    path.write_text(text, encoding="utf-8")


def test_custom_data_dir(tmp_path):
    _write(tmp_path / "canteens.csv",
           "id,name,latitude,longitude\n"
           "a,Alpha,1.0,2.0\n"
           "b,Broken,,2.0\n")
    _write(tmp_path / "tenants.csv",
           "id,name,canteen_id,operational_hours,is_halal,price_range\n"
           "t1,Zeta,a,08:00-10:00,,15000\n")
    _write(tmp_path / "foods.csv",
           "id,name,description,tenant_id,categories\n"
           'f1,Tahu,,t1,"soy, FRIED, Fried, Tofu"\n')

    catalog = load_catalog(CatalogConfig(data_dir=tmp_path))

    assert [c.name for c in catalog.canteens] == ["Alpha"]
    tenant = catalog.tenants[0]
    assert tenant.price_range == "15000"
    assert tenant.is_halal is None
    food = catalog.foods[0]
    assert food.categories == [FoodCategory.soy, FoodCategory.fried, FoodCategory.unknown]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_catalog(CatalogConfig(data_dir=tmp_path))


def test_get_catalog_is_cached():
    data_store.clear_catalog()
    first = data_store.get_catalog()
    assert data_store.get_catalog() is first
    data_store.clear_catalog()
    assert data_store.get_catalog() is not first


class TestCategories:
    def test_parse_is_case_insensitive(self):
        assert FoodCategory.parse("pork and lard") is FoodCategory.pork_and_lard

    def test_unrecognised_becomes_unknown(self):
        assert FoodCategory.parse("Tofu") is FoodCategory.unknown

    def test_canonical_tag_keeps_unrecognised_tags(self):
        assert canonical_tag("spicy") == "Spicy"
        assert canonical_tag("Umami") == "Umami"

    def test_food_accepts_comma_string(self):
        food = Food(id="x", name="X", categories="Rice, Sweet,, Rice")
        assert food.categories == [FoodCategory.rice, FoodCategory.sweet]
