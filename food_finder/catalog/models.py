from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator


class FoodCategory(str, Enum):
    spicy = "Spicy"
    soup = "Soup"
    roasted = "Roasted"
    savory = "Savory"
    sweet = "Sweet"
    meat = "Meat"
    vegetables = "Vegetables"
    rice = "Rice"
    seafood = "Seafood"
    fried = "Fried"
    chicken = "Chicken"
    eggs = "Eggs"
    nuts = "Nuts"
    pork_and_lard = "Pork and Lard"
    fish = "Fish"
    soy = "Soy"
    mushroom = "Mushroom"
    steamed = "Steamed"
    gluten = "Gluten"
    sour = "Sour"
    snacks = "Snacks"
    unknown = "Unknown"

    @classmethod
    def parse(cls, value: Any) -> FoodCategory:
        """Map a raw tag to a category, case-insensitively; ``unknown`` otherwise."""
        if isinstance(value, cls):
            return value
        raw = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == raw:
                return member
        return cls.unknown


def canonical_tag(value: str) -> str:
    """Return the canonical spelling of a category tag, or the tag unchanged."""
    category = FoodCategory.parse(value)
    if category is FoodCategory.unknown and value.strip().lower() != "unknown":
        return value
    return category.value


class Canteen(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)
    description: str = ""
    operational_time: str = ""
    amenities: list[str] = Field(default_factory=list)
    image: str = ""


class Tenant(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    canteen_id: str | None = None
    operational_hours: str = ""
    is_halal: bool | None = None
    price_range: str = ""
    contact_person: str = ""
    preorder_information: bool = False
    image: str = ""


class Food(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    tenant_id: str | None = None
    categories: list[FoodCategory] = Field(default_factory=list)

    @field_validator("categories", mode="before")
    @classmethod
    def _parse_categories(cls, value: Any) -> list[FoodCategory]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [v for v in value.split(",") if v.strip()]
        # Ordered set: first occurrence wins
        seen: list[FoodCategory] = []
        for item in value:
            category = FoodCategory.parse(item)
            if category not in seen:
                seen.append(category)
        return seen

    @property
    def category_tags(self) -> frozenset[str]:
        return frozenset(c.value for c in self.categories)


class Catalog(BaseModel):
    """Read-only snapshot of every canteen, tenant and food."""

    model_config = ConfigDict(frozen=True)

    canteens: list[Canteen] = Field(default_factory=list)
    tenants: list[Tenant] = Field(default_factory=list)
    foods: list[Food] = Field(default_factory=list)

    _canteens_by_id: dict[str, Canteen] = PrivateAttr(default_factory=dict)
    _tenants_by_id: dict[str, Tenant] = PrivateAttr(default_factory=dict)
    _foods_by_tenant: dict[str, list[Food]] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        self._canteens_by_id = {c.id: c for c in self.canteens}
        self._tenants_by_id = {t.id: t for t in self.tenants}
        foods_by_tenant: dict[str, list[Food]] = {}
        for food in self.foods:
            if food.tenant_id is not None:
                foods_by_tenant.setdefault(food.tenant_id, []).append(food)
        self._foods_by_tenant = foods_by_tenant

    def canteen_for(self, tenant: Tenant) -> Canteen | None:
        if tenant.canteen_id is None:
            return None
        return self._canteens_by_id.get(tenant.canteen_id)

    def canteen_name_for(self, tenant: Tenant) -> str | None:
        canteen = self.canteen_for(tenant)
        return canteen.name if canteen else None

    def tenant_for(self, food: Food) -> Tenant | None:
        if food.tenant_id is None:
            return None
        return self._tenants_by_id.get(food.tenant_id)

    def foods_for(self, tenant: Tenant) -> list[Food]:
        """Foods of *tenant* in catalog order."""
        return list(self._foods_by_tenant.get(tenant.id, []))

    def tenants_in(self, canteen: Canteen) -> list[Tenant]:
        return [t for t in self.tenants if t.canteen_id == canteen.id]

    def canteen_named(self, name: str) -> Canteen | None:
        for canteen in self.canteens:
            if canteen.name == name:
                return canteen
        return None
