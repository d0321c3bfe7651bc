from __future__ import annotations

from collections.abc import Set
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from ..catalog.models import Catalog, Food, Tenant, canonical_tag


class Coordinate(BaseModel):
    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)


class LocationAuthState(str, Enum):
    not_determined = "not_determined"
    authorized = "authorized"
    denied = "denied"
    restricted = "restricted"


class FilterCriteria(BaseModel):
    search_term: str = ""
    price_min: int | None = Field(default=None, ge=0)
    price_max: int | None = Field(default=None, ge=0)
    food_types: set[str] = Field(default_factory=set)
    cooking_styles: set[str] = Field(default_factory=set)
    taste_types: set[str] = Field(default_factory=set)
    canteen_names: set[str] = Field(default_factory=set)
    nearest: bool = False
    open_now: bool = False
    user_location: Coordinate | None = None
    location_auth: LocationAuthState = LocationAuthState.not_determined

    @field_validator("food_types", "cooking_styles", "taste_types", mode="after")
    @classmethod
    def _canonical_tags(cls, value: set[str]) -> set[str]:
        return {canonical_tag(tag) for tag in value if tag.strip()}

    @property
    def price_filter_active(self) -> bool:
        return self.price_min is not None or self.price_max is not None

    @property
    def category_filters_active(self) -> bool:
        return bool(self.food_types or self.cooking_styles or self.taste_types)

    @property
    def modal_filters_active(self) -> bool:
        """Filters set from the filter sheet: price, categories, canteens."""
        return (
            self.price_filter_active
            or self.category_filters_active
            or bool(self.canteen_names)
        )

    @property
    def structured_filters_active(self) -> bool:
        return self.modal_filters_active or self.nearest or self.open_now

    @property
    def is_filtering(self) -> bool:
        """False only in the browse state: no text and no structured filter."""
        return bool(self.search_term) or self.structured_filters_active

    def cleared(self) -> FilterCriteria:
        """Reset the filter-sheet criteria; keep text, toggles and location."""
        return self.model_copy(update={
            "price_min": None,
            "price_max": None,
            "food_types": set(),
            "cooking_styles": set(),
            "taste_types": set(),
            "canteen_names": set(),
        })

    def without_categories(self, ignored_categories: Set[str]) -> FilterCriteria:
        """Drop selected tags the user now ignores through preferences."""
        return self.model_copy(update={
            "food_types": {t for t in self.food_types if t not in ignored_categories},
            "cooking_styles": {t for t in self.cooking_styles if t not in ignored_categories},
            "taste_types": {t for t in self.taste_types if t not in ignored_categories},
        })


class CategorizedResult(BaseModel):
    visible_tenants: list[Tenant] = Field(default_factory=list)
    visible_foods_by_tenant: dict[str, list[Food]] = Field(default_factory=dict)
    hidden_tenant_names: list[str] = Field(default_factory=list)
    hidden_food_names: list[str] = Field(default_factory=list)
    no_nearest_canteen_found: bool = False
    nearest_canteen: str | None = None

    def foods_for(self, tenant: Tenant) -> list[Food]:
        return self.visible_foods_by_tenant.get(tenant.id, [])


# ── API payloads ─────────────────────────────────────────────────────────


class SearchRequest(FilterCriteria):
    now: datetime | None = Field(
        default=None,
        description="Evaluation instant for the open-now filter; defaults to the server clock",
    )

    def to_criteria(self) -> FilterCriteria:
        return FilterCriteria(**self.model_dump(exclude={"now"}))


class FoodOut(BaseModel):
    id: str
    name: str
    description: str
    categories: list[str]


class TenantOut(BaseModel):
    id: str
    name: str
    canteen_name: str | None
    operational_hours: str
    is_halal: bool | None
    price_range: str
    foods: list[FoodOut]


def tenant_out(tenant: Tenant, catalog: Catalog, foods: list[Food]) -> TenantOut:
    return TenantOut(
        id=tenant.id,
        name=tenant.name,
        canteen_name=catalog.canteen_name_for(tenant),
        operational_hours=tenant.operational_hours,
        is_halal=tenant.is_halal,
        price_range=tenant.price_range,
        foods=[
            FoodOut(
                id=food.id,
                name=food.name,
                description=food.description,
                categories=[c.value for c in food.categories],
            )
            for food in foods
        ],
    )


class SearchResponse(BaseModel):
    tenants: list[TenantOut]
    hidden_tenant_names: list[str]
    hidden_food_names: list[str]
    no_nearest_canteen_found: bool
    nearest_canteen: str | None = None

    @classmethod
    def from_result(cls, result: CategorizedResult, catalog: Catalog) -> SearchResponse:
        tenants = [
            tenant_out(tenant, catalog, result.foods_for(tenant))
            for tenant in result.visible_tenants
        ]
        return cls(
            tenants=tenants,
            hidden_tenant_names=result.hidden_tenant_names,
            hidden_food_names=result.hidden_food_names,
            no_nearest_canteen_found=result.no_nearest_canteen_found,
            nearest_canteen=result.nearest_canteen,
        )


class RecentSearchRequest(BaseModel):
    term: str = Field(..., max_length=200)


class RecentSearchResponse(BaseModel):
    recent_searches: list[str]
    surprise_available: bool = False


class SurpriseFood(BaseModel):
    name: str
    description: str
    categories: str
    tenant_name: str
    canteen_name: str


class CanteenDetailResponse(BaseModel):
    id: str
    name: str
    latitude: float
    longitude: float
    description: str
    operational_time: str
    amenities: list[str]
    tenants: list[TenantOut]
