from __future__ import annotations

import logging

import pandas as pd

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Canteen, Catalog, Food, Tenant

logger = logging.getLogger(__name__)

_catalog: Catalog | None = None

_TRUE_VALUES = {"true", "yes", "1", "y"}
_FALSE_VALUES = {"false", "no", "0", "n"}


def _split_list(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def _parse_flag(raw: str) -> bool | None:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


def _read_csv(path) -> pd.DataFrame:
    # Everything as text; price ranges such as "15000" must not become ints
    return pd.read_csv(path, dtype=str, keep_default_na=False)


def _load_canteens(config: CatalogConfig) -> list[Canteen]:
    df = _read_csv(config.canteens_path)
    df["latitude"] = pd.to_numeric(df["latitude"], errors="coerce")
    df["longitude"] = pd.to_numeric(df["longitude"], errors="coerce")

    invalid = df["latitude"].isna() | df["longitude"].isna()
    if invalid.any():
        logger.warning(
            "Skipping %d canteen rows without usable coordinates", int(invalid.sum())
        )
        df = df.loc[~invalid]

    return [
        Canteen(
            id=row["id"],
            name=row["name"],
            latitude=float(row["latitude"]),
            longitude=float(row["longitude"]),
            description=row.get("description", ""),
            operational_time=row.get("operational_time", ""),
            amenities=_split_list(row.get("amenities", "")),
            image=row.get("image", ""),
        )
        for _, row in df.iterrows()
    ]


def _load_tenants(config: CatalogConfig) -> list[Tenant]:
    df = _read_csv(config.tenants_path)
    return [
        Tenant(
            id=row["id"],
            name=row["name"],
            canteen_id=row.get("canteen_id") or None,
            operational_hours=row.get("operational_hours", ""),
            is_halal=_parse_flag(row.get("is_halal", "")),
            price_range=row.get("price_range", ""),
            contact_person=row.get("contact_person", ""),
            preorder_information=bool(_parse_flag(row.get("preorder_information", ""))),
            image=row.get("image", ""),
        )
        for _, row in df.iterrows()
    ]


def _load_foods(config: CatalogConfig) -> list[Food]:
    df = _read_csv(config.foods_path)
    return [
        Food(
            id=row["id"],
            name=row["name"],
            description=row.get("description", ""),
            tenant_id=row.get("tenant_id") or None,
            categories=_split_list(row.get("categories", "")),
        )
        for _, row in df.iterrows()
    ]


def load_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> Catalog:
    """
    Read the catalog CSV files into a snapshot ordered by name.

    Raises whatever pandas raises when a file is missing or unreadable;
    callers that must not fail wrap this (see ``search.engine.run_search``).
    """
    canteens = sorted(_load_canteens(config), key=lambda c: (c.name, c.id))
    tenants = sorted(_load_tenants(config), key=lambda t: (t.name, t.id))
    foods = sorted(_load_foods(config), key=lambda f: (f.name, f.id))

    logger.info(
        "Loaded catalog from %s: %d canteens, %d tenants, %d foods",
        config.data_dir, len(canteens), len(tenants), len(foods),
    )
    return Catalog(canteens=canteens, tenants=tenants, foods=foods)


def get_catalog() -> Catalog:
    """Return the in-memory catalog snapshot, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog


def clear_catalog() -> None:
    """Drop the cached snapshot so the next ``get_catalog`` re-reads the files."""
    global _catalog
    _catalog = None
