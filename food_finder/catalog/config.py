from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def _data_dir_from_env() -> Path:
    raw = os.getenv("FOOD_FINDER_DATA_DIR", "")
    return Path(raw) if raw else _BUNDLED_DATA_DIR


@dataclass(frozen=True)
class CatalogConfig:
    """
    Location of the catalog CSV files.
    """

    data_dir: Path = field(default_factory=_data_dir_from_env)
    canteens_filename: str = "canteens.csv"
    tenants_filename: str = "tenants.csv"
    foods_filename: str = "foods.csv"

    @property
    def canteens_path(self) -> Path:
        return self.data_dir / self.canteens_filename

    @property
    def tenants_path(self) -> Path:
        return self.data_dir / self.tenants_filename

    @property
    def foods_path(self) -> Path:
        return self.data_dir / self.foods_filename


DEFAULT_CATALOG_CONFIG = CatalogConfig()
