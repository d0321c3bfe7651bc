from __future__ import annotations

import logging
from collections.abc import Iterable, MutableMapping
from typing import Any

from ..catalog.models import Food, Tenant
from .presets import DIETARY_PRESETS, expand_selections
from .visibility import is_food_hidden, is_tenant_hidden

logger = logging.getLogger(__name__)

SELECTED_PREFERENCES_KEY = "selected_preferences"
IGNORED_CATEGORIES_KEY = "ignored_categories"


class PreferenceProfile:
    """
    Persistent dietary selections and the ignored categories derived from them.

    ``store`` is any mutable mapping of JSON-friendly values: a plain dict
    in tests, the request session in the API. The derived ignored set is kept
    next to the selections it was computed from; whenever the two disagree it
    is recomputed, so the selections stay the only source of truth.
    """

    def __init__(
        self,
        store: MutableMapping[str, Any] | None = None,
        presets: dict | None = None,
    ) -> None:
        self._store: MutableMapping[str, Any] = store if store is not None else {}
        self._presets = presets if presets is not None else DIETARY_PRESETS

    @property
    def presets(self) -> dict:
        return self._presets

    def get_selected_preferences(self) -> frozenset[str]:
        raw = self._store.get(SELECTED_PREFERENCES_KEY)
        if not raw:
            return frozenset()
        return frozenset(str(item) for item in raw)

    def save_selected_preferences(self, selections: Iterable[str]) -> frozenset[str]:
        """Store *selections* and their ignored categories in one update."""
        selected = frozenset(s for s in selections if s)
        ignored = expand_selections(selected, self._presets)
        self._store.update({
            SELECTED_PREFERENCES_KEY: sorted(selected),
            IGNORED_CATEGORIES_KEY: {
                "source": sorted(selected),
                "categories": sorted(ignored),
            },
        })
        logger.debug("Saved %d preference selections -> %d ignored", len(selected), len(ignored))
        return ignored

    def get_ignored_categories(self) -> frozenset[str]:
        selected = self.get_selected_preferences()
        cached = self._store.get(IGNORED_CATEGORIES_KEY)
        if isinstance(cached, dict) and cached.get("source") == sorted(selected):
            return frozenset(cached.get("categories", []))

        if not selected:
            if cached is not None:
                self._store.pop(IGNORED_CATEGORIES_KEY, None)
            return frozenset()

        # Missing or stale derivation
        return self.save_selected_preferences(selected)

    def clear_all_preferences(self) -> None:
        self._store.pop(SELECTED_PREFERENCES_KEY, None)
        self._store.pop(IGNORED_CATEGORIES_KEY, None)

    def is_food_hidden(self, food: Food) -> bool:
        return is_food_hidden(food, self.get_ignored_categories())

    def is_tenant_hidden(self, tenant: Tenant, foods_of_tenant: Iterable[Food]) -> bool:
        return is_tenant_hidden(tenant, foods_of_tenant, self.get_ignored_categories())
