from __future__ import annotations

import logging
import os
from datetime import datetime

from fastapi import Depends, FastAPI, HTTPException, Request
from starlette.middleware.sessions import SessionMiddleware

from .catalog.data_store import get_catalog
from .preferences.dependencies import get_preference_profile
from .preferences.models import PreferenceOptions, PreferencesRequest, PreferencesResponse
from .preferences.profile import PreferenceProfile
from .preferences.visibility import visible_tenants_in_canteen
from .search.engine import evaluate, read_catalog
from .search.history import RecentSearchHistory
from .search.models import (
    CanteenDetailResponse,
    RecentSearchRequest,
    RecentSearchResponse,
    SearchRequest,
    SearchResponse,
    SurpriseFood,
    tenant_out,
)
from .search.options import available_filter_options, preference_options
from .search.surprise import is_surprise_trigger, pick_surprise_food

logger = logging.getLogger(__name__)

_RECENT_SEARCHES_KEY = "recent_searches"

NO_SURPRISE_FOOD = SurpriseFood(
    name="No Food Found!",
    description="No suitable food items match your preferences right now.",
    categories="",
    tenant_name="System",
    canteen_name="Food Finder",
)

app = FastAPI(title="Campus Food Finder API", version="1.0.0")
app.add_middleware(
    SessionMiddleware,
    secret_key=os.environ.get("SESSION_SECRET", "food-finder-secret-change-in-production"),
)


def _history(request: Request) -> RecentSearchHistory:
    return RecentSearchHistory(request.session.get(_RECENT_SEARCHES_KEY, []))


def _save_history(request: Request, history: RecentSearchHistory) -> None:
    request.session[_RECENT_SEARCHES_KEY] = history.items


# ── Catalog endpoints ────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata")
def metadata(profile: PreferenceProfile = Depends(get_preference_profile)) -> dict:
    catalog = read_catalog(get_catalog)
    return {
        "canteens": sorted(c.name for c in catalog.canteens),
        "filter_options": available_filter_options(profile.get_ignored_categories()),
        "preference_options": preference_options(profile.presets),
    }


@app.get("/canteens/{name}", response_model=CanteenDetailResponse)
def canteen_detail(
    name: str,
    profile: PreferenceProfile = Depends(get_preference_profile),
) -> CanteenDetailResponse:
    catalog = read_catalog(get_catalog)
    canteen = catalog.canteen_named(name)
    if canteen is None:
        raise HTTPException(status_code=404, detail=f"Unknown canteen: {name}")

    tenants = visible_tenants_in_canteen(catalog, canteen, profile.get_ignored_categories())
    return CanteenDetailResponse(
        id=canteen.id,
        name=canteen.name,
        latitude=canteen.latitude,
        longitude=canteen.longitude,
        description=canteen.description,
        operational_time=canteen.operational_time,
        amenities=canteen.amenities,
        tenants=[tenant_out(t, catalog, []) for t in tenants],
    )


# ── Search endpoints ─────────────────────────────────────────────────────


@app.post("/search", response_model=SearchResponse)
def search(
    body: SearchRequest,
    profile: PreferenceProfile = Depends(get_preference_profile),
) -> SearchResponse:
    ignored = profile.get_ignored_categories()
    # Tags the user now ignores can no longer be selected in the filter sheet
    criteria = body.to_criteria().without_categories(ignored)
    now = body.now or datetime.now()

    catalog = read_catalog(get_catalog)
    result = evaluate(catalog, criteria, profile, now)
    return SearchResponse.from_result(result, catalog)


@app.get("/recent-searches", response_model=RecentSearchResponse)
def list_recent_searches(request: Request) -> RecentSearchResponse:
    return RecentSearchResponse(recent_searches=_history(request).items)


@app.post("/recent-searches", response_model=RecentSearchResponse)
def submit_search(body: RecentSearchRequest, request: Request) -> RecentSearchResponse:
    history = _history(request)
    # The trigger word unlocks the surprise pick instead of being remembered
    if is_surprise_trigger(body.term):
        return RecentSearchResponse(recent_searches=history.items, surprise_available=True)

    history.record(body.term)
    _save_history(request, history)
    return RecentSearchResponse(recent_searches=history.items)


@app.delete("/recent-searches", response_model=RecentSearchResponse)
def clear_recent_searches(request: Request) -> RecentSearchResponse:
    history = _history(request)
    history.clear()
    _save_history(request, history)
    return RecentSearchResponse(recent_searches=[])


@app.post("/surprise", response_model=SurpriseFood)
def surprise(profile: PreferenceProfile = Depends(get_preference_profile)) -> SurpriseFood:
    catalog = read_catalog(get_catalog)
    picked = pick_surprise_food(catalog, profile.get_ignored_categories())
    if picked is None:
        logger.info("No permissible food for the surprise pick")
        return NO_SURPRISE_FOOD
    return picked


# ── Preference endpoints ─────────────────────────────────────────────────


def _preferences_response(profile: PreferenceProfile) -> PreferencesResponse:
    return PreferencesResponse(
        selections=sorted(profile.get_selected_preferences()),
        ignored_categories=sorted(profile.get_ignored_categories()),
    )


@app.get("/preferences", response_model=PreferencesResponse)
def get_preferences(
    profile: PreferenceProfile = Depends(get_preference_profile),
) -> PreferencesResponse:
    return _preferences_response(profile)


@app.get("/preferences/options", response_model=PreferenceOptions)
def get_preference_options(
    profile: PreferenceProfile = Depends(get_preference_profile),
) -> PreferenceOptions:
    return PreferenceOptions(**preference_options(profile.presets))


@app.put("/preferences", response_model=PreferencesResponse)
def apply_preferences(
    body: PreferencesRequest,
    profile: PreferenceProfile = Depends(get_preference_profile),
) -> PreferencesResponse:
    profile.save_selected_preferences(body.selections)
    return _preferences_response(profile)


@app.delete("/preferences", response_model=PreferencesResponse)
def clear_preferences(
    profile: PreferenceProfile = Depends(get_preference_profile),
) -> PreferencesResponse:
    profile.clear_all_preferences()
    return _preferences_response(profile)
