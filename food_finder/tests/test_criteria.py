import pytest
from pydantic import ValidationError

from food_finder.search.models import Coordinate, FilterCriteria, SearchRequest


def test_default_is_browse_state():
    criteria = FilterCriteria()
    assert not criteria.is_filtering
    assert not criteria.structured_filters_active


@pytest.mark.parametrize(
    "kwargs",
    [
        {"search_term": "soto"},
        {"price_min": 0},
        {"food_types": {"Rice"}},
        {"canteen_names": {"Green Eatery"}},
        {"nearest": True},
        {"open_now": True},
    ],
)
def test_any_filter_leaves_browse_state(kwargs):
    assert FilterCriteria(**kwargs).is_filtering


def test_tags_are_canonicalised():
    criteria = FilterCriteria(food_types={"rice", " "}, taste_types={"SPICY", "Umami"})
    assert criteria.food_types == {"Rice"}
    assert criteria.taste_types == {"Spicy", "Umami"}


def test_cleared_keeps_text_toggles_and_location():
    location = Coordinate(latitude=-6.3, longitude=106.65)
    criteria = FilterCriteria(
        search_term="bakso",
        price_min=10000,
        price_max=20000,
        food_types={"Meat"},
        cooking_styles={"Soup"},
        taste_types={"Savory"},
        canteen_names={"GOP 1 Canteen"},
        nearest=True,
        open_now=True,
        user_location=location,
    )
    cleared = criteria.cleared()
    assert not cleared.modal_filters_active
    assert cleared.search_term == "bakso"
    assert cleared.nearest and cleared.open_now
    assert cleared.user_location == location
    # Input criteria untouched
    assert criteria.food_types == {"Meat"}


def test_without_categories():
    criteria = FilterCriteria(food_types={"Fish", "Rice"}, cooking_styles={"Fried"})
    pruned = criteria.without_categories({"Fish", "Fried"})
    assert pruned.food_types == {"Rice"}
    assert pruned.cooking_styles == set()
    assert criteria.food_types == {"Fish", "Rice"}


def test_invalid_coordinate_rejected():
    with pytest.raises(ValidationError):
        Coordinate(latitude=91, longitude=0)


def test_search_request_drops_now():
    request = SearchRequest(search_term="nasi", now="2026-10-16T12:00:00")
    criteria = request.to_criteria()
    assert type(criteria) is FilterCriteria
    assert criteria.search_term == "nasi"
