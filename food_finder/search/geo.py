from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from sklearn.metrics.pairwise import haversine_distances

from ..catalog.models import Canteen
from .models import Coordinate

EARTH_RADIUS_M = 6_371_008.8


def distances_from(canteens: Sequence[Canteen], location: Coordinate) -> np.ndarray:
    """Great-circle distance in metres from *location* to each canteen."""
    if not canteens:
        return np.zeros(0)
    origin = np.radians([[location.latitude, location.longitude]])
    points = np.radians([[c.latitude, c.longitude] for c in canteens])
    return haversine_distances(origin, points).flatten() * EARTH_RADIUS_M


def resolve_nearest_canteen(
    canteens: Sequence[Canteen],
    location: Coordinate | None,
) -> Canteen | None:
    """
    Return the canteen closest to *location*.

    Ties go to the first canteen in iteration order. None when there is no
    location or no canteen.
    """
    if location is None or not canteens:
        return None
    distances = distances_from(canteens, location)
    # argmin returns the first index among equal minima
    return canteens[int(np.argmin(distances))]
