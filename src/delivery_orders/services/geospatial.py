"""Distance strategies between two coordinates."""

from __future__ import annotations

import math
from typing import Callable

from shapely.geometry import Point

from ..errors import InvalidCoordinates
from ..models.domain import Coordinate

EARTH_RADIUS_KM = 6371.0

DistanceStrategy = Callable[[Coordinate, Coordinate], float]


def planar_distance(origin: Coordinate, destination: Coordinate) -> float:
    """Euclidean distance in degree space; only meaningful for small separations."""

    return Point(origin.longitude, origin.latitude).distance(
        Point(destination.longitude, destination.latitude)
    )


def haversine_km(origin: Coordinate, destination: Coordinate) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(origin.latitude), math.radians(destination.latitude)
    d_phi = math.radians(destination.latitude - origin.latitude)
    d_lambda = math.radians(destination.longitude - origin.longitude)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def get_distance_strategy(name: str) -> DistanceStrategy:
    match name:
        case "planar":
            return planar_distance
        case "haversine":
            return haversine_km
        case _:
            raise ValueError(f"Unknown distance strategy '{name}'.")


def compute_distance(
    origin: Coordinate,
    destination: Coordinate,
    strategy: DistanceStrategy = planar_distance,
) -> float:
    """Run ``strategy`` and reject non-finite input or output."""

    components = (origin.latitude, origin.longitude, destination.latitude, destination.longitude)
    if not all(math.isfinite(value) for value in components):
        raise InvalidCoordinates()

    distance = strategy(origin, destination)
    if not math.isfinite(distance) or distance < 0:
        raise InvalidCoordinates()
    return distance
