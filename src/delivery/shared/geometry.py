"""Coordinate value object and the plane geometry used for zones and tracking.

Coordinates are treated as points on a flat plane: distances are Euclidean
over (latitude, longitude) and routes are straight segments. Delivery zone
radii are expressed in the same unit as ``distance``.
"""

import math

from protean.fields import Float

from delivery.domain import delivery


@delivery.value_object
class Coordinate:
    """A point given by latitude and longitude."""

    latitude = Float(required=True)
    longitude = Float(required=True)

    def as_tuple(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)


def distance(a: Coordinate, b: Coordinate) -> float:
    """Planar Euclidean distance between two coordinates."""
    return math.hypot(b.latitude - a.latitude, b.longitude - a.longitude)


def linear_interpolation(start: float, end: float, fraction: float) -> float:
    """Value ``fraction`` of the way from ``start`` to ``end``.

    ``fraction == 0`` yields ``start`` and ``fraction == 1`` yields ``end``
    exactly, with no floating point drift at either end.
    """
    if fraction == 1:
        return end
    return start + fraction * (end - start)


def interpolate(start: Coordinate, end: Coordinate, fraction: float) -> Coordinate:
    """Point ``fraction`` of the way along the segment from ``start`` to ``end``."""
    if not 0.0 <= fraction <= 1.0:
        raise ValueError(f"Interpolation fraction must be within [0, 1], got {fraction}")
    return Coordinate(
        latitude=linear_interpolation(start.latitude, end.latitude, fraction),
        longitude=linear_interpolation(start.longitude, end.longitude, fraction),
    )
