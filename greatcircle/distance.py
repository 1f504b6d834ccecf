"""
Great-circle distance on a sphere, via the haversine formula.
"""

__all__ = ['Distance', 'haversine_central_angle', 'haversine_distance']

import math
import numbers
from typing import Any, Union

from greatcircle._const import EARTH_RADIUS_METERS, METERS_PER_KILOMETER, METERS_PER_MILE
from greatcircle.coordinates import Coordinate
from greatcircle.exceptions import InvalidRadius
from greatcircle.utils.logging import LOGGER


def _as_radius(value: Any) -> float:
    """Validates a sphere radius and returns it as a float"""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidRadius(f'Radius must be a real number of meters; received {value!r}')

    radius = float(value)
    if not math.isfinite(radius) or radius <= 0:
        raise InvalidRadius(f'Radius must be finite and greater than zero; received {value!r}')

    return radius


def haversine_central_angle(coord1: Any, coord2: Any) -> float:
    """
    Calculate the central angle between two points, using the haversine formula.

    Args:
        coord1:
            The first point, as a Coordinate or a (latitude, longitude) pair

        coord2:
            The second point, as a Coordinate or a (latitude, longitude) pair

    Returns:
        The angle in radians, within [0, pi]
    """
    coord1, coord2 = Coordinate.from_pair(coord1), Coordinate.from_pair(coord2)
    lat1, lon1 = coord1.latitude_radians, coord1.longitude_radians
    lat2, lon2 = coord2.latitude_radians, coord2.longitude_radians

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
    root = math.sqrt(a)

    # Rounding can push near-antipodal points just past asin's domain
    if not -1. <= root <= 1.:
        LOGGER.debug('Clamping haversine term %r to [-1, 1]', root)
        root = max(-1., min(1., root))

    return 2 * math.asin(root)


def haversine_distance(coord1: Any, coord2: Any, radius: float = EARTH_RADIUS_METERS) -> float:
    """Calculate the great-circle distance between two points, in meters."""
    return haversine_central_angle(coord1, coord2) * _as_radius(radius)


class Distance:
    """
    The great-circle distance between two points on a sphere.

    Usage example, determining the distance from Land's End to John O'Groats:

        Distance.create((50.0657, 5.7132), (58.6373, 3.0689)).meters()  # 968205.897...
        Distance.create((50.0657, 5.7132), (58.6373, 3.0689)).miles()  # 601.615...

    Args:
        start:
            The origin, as a Coordinate or a (latitude, longitude) pair in degrees

        end:
            The destination, as a Coordinate or a (latitude, longitude) pair in degrees

        radius:
            (Default 6,371,000) The radius of the sphere in meters; defaults to
            the mean radius of the Earth

    Raises:
        InvalidCoordinate: if either point is malformed or out of range
        InvalidRadius: if the radius is not a positive, finite number
    """

    __slots__ = ('_start', '_end', '_radius')

    def __init__(
        self,
        start: Union[Coordinate, Any],
        end: Union[Coordinate, Any],
        radius: float = EARTH_RADIUS_METERS,
    ):
        self._start = Coordinate.from_pair(start)
        self._end = Coordinate.from_pair(end)
        self._radius = _as_radius(radius)

    def __eq__(self, other):
        if not isinstance(other, Distance):
            return False

        return (
            self.start == other.start and
            self.end == other.end and
            self.radius == other.radius
        )

    def __hash__(self):
        return hash((self.start, self.end, self.radius))

    def __repr__(self):
        return f'<Distance({self.start!r} -> {self.end!r}, radius={self.radius})>'

    @classmethod
    def create(
        cls,
        start: Union[Coordinate, Any],
        end: Union[Coordinate, Any],
        radius: float = EARTH_RADIUS_METERS,
    ) -> 'Distance':
        """Creates a Distance between two points; see the class docstring for arguments."""
        return cls(start, end, radius)

    @property
    def start(self) -> Coordinate:
        return self._start

    @property
    def end(self) -> Coordinate:
        return self._end

    @property
    def radius(self) -> float:
        """The radius of the sphere, in meters"""
        return self._radius

    @property
    def latitude_from(self) -> float:
        """The origin latitude, in radians"""
        return self._start.latitude_radians

    @property
    def longitude_from(self) -> float:
        """The origin longitude, in radians"""
        return self._start.longitude_radians

    @property
    def latitude_to(self) -> float:
        """The destination latitude, in radians"""
        return self._end.latitude_radians

    @property
    def longitude_to(self) -> float:
        """The destination longitude, in radians"""
        return self._end.longitude_radians

    def central_angle(self) -> float:
        """
        The angle between the two points as seen from the center of the sphere.

        Returns:
            float, in radians within [0, pi]
        """
        return haversine_central_angle(self._start, self._end)

    def meters(self) -> float:
        return self.central_angle() * self._radius

    def kilometers(self) -> float:
        return self.meters() / METERS_PER_KILOMETER

    def miles(self) -> float:
        return self.meters() / METERS_PER_MILE
