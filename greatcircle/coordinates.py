"""
Representation of a specific point on a sphere
"""

__all__ = ['Coordinate']

import math
import numbers
from typing import Any, Tuple, Union

import numpy as np

from greatcircle.exceptions import InvalidCoordinate
from greatcircle.utils.logging import warn_once


def _as_degrees(value: Any, name: str, bound: float) -> float:
    """Validates a single latitude/longitude component and returns it as a float"""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidCoordinate(f'{name} must be a real number; received {value!r}')

    degrees = float(value)
    if not math.isfinite(degrees):
        raise InvalidCoordinate(f'{name} must be finite; received {value!r}')

    if not -bound <= degrees <= bound:
        raise InvalidCoordinate(
            f'{name} must be within [-{bound:g}, {bound:g}] degrees; received {value!r}'
        )

    return degrees


class Coordinate:
    """Representation of a coordinate on the globe (i.e., a lat/lon pair)"""

    __slots__ = ('_latitude', '_longitude')

    def __init__(
        self,
        latitude: Union[float, int],
        longitude: Union[float, int],
    ):
        self._latitude = _as_degrees(latitude, 'Latitude', 90.)
        self._longitude = _as_degrees(longitude, 'Longitude', 180.)

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<Coordinate({self.latitude}, {self.longitude})>'

    @property
    def latitude(self) -> float:
        """The latitude, in degrees"""
        return self._latitude

    @property
    def longitude(self) -> float:
        """The longitude, in degrees"""
        return self._longitude

    @property
    def latitude_radians(self) -> float:
        return math.radians(self._latitude)

    @property
    def longitude_radians(self) -> float:
        return math.radians(self._longitude)

    @classmethod
    def from_pair(cls, pair: Any) -> 'Coordinate':
        """
        Creates a Coordinate from an ordered (latitude, longitude) pair.

        The first element is always read as the latitude and the second as the
        longitude. Any sequence or numpy array works; components beyond the
        second (e.g. an altitude) are ignored with a warning.

        Args:
            pair:
                A Coordinate (returned as-is), or a sequence of two real numbers
                in degrees.

        Returns:
            Coordinate

        Raises:
            InvalidCoordinate: if the pair does not hold two finite, in-range
                numeric components
        """
        if isinstance(pair, Coordinate):
            return pair

        values = np.asarray(pair, dtype=object)
        if values.ndim != 1 or values.size < 2:
            raise InvalidCoordinate(
                f'Coordinate must be a (latitude, longitude) pair; received {pair!r}'
            )

        if values.size > 2:
            warn_once(
                'Coordinate components beyond (latitude, longitude) are not supported '
                'and will be ignored.'
            )

        return cls(values[0], values[1])

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (longitude, latitude)

        Returns:
            Tuple of length 2
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude
