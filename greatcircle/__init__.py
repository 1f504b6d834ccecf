
from greatcircle._version import __version__  # noqa: F401
from greatcircle.utils.logging import LOGGER
from greatcircle.coordinates import Coordinate
from greatcircle.distance import Distance, haversine_central_angle, haversine_distance
from greatcircle.exceptions import InvalidCoordinate, InvalidRadius


__all__ = [
    'Coordinate',
    'Distance',
    'InvalidCoordinate',
    'InvalidRadius',
    'haversine_central_angle',
    'haversine_distance',
    'LOGGER',
]
