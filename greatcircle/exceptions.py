"""Exceptions raised for invalid distance inputs"""

__all__ = ['InvalidCoordinate', 'InvalidRadius']


class InvalidCoordinate(ValueError):
    """A coordinate is not a pair of finite, in-range (latitude, longitude) degrees."""


class InvalidRadius(ValueError):
    """A sphere radius is not a finite, positive number of meters."""
