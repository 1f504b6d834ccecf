"""
Constants declarations for greatcircle
"""

# Mean Earth Radius (meters)
EARTH_RADIUS_METERS = 6_371_000.0

# Linear unit conversions
METERS_PER_KILOMETER = 1000.0
METERS_PER_MILE = 1609.344  # International mile
