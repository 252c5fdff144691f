"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EARTH_RADIUS_KM = 6371.0

# ~55 meters
MAX_DISTANCE_KM = 0.055

NAME_MAX_LENGTH = 200
