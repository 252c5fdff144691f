from __future__ import annotations

from typing import Optional

from ..core.exceptions import ValidationError
from ..shared.geo_location import GeoLocation


def validate_coordinates(longitude, latitude) -> tuple[Optional[float], Optional[float]]:
    """Both or neither; a given pair must be in range.

    Range checks are delegated to ``GeoLocation`` so the rule lives in one place.
    """
    if longitude is None and latitude is None:
        return None, None
    if (longitude is None) != (latitude is None):
        raise ValidationError("Both longitude and latitude must be provided together")

    geo = GeoLocation.build(longitude=longitude, latitude=latitude)
    return geo.longitude, geo.latitude
