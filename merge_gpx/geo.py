import math
from typing import NamedTuple


EARTH_RADIUS = 6_371_000  # meters
DEGREE_TO_METERS = 1000 * 10000 / 90
MILES_PER_KM = 0.621371
SECONDS_PER_HOUR = 3600


class GeoPoint(NamedTuple):
    """Latitude/longitude pair in degrees."""

    latitude: float
    longitude: float

    @classmethod
    def of(cls, point):
        """Build from anything with latitude/longitude attributes (e.g. a gpxpy point)."""
        return cls(float(point.latitude), float(point.longitude))

    def is_between(self, a, b):
        """True if our latitude or our longitude falls within the range spanned by a and b.

        This is a loose bounding check on either axis, not a test that we lie
        on the segment a-b.
        """
        return (
            min(a.latitude, b.latitude) <= self.latitude <= max(a.latitude, b.latitude)
            or min(a.longitude, b.longitude) <= self.longitude <= max(a.longitude, b.longitude)
        )


def haversine(a, b):
    """Great-circle distance in meters between two points."""
    rlat1, rlat2 = math.radians(a.latitude), math.radians(b.latitude)
    dlat = math.radians(b.latitude - a.latitude)
    dlon = math.radians(b.longitude - a.longitude)
    h = math.sin(dlat / 2) ** 2 + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def linear_distance(a, b):
    """Flat-plane distance in meters, treating degrees as a Euclidean grid.

    Only good for rough comparisons against haversine().
    """
    return DEGREE_TO_METERS * math.hypot(b.latitude - a.latitude, b.longitude - a.longitude)


DISTANCE_MODELS = {
    "haversine": haversine,
    "linear": linear_distance,
}


def speed_mph(meters, seconds=1.0):
    """Speed in miles per hour for a distance covered in the given time."""
    return (meters / 1000) * MILES_PER_KM * SECONDS_PER_HOUR / seconds
