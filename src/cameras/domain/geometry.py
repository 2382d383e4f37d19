"""
Bounding-box geometry on a spherical earth.
"""
import math
from ...common.schemas import BoundingBox

EARTH_RADIUS_KM = 6371.0

# Below this cos(lat) the longitude span is treated as the whole globe
_POLE_EPSILON = 1e-6


def overlaps(a: BoundingBox, b: BoundingBox) -> bool:
    """
    True iff both boxes intersect on both axes. Open intervals: touching
    edges do not overlap.
    """
    return (
        a.west < b.east
        and a.east > b.west
        and a.south < b.north
        and a.north > b.south
    )


def contains(box: BoundingBox, lat: float, lon: float) -> bool:
    """Closed-interval point-in-box test."""
    return box.south <= lat <= box.north and box.west <= lon <= box.east


def from_center_and_radius(lat: float, lon: float, radius_km: float) -> BoundingBox:
    """
    Box approximating a circle of radius_km around (lat, lon).

    The longitude delta is inflated by 1/cos(lat) for meridian convergence.
    Near the poles the longitude span covers the whole globe.
    """
    if radius_km < 0 or not math.isfinite(radius_km):
        raise ValueError(f"radius_km must be a finite non-negative number, got {radius_km}")

    lat_delta = math.degrees(radius_km / EARTH_RADIUS_KM)
    north = min(90.0, lat + lat_delta)
    south = max(-90.0, lat - lat_delta)

    cos_lat = math.cos(math.radians(lat))
    if cos_lat < _POLE_EPSILON or lat_delta / cos_lat >= 180.0:
        return BoundingBox(north=north, south=south, east=180.0, west=-180.0)

    lon_delta = lat_delta / cos_lat
    return BoundingBox(
        north=north,
        south=south,
        east=min(180.0, lon + lon_delta),
        west=max(-180.0, lon - lon_delta),
    )


def haversine_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine great-circle distance in kilometres."""
    p1 = math.radians(lat1)
    p2 = math.radians(lat2)
    dphi = p2 - p1
    dl = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2.0) ** 2 + math.cos(p1) * math.cos(p2) * math.sin(dl / 2.0) ** 2
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))
