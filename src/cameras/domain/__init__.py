"""
Domain module initialization.
"""
from .geometry import (
    EARTH_RADIUS_KM,
    overlaps,
    contains,
    from_center_and_radius,
    haversine_distance_km
)
from .regions import CALTRANS_DISTRICTS, regions_for_bbox, find_region
from .categories import infer_categories
from .protocols import CameraProvider, FeedClient
