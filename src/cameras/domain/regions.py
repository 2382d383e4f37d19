"""
Static region partition tables used for coarse spatial selection.
"""
from typing import Iterable, List, Optional
from ...common.schemas import BoundingBox, RegionPartition
from .geometry import overlaps


def _region(region_id: int, north: float, south: float, west: float, east: float, name: str) -> RegionPartition:
    return RegionPartition(
        region_id=region_id,
        bbox=BoundingBox(north=north, south=south, west=west, east=east),
        name=name,
    )


# Approximate extents of the Caltrans districts
CALTRANS_DISTRICTS: List[RegionPartition] = [
    _region(1, 42.01, 39.00, -124.50, -122.50, "Eureka"),
    _region(2, 42.01, 39.80, -122.80, -119.90, "Redding"),
    _region(3, 40.00, 38.00, -123.00, -120.00, "Marysville"),
    _region(4, 38.90, 36.90, -123.60, -121.20, "Bay Area"),
    _region(5, 36.90, 34.40, -122.00, -119.30, "San Luis Obispo"),
    _region(6, 38.00, 35.00, -121.00, -117.60, "Fresno"),
    _region(7, 34.80, 33.40, -119.00, -117.60, "Los Angeles"),
    _region(8, 34.80, 33.40, -117.70, -114.40, "San Bernardino"),
    _region(9, 38.00, 35.50, -118.50, -115.80, "Bishop"),
    _region(10, 38.60, 36.80, -122.00, -119.50, "Stockton"),
    _region(11, 33.50, 32.50, -117.40, -116.10, "San Diego"),
    _region(12, 33.90, 33.40, -118.00, -117.40, "Orange County"),
]


def regions_for_bbox(table: Iterable[RegionPartition], bbox: Optional[BoundingBox]) -> List[int]:
    """
    Region ids whose extent could hold a match for bbox, in table order.
    Every region when bbox is None.
    """
    if bbox is None:
        return [r.region_id for r in table]
    return [r.region_id for r in table if overlaps(bbox, r.bbox)]


def find_region(table: Iterable[RegionPartition], region_id: int) -> Optional[RegionPartition]:
    for region in table:
        if region.region_id == region_id:
            return region
    return None
