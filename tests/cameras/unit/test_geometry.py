import math
import pytest
from src.common.schemas import BoundingBox
from src.cameras.domain.geometry import (
    overlaps, contains, from_center_and_radius, haversine_distance_km
)

BAY_AREA = BoundingBox(north=38.9, south=36.9, west=-123.6, east=-121.2)

def test_overlapping_boxes():
    other = BoundingBox(north=38.0, south=37.0, west=-122.5, east=-122.0)
    assert overlaps(BAY_AREA, other)
    assert overlaps(other, BAY_AREA)

def test_disjoint_boxes():
    la = BoundingBox(north=34.8, south=33.4, west=-119.0, east=-117.6)
    assert not overlaps(BAY_AREA, la)

def test_touching_edges_do_not_overlap():
    north_neighbour = BoundingBox(north=40.0, south=38.9, west=-123.0, east=-122.0)
    east_neighbour = BoundingBox(north=38.0, south=37.0, west=-121.2, east=-120.0)
    assert not overlaps(BAY_AREA, north_neighbour)
    assert not overlaps(BAY_AREA, east_neighbour)

def test_contains_includes_boundary():
    assert contains(BAY_AREA, 37.7, -122.4)
    assert contains(BAY_AREA, 38.9, -121.2)
    assert contains(BAY_AREA, 36.9, -123.6)
    assert not contains(BAY_AREA, 34.0, -118.2)
    assert not contains(BAY_AREA, 38.90001, -122.0)

def test_from_center_and_radius_mid_latitude():
    box = from_center_and_radius(37.0, -122.0, 111.19)
    # ~1 degree of latitude
    assert box.north == pytest.approx(38.0, abs=0.01)
    assert box.south == pytest.approx(36.0, abs=0.01)
    # longitude span is inflated by 1/cos(lat)
    expected_lon = 1.0 / math.cos(math.radians(37.0))
    assert box.east - (-122.0) == pytest.approx(expected_lon, abs=0.01)
    assert (-122.0) - box.west == pytest.approx(expected_lon, abs=0.01)
    assert contains(box, 37.0, -122.0)

def test_from_center_and_radius_at_pole():
    box = from_center_and_radius(90.0, 10.0, 50.0)
    assert box.north == 90.0
    assert box.west == -180.0
    assert box.east == 180.0

def test_from_center_and_radius_near_pole_spans_all_longitudes():
    # 50 km at 89.9N is wider than the whole longitude range
    box = from_center_and_radius(89.9, 10.0, 50.0)
    assert (box.west, box.east) == (-180.0, 180.0)
    assert box.south == pytest.approx(89.45, abs=0.01)
    assert contains(box, 89.95, -170.0)

def test_from_center_and_radius_rejects_negative_radius():
    with pytest.raises(ValueError):
        from_center_and_radius(37.0, -122.0, -1.0)

def test_haversine_known_distance():
    # San Francisco to Los Angeles, roughly 559 km
    d = haversine_distance_km(37.7749, -122.4194, 34.0522, -118.2437)
    assert d == pytest.approx(559, rel=0.01)

def test_haversine_zero():
    assert haversine_distance_km(10.0, 10.0, 10.0, 10.0) == 0.0
