"""
Request-scoped dependencies shared by the camera routes.
"""
from dataclasses import dataclass
from typing import List, Optional
from fastapi import Query, Request
from pydantic import ValidationError
from ...application.aggregator import CameraAggregator
from ...domain.geometry import from_center_and_radius
from ....common.exceptions import InvalidQueryError
from ....common.schemas import BoundingBox, CameraCategory, CameraQueryOptions, FilterState

BBOX_FORMAT = "Invalid bbox parameter. Expected: north,south,east,west"


def get_aggregator(request: Request) -> CameraAggregator:
    return request.app.state.aggregator


def parse_bbox(value: Optional[str]) -> Optional[BoundingBox]:
    """Parses "north,south,east,west". Blank means no box."""
    if value is None or not value.strip():
        return None

    parts = value.split(",")
    if len(parts) != 4:
        raise InvalidQueryError(BBOX_FORMAT, code="INVALID_BBOX")
    try:
        north, south, east, west = (float(p) for p in parts)
        return BoundingBox(north=north, south=south, east=east, west=west)
    except (ValueError, ValidationError) as e:
        raise InvalidQueryError(BBOX_FORMAT, code="INVALID_BBOX") from e


@dataclass
class CameraQuery:
    options: CameraQueryOptions
    filters: FilterState

    @property
    def has_filters(self) -> bool:
        return bool(self.filters.categories) or self.filters.in_service_only


def camera_query(
    bbox: Optional[str] = Query(None, description="north,south,east,west"),
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lon: Optional[float] = Query(None, ge=-180, le=180),
    radius_km: Optional[float] = Query(None, alias="radiusKm", gt=0),
    category: Optional[List[CameraCategory]] = Query(None),
    in_service_only: bool = Query(False, alias="inServiceOnly"),
) -> CameraQuery:
    box = parse_bbox(bbox)

    center = (lat, lon, radius_km)
    if box is None and any(v is not None for v in center):
        if any(v is None for v in center):
            raise InvalidQueryError(
                "lat, lon and radiusKm must be given together", code="INVALID_BBOX"
            )
        try:
            box = from_center_and_radius(lat, lon, radius_km)
        except ValueError as e:
            raise InvalidQueryError(str(e), code="INVALID_BBOX") from e

    return CameraQuery(
        options=CameraQueryOptions(bbox=box),
        filters=FilterState(categories=set(category or []), in_service_only=in_service_only),
    )
