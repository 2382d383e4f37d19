from enum import Enum
from typing import List, Optional, Set
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class CameraCategory(str, Enum):
    ACCIDENTS = "accidents"
    CONGESTION = "congestion"
    CONSTRUCTION = "construction"
    WEATHER = "weather"


class BoundingBox(BaseModel):
    """
    Geographic box in WGS84 degrees. Boxes crossing the antimeridian are not supported.
    """
    model_config = ConfigDict(frozen=True)

    north: float = Field(..., ge=-90, le=90, allow_inf_nan=False, description="Northern latitude")
    south: float = Field(..., ge=-90, le=90, allow_inf_nan=False, description="Southern latitude")
    east: float = Field(..., ge=-180, le=180, allow_inf_nan=False, description="Eastern longitude")
    west: float = Field(..., ge=-180, le=180, allow_inf_nan=False, description="Western longitude")


class CameraQueryOptions(BaseModel):
    """Query shape passed to every provider."""
    model_config = ConfigDict(frozen=True)

    bbox: Optional[BoundingBox] = None


class Camera(BaseModel):
    """
    Canonical, provider-agnostic traffic camera record.
    Built fresh from the raw upstream payload on every fetch.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., min_length=1, description="Provider-namespaced identifier")
    provider: str = Field(..., description="Slug of the originating provider")
    name: str = ""
    nearby_place: str = ""
    county: str = ""
    route: str = ""
    direction: str = ""
    district: int = Field(0, ge=0, description="Upstream region id, 0 when not applicable")
    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False)
    elevation: Optional[int] = Field(None, description="Elevation in feet")
    in_service: bool = False
    image_url: Optional[str] = None
    image_update_frequency_minutes: Optional[int] = Field(None, description="Still refresh interval")
    image_description: str = ""
    streaming_video_url: Optional[str] = None
    reference_images: List[str] = Field(default_factory=list, description="Older stills, most recent first")
    recorded_at: str = Field("", description="ISO-8601 time the image was recorded")
    categories: List[CameraCategory] = Field(default_factory=list)

    @field_validator('categories')
    @classmethod
    def dedupe_categories(cls, v: List[CameraCategory]) -> List[CameraCategory]:
        seen = []
        for category in v:
            if category not in seen:
                seen.append(category)
        return seen


class FilterState(BaseModel):
    """
    Category and service-status filter applied to already fetched cameras.
    """
    categories: Set[CameraCategory] = Field(default_factory=set)
    in_service_only: bool = False

    def matches(self, camera: Camera) -> bool:
        if self.in_service_only and not camera.in_service:
            return False
        # Uncategorized cameras are general purpose and always pass
        if self.categories and camera.categories:
            return any(c in self.categories for c in camera.categories)
        return True

    def apply(self, cameras: List[Camera]) -> List[Camera]:
        return [c for c in cameras if self.matches(c)]


class RegionPartition(BaseModel):
    """Static region id to approximate extent mapping."""
    model_config = ConfigDict(frozen=True)

    region_id: int = Field(..., ge=0)
    bbox: BoundingBox
    name: str = ""

    @model_validator(mode='after')
    def check_extent(self) -> 'RegionPartition':
        if self.bbox.north <= self.bbox.south or self.bbox.east <= self.bbox.west:
            raise ValueError('Region extent must have north > south and east > west')
        return self
