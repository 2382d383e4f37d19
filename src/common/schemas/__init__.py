from .camera import (
    BoundingBox,
    Camera,
    CameraCategory,
    CameraQueryOptions,
    FilterState,
    RegionPartition,
)
from .api import (
    CamerasResponse,
    CameraResponse,
    ErrorResponse,
    CamerasMessage,
    DoneMessage,
    ProviderStatus,
    HealthResponse,
)

__all__ = [
    "BoundingBox",
    "Camera",
    "CameraCategory",
    "CameraQueryOptions",
    "FilterState",
    "RegionPartition",
    "CamerasResponse",
    "CameraResponse",
    "ErrorResponse",
    "CamerasMessage",
    "DoneMessage",
    "ProviderStatus",
    "HealthResponse",
]
