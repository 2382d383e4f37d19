"""
Domain protocols for the camera aggregation module.
"""
from typing import Any, Awaitable, Callable, List, Optional, Protocol
from ...common.schemas import Camera, CameraQueryOptions

class CameraProvider(Protocol):
    """
    One upstream agency translated into canonical cameras.
    """
    slug: str
    display_name: str

    async def fetch_cameras(self, options: Optional[CameraQueryOptions] = None) -> List[Camera]:
        ...

    async def fetch_camera_by_id(self, camera_id: str) -> Optional[Camera]:
        ...

class FeedClient(Protocol):
    """
    Fetches and decodes one upstream JSON document.
    """
    async def get_json(self, url: str) -> Any:
        ...

# Loader used by the raw cache on a miss
RawLoader = Callable[[], Awaitable[list]]
