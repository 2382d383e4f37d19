"""
Base classes for camera providers.
"""
import asyncio
import re
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple
from pydantic import ValidationError
from ...domain.geometry import contains
from ...domain.protocols import FeedClient
from ...domain.regions import find_region, regions_for_bbox
from ..cache import RegionCache
from ....common.exceptions import ProviderError
from ....common.logging import setup_logger
from ....common.metrics import MetricsCollector
from ....common.schemas import BoundingBox, Camera, CameraQueryOptions, RegionPartition

logger = setup_logger(__name__)


class RegionalCameraProvider(ABC):
    """
    Provider whose upstream feed is sharded by region.

    fetch_cameras selects the regions whose extent overlaps the query box,
    fetches them concurrently through the raw cache, normalizes, and then
    re-checks every camera against the box. A failing region contributes
    no cameras instead of failing the request.
    """

    slug: str = ""
    display_name: str = ""
    default_base_url: str = ""

    def __init__(
        self,
        client: FeedClient,
        cache_ttl_seconds: float = 60.0,
        base_url: Optional[str] = None
    ):
        self.client = client
        self.base_url = (base_url or self.default_base_url).rstrip("/")
        self.metrics = MetricsCollector()
        self.cache = RegionCache(
            ttl_seconds=cache_ttl_seconds,
            maxsize=max(1, len(self.regions)),
            metrics=self.metrics
        )

    @property
    @abstractmethod
    def regions(self) -> List[RegionPartition]:
        """Static partition table of this provider's feed."""
        pass

    @abstractmethod
    def region_url(self, region_id: int) -> str:
        pass

    @abstractmethod
    def extract_records(self, payload: Any) -> List[dict]:
        """
        Pulls the raw camera records out of a decoded feed document.
        Raises ProviderError when the document has an unexpected shape.
        """
        pass

    @abstractmethod
    def native_id(self, raw: dict) -> str:
        pass

    @abstractmethod
    def build_camera(self, raw: dict, region_id: int) -> Optional[Camera]:
        """Canonical camera for raw, or None when raw has no usable coordinates."""
        pass

    @abstractmethod
    def parse_id(self, camera_id: str) -> Optional[Tuple[int, str]]:
        """(region id, native id) encoded in camera_id, or None when malformed."""
        pass

    def normalize(self, raw: Any, region_id: int) -> Optional[Camera]:
        if not isinstance(raw, dict):
            return None
        try:
            return self.build_camera(raw, region_id)
        except (ValidationError, TypeError, ValueError, KeyError):
            # Out-of-range coordinates or an unexpected field shape; drop the record
            return None

    async def fetch_region(self, region_id: int) -> List[dict]:
        """Raw records of one region; empty on any upstream failure."""
        async def load() -> List[dict]:
            self.metrics.record_upstream_call()
            try:
                payload = await self.client.get_json(self.region_url(region_id))
                return self.extract_records(payload)
            except ProviderError as e:
                self.metrics.record_failure()
                logger.warning(f"{self.display_name} region {region_id} fetch failed: {e}")
                raise ProviderError(str(e), provider=self.slug, region=region_id) from e

        try:
            return await self.cache.get_or_load(region_id, load)
        except ProviderError:
            return []

    async def _fetch_normalized(self, region_id: int) -> List[Camera]:
        raw_records = await self.fetch_region(region_id)
        cameras = []
        for raw in raw_records:
            camera = self.normalize(raw, region_id)
            if camera is not None:
                cameras.append(camera)
        dropped = len(raw_records) - len(cameras)
        if dropped:
            self.metrics.record_dropped(dropped)
        return cameras

    async def fetch_cameras(self, options: Optional[CameraQueryOptions] = None) -> List[Camera]:
        bbox = options.bbox if options else None
        region_ids = regions_for_bbox(self.regions, bbox)
        if not region_ids:
            return []

        batches = await asyncio.gather(*(self._fetch_normalized(r) for r in region_ids))
        cameras = [camera for batch in batches for camera in batch]

        if bbox is None:
            return cameras
        return [c for c in cameras if contains(bbox, c.latitude, c.longitude)]

    async def fetch_camera_by_id(self, camera_id: str) -> Optional[Camera]:
        parsed = self.parse_id(camera_id)
        if parsed is None:
            return None

        region_id, native = parsed
        if find_region(self.regions, region_id) is None:
            return None

        for raw in await self.fetch_region(region_id):
            if isinstance(raw, dict) and self.native_id(raw) == native:
                return self.normalize(raw, region_id)
        return None


class StatewideCameraProvider(RegionalCameraProvider):
    """
    Provider with a single unsharded feed covering one state.
    The whole feed is region 0 and ids are "<slug>-<native id>".
    """

    bounds: BoundingBox

    @property
    def regions(self) -> List[RegionPartition]:
        return [RegionPartition(region_id=0, bbox=self.bounds, name=self.display_name)]

    def region_url(self, region_id: int) -> str:
        return self.base_url

    def camera_id(self, native: str) -> str:
        return f"{self.slug}-{native}"

    def parse_id(self, camera_id: str) -> Optional[Tuple[int, str]]:
        match = re.fullmatch(rf"{re.escape(self.slug)}-(.+)", camera_id)
        if not match:
            return None
        return 0, match.group(1)
