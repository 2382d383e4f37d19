"""
Fan-out across the enabled camera providers.
"""
import asyncio
from typing import AsyncIterator, List, Optional, Sequence, Union
from ..domain.protocols import CameraProvider
from ...common.logging import log_execution_time, setup_logger
from ...common.schemas import (
    Camera, CameraQueryOptions, CamerasMessage, DoneMessage, FilterState
)

logger = setup_logger(__name__)

StreamMessage = Union[CamerasMessage, DoneMessage]


class CameraAggregator:
    """
    Holds the providers enabled at startup and merges their results.

    Providers already turn upstream failures into empty batches, so
    fetch_all_cameras is a plain concurrent join: an unexpected provider
    exception reaches the caller once every provider has been scheduled.
    The streamed variant isolates each provider instead.
    """

    def __init__(self, providers: Sequence[CameraProvider]):
        self.providers: List[CameraProvider] = list(providers)

    @property
    def sources(self) -> List[str]:
        return [p.slug for p in self.providers]

    @staticmethod
    async def _fetch(provider: CameraProvider, options: Optional[CameraQueryOptions]) -> List[Camera]:
        # Wrapping keeps a provider that raises before its first await from
        # preventing the others from being scheduled
        return await provider.fetch_cameras(options)

    @log_execution_time(logger)
    async def fetch_all_cameras(self, options: Optional[CameraQueryOptions] = None) -> List[Camera]:
        """All matching cameras, flattened in registry order."""
        batches = await asyncio.gather(*(self._fetch(p, options) for p in self.providers))
        return [camera for batch in batches for camera in batch]

    async def fetch_camera_by_id(self, camera_id: str) -> Optional[Camera]:
        """Dispatches to the provider whose slug prefixes camera_id."""
        for provider in self.providers:
            if camera_id.startswith(f"{provider.slug}-"):
                return await provider.fetch_camera_by_id(camera_id)
        return None

    async def stream_cameras(
        self,
        options: Optional[CameraQueryOptions] = None,
        filters: Optional[FilterState] = None
    ) -> AsyncIterator[StreamMessage]:
        """
        Yields one CamerasMessage per provider as soon as its fetch completes,
        in completion order, then exactly one DoneMessage.

        A provider that raises is logged and left out. Closing the generator
        early cancels the fetches still in flight.
        """
        queue: asyncio.Queue = asyncio.Queue()

        async def worker(provider: CameraProvider):
            try:
                result: Optional[List[Camera]] = await self._fetch(provider, options)
            except Exception as e:
                logger.error(f"Provider {provider.slug} failed during stream: {e}", exc_info=True)
                result = None
            await queue.put((provider, result))

        tasks = [asyncio.create_task(worker(p)) for p in self.providers]
        total = 0
        try:
            for _ in range(len(tasks)):
                provider, cameras = await queue.get()
                if cameras is None:
                    continue
                if filters is not None:
                    cameras = filters.apply(cameras)
                total += len(cameras)
                yield CamerasMessage(provider=provider.slug, cameras=cameras)
            yield DoneMessage(total=total)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
