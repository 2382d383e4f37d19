"""
Camera listing, lookup and streaming endpoints.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import StreamingResponse
from ..dependencies import CameraQuery, camera_query, get_aggregator
from ..errors import error_response
from ....application.aggregator import CameraAggregator
from .....common.logging import setup_logger
from .....common.schemas import CameraResponse, CamerasResponse, ErrorResponse

logger = setup_logger(__name__)

router = APIRouter(tags=["cameras"])

NDJSON_MEDIA_TYPE = "application/x-ndjson"
NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store",
    "X-Accel-Buffering": "no",
}

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("/cameras", response_model=CamerasResponse, responses=_ERRORS)
async def list_cameras(
    request: Request,
    query: CameraQuery = Depends(camera_query),
    limit: Optional[int] = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    aggregator: CameraAggregator = Depends(get_aggregator),
):
    """
    Cameras from every enabled provider, optionally within a box.

    `total` counts every match; `limit`/`offset` page through them.
    """
    try:
        cameras = await aggregator.fetch_all_cameras(query.options)
    except Exception:
        # fetch_all_cameras logs the traceback
        return error_response(500, "Failed to fetch camera data", "FETCH_ERROR")

    if query.has_filters:
        cameras = query.filters.apply(cameras)

    max_limit = request.app.state.max_limit
    page_size = min(limit, max_limit) if limit else None
    page = cameras[offset:offset + page_size] if page_size else cameras[offset:]

    return CamerasResponse(
        cameras=page,
        total=len(cameras),
        sources=list(dict.fromkeys(c.provider for c in cameras)),
        offset=offset,
        has_more=offset + len(page) < len(cameras),
    )


@router.get("/cameras/stream", responses=_ERRORS)
async def stream_cameras(
    request: Request,
    query: CameraQuery = Depends(camera_query),
    aggregator: CameraAggregator = Depends(get_aggregator),
):
    """
    Newline-delimited JSON: one {"type": "cameras"} line per provider as it
    resolves, then a single {"type": "done", "total": n} line.
    """
    filters = query.filters if query.has_filters else None

    async def ndjson():
        messages = aggregator.stream_cameras(query.options, filters)
        try:
            async for message in messages:
                if await request.is_disconnected():
                    logger.info("Client disconnected, stopping camera stream")
                    break
                yield message.model_dump_json(by_alias=True) + "\n"
        finally:
            await messages.aclose()

    return StreamingResponse(ndjson(), media_type=NDJSON_MEDIA_TYPE, headers=NO_CACHE_HEADERS)


@router.get("/cameras/", responses=_ERRORS, include_in_schema=False)
async def missing_camera_id():
    return error_response(400, "Missing camera ID", "MISSING_ID")


@router.get("/cameras/{camera_id}", response_model=CameraResponse, responses=_ERRORS)
async def get_camera(camera_id: str, aggregator: CameraAggregator = Depends(get_aggregator)):
    camera_id = camera_id.strip()
    if not camera_id:
        return error_response(400, "Missing camera ID", "MISSING_ID")

    try:
        camera = await aggregator.fetch_camera_by_id(camera_id)
    except Exception as e:
        logger.error(f"Error fetching camera {camera_id}: {e}", exc_info=True)
        return error_response(500, "Failed to fetch camera data", "FETCH_ERROR")

    if camera is None:
        return error_response(404, "Camera not found", "NOT_FOUND")
    return CameraResponse(camera=camera)
