"""
Liveness and provider status.
"""
from fastapi import APIRouter, Depends
from ..dependencies import get_aggregator
from ....application.aggregator import CameraAggregator
from .....common.schemas import HealthResponse, ProviderStatus

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(aggregator: CameraAggregator = Depends(get_aggregator)):
    """Enabled providers with their upstream fetch counters."""
    providers = []
    for provider in aggregator.providers:
        metrics = getattr(provider, "metrics", None)
        providers.append(ProviderStatus(
            slug=provider.slug,
            display_name=provider.display_name,
            metrics=metrics.get_metrics().to_dict() if metrics else {},
        ))
    return HealthResponse(status="ok", providers=providers)
