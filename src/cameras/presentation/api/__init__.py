"""
API package.
"""
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from omegaconf import DictConfig
from .errors import register_error_handlers
from .routes import cameras, health
from ...application.aggregator import CameraAggregator
from ...domain.protocols import FeedClient
from ...infrastructure.feed_client import RequestsFeedClient
from ...infrastructure.providers import build_providers
from ....common.config import ConfigManager
from ....common.logging import setup_logger

logger = setup_logger(__name__)


def create_app(
    cfg: Optional[DictConfig] = None,
    aggregator: Optional[CameraAggregator] = None,
    client: Optional[FeedClient] = None
) -> FastAPI:
    """
    Builds the API. Providers are fixed here, at startup, from
    cfg.providers unless an aggregator is injected.
    """
    cfg = cfg if cfg is not None else ConfigManager().default()

    owned_client = None
    if aggregator is None:
        if client is None:
            client = owned_client = RequestsFeedClient(timeout=cfg.providers.request_timeout_seconds)
        aggregator = CameraAggregator(build_providers(cfg.providers, client))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Camera API ready with providers: {aggregator.sources}")
        yield
        if owned_client is not None:
            owned_client.close()

    app = FastAPI(
        title="Traffic Camera API",
        description="Live traffic camera metadata aggregated from state DOT feeds.",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.aggregator = aggregator
    app.state.max_limit = cfg.api.max_limit

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cfg.server.cors_origins),
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(cameras.router)
    app.include_router(health.router)

    return app
