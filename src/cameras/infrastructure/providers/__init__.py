"""
Provider module initialization and registry.
"""
from typing import Dict, List, Optional, Type
from omegaconf import DictConfig
from .base import RegionalCameraProvider, StatewideCameraProvider
from .caltrans import CaltransProvider
from .statewide import WsdotProvider, OdotProvider, Ny511Provider
from ..feed_client import RequestsFeedClient
from ...domain.protocols import FeedClient
from ....common.exceptions import ConfigurationError
from ....common.logging import setup_logger

logger = setup_logger(__name__)


class ProviderRegistry:
    """
    Closed set of known provider classes, keyed by slug.
    """

    def __init__(self):
        self._providers: Dict[str, Type[RegionalCameraProvider]] = {}

    def register(self, provider_class: Type[RegionalCameraProvider]):
        if not provider_class.slug:
            raise ConfigurationError(f"{provider_class.__name__} has no slug")
        self._providers[provider_class.slug] = provider_class

    def available(self) -> List[str]:
        return list(self._providers.keys())

    def create(self, slug: str, client: FeedClient, **kwargs) -> RegionalCameraProvider:
        if slug not in self._providers:
            raise ConfigurationError(
                f"Unknown camera provider: '{slug}'. Available: {', '.join(self.available())}"
            )
        return self._providers[slug](client, **kwargs)

    def build(self, providers_cfg: DictConfig, client: FeedClient) -> List[RegionalCameraProvider]:
        """
        Instantiates the enabled providers, in configured order.
        """
        base_urls = providers_cfg.get("base_urls") or {}
        providers = []
        for slug in providers_cfg.enabled:
            if any(p.slug == slug for p in providers):
                raise ConfigurationError(f"Provider '{slug}' is enabled twice")
            providers.append(self.create(
                slug,
                client,
                cache_ttl_seconds=providers_cfg.cache_ttl_seconds,
                base_url=base_urls.get(slug)
            ))
        logger.info(f"Enabled camera providers: {[p.slug for p in providers]}")
        return providers


# Setup global registry
_registry = ProviderRegistry()
_registry.register(CaltransProvider)
_registry.register(WsdotProvider)
_registry.register(OdotProvider)
_registry.register(Ny511Provider)


def build_providers(providers_cfg: DictConfig, client: Optional[FeedClient] = None) -> List[RegionalCameraProvider]:
    """
    Builds the enabled providers from the `providers` config section.
    """
    if client is None:
        client = RequestsFeedClient(timeout=providers_cfg.request_timeout_seconds)
    return _registry.build(providers_cfg, client)


def available_providers() -> List[str]:
    return _registry.available()


__all__ = [
    "ProviderRegistry",
    "RegionalCameraProvider",
    "StatewideCameraProvider",
    "CaltransProvider",
    "WsdotProvider",
    "OdotProvider",
    "Ny511Provider",
    "build_providers",
    "available_providers",
]
