"""
Infrastructure module initialization.
"""
from .cache import RegionCache
from .feed_client import RequestsFeedClient
from .providers import build_providers, available_providers

__all__ = [
    "RegionCache",
    "RequestsFeedClient",
    "build_providers",
    "available_providers"
]
