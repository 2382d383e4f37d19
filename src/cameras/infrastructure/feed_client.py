"""
Blocking HTTP client for upstream JSON feeds, run off the event loop.
"""
import asyncio
from typing import Any, Dict, Optional
import requests
from ...common.exceptions import ProviderError
from ...common.logging import setup_logger

logger = setup_logger(__name__)

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "User-Agent": "traffic-camera-aggregator/1.0",
}


class RequestsFeedClient:
    """
    Fetches JSON documents with a shared requests.Session.

    Each call runs in a worker thread so concurrent region fetches do not
    block the event loop. Any transport error, non-2xx status or
    undecodable body is raised as ProviderError.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(headers or DEFAULT_HEADERS)

    async def get_json(self, url: str) -> Any:
        return await asyncio.to_thread(self._get_json, url)

    def _get_json(self, url: str) -> Any:
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.Timeout as e:
            raise ProviderError(f"Timed out after {self.timeout}s fetching {url}") from e
        except requests.RequestException as e:
            raise ProviderError(f"Request to {url} failed: {e}") from e

        if not response.ok:
            raise ProviderError(f"{url} returned HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise ProviderError(f"{url} returned invalid JSON: {e}") from e

    def close(self):
        self.session.close()
        logger.debug("Feed client session closed")
