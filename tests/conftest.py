import asyncio
import pytest
from src.common.exceptions import ProviderError
from src.cameras.infrastructure.providers import CaltransProvider

class FakeFeedClient:
    """
    Stand-in for RequestsFeedClient. Serves canned payloads by URL and
    records every call; unknown URLs fail like an upstream 404.
    """
    def __init__(self, responses=None, delay=0.0):
        self.responses = dict(responses or {})
        self.delay = delay
        self.calls = []

    async def get_json(self, url):
        self.calls.append(url)
        if self.delay:
            await asyncio.sleep(self.delay)
        response = self.responses.get(url)
        if response is None:
            raise ProviderError(f"{url} returned HTTP 404")
        if isinstance(response, Exception):
            raise response
        return response

    def calls_to(self, url):
        return self.calls.count(url)


def _make_caltrans_raw(index="1", latitude="37.7749", longitude="-122.4194", **overrides):
    static = {
        "currentImageUpdateFrequency": "2",
        "currentImageURL": f"https://cwwp2.dot.ca.gov/data/d4/cctv/image/cam{index}/cam{index}.jpg",
        "referenceImageUpdateFrequency": "2",
        "referenceImage1UpdateAgoURL": f"https://cwwp2.dot.ca.gov/data/d4/cctv/image/cam{index}/previous/cam{index}-1.jpg",
        "referenceImage2UpdatesAgoURL": f"https://cwwp2.dot.ca.gov/data/d4/cctv/image/cam{index}/previous/cam{index}-2.jpg",
        "referenceImage3UpdatesAgoURL": "Not Reported",
    }
    for n in range(4, 13):
        static[f"referenceImage{n}UpdatesAgoURL"] = "Not Reported"

    raw = {
        "index": index,
        "inService": "true",
        "recordTimestamp": {"recordDate": "2024-01-15", "recordTime": "10:30:00"},
        "location": {
            "district": "4",
            "locationName": "US-101 : Cesar Chavez St",
            "nearbyPlace": "San Francisco",
            "longitude": longitude,
            "latitude": latitude,
            "elevation": "50",
            "direction": "North",
            "county": "San Francisco",
            "route": "US-101",
            "routeSuffix": "",
            "postmilePrefix": "",
            "postmile": "2.1",
            "alignment": "",
            "milepost": "432.1",
        },
        "imageData": {
            "imageDescription": "",
            "streamingVideoURL": f"https://wzmedia.dot.ca.gov/D4/cam{index}.stream/playlist.m3u8",
            "static": static,
        },
    }
    for key, value in overrides.items():
        section, _, field = key.partition("__")
        if field:
            target = raw["imageData"]["static"] if section == "static" else raw[section]
            target[field] = value
        else:
            raw[key] = value
    return raw


@pytest.fixture
def caltrans_raw():
    """Factory for raw Caltrans cctv records. Nested fields via section__field=value."""
    return _make_caltrans_raw


@pytest.fixture
def caltrans_payload():
    def make(*records):
        return {"data": [{"cctv": r} for r in records]}
    return make


@pytest.fixture
def fake_client():
    return FakeFeedClient()


@pytest.fixture
def caltrans(fake_client):
    return CaltransProvider(fake_client, cache_ttl_seconds=60.0)


@pytest.fixture
def app_config():
    from src.common.config import ConfigManager
    return ConfigManager().default()
