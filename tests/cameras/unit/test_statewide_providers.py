import pytest
from src.common.schemas import BoundingBox, CameraCategory, CameraQueryOptions
from src.cameras.infrastructure.providers import Ny511Provider, OdotProvider, WsdotProvider
from src.cameras.infrastructure.providers.statewide import DEFAULT_REFRESH_MINUTES


def wsdot_record(camera_id=9001, lat=47.6062, lon=-122.3321, **overrides):
    record = {
        "CameraID": camera_id,
        "Title": "I-5 at NE 45th St",
        "Description": "Looking north",
        "ImageURL": f"https://images.wsdot.wa.gov/nw/005vc{camera_id}.jpg",
        "IsActive": True,
        "CameraLocation": {
            "Description": "Seattle",
            "Latitude": lat,
            "Longitude": lon,
            "RoadName": "I-5",
            "Direction": "N",
            "County": "King",
        },
    }
    record.update(overrides)
    return record


def odot_record(cctvid="1234", lat=45.5152, lon=-122.6784):
    return {
        "cctvid": cctvid,
        "cctvname": "US-26 at Sylvan",
        "operational_status": "Active",
        "location": {"latitude": lat, "longitude": lon, "city": "Portland", "highway": "US-26"},
        "views": [
            {"url": "https://tripcheck.com/cam/1.jpg", "description": "East"},
            {"url": "https://tripcheck.com/cam/2.jpg", "description": "West"},
        ],
    }


def ny511_record(camera_id="NYSDOT-1", lat=40.7128, lon=-74.0060, **overrides):
    record = {
        "ID": camera_id,
        "Name": "I-87 at Exit 1",
        "RoadwayName": "I-87",
        "DirectionOfTravel": "Northbound",
        "Latitude": lat,
        "Longitude": lon,
        "Url": "https://511ny.org/map/Cctv/1",
        "VideoUrl": "https://s53.nysdot.skyvdn.com/rtplive/R11_001/playlist.m3u8",
        "Disabled": False,
        "Blocked": False,
    }
    record.update(overrides)
    return record


@pytest.fixture
def wsdot(fake_client):
    return WsdotProvider(fake_client)


def test_wsdot_normalize(wsdot):
    cam = wsdot.normalize(wsdot_record(), 0)
    assert cam.id == "wsdot-9001"
    assert cam.provider == "wsdot"
    assert cam.district == 0
    assert cam.route == "I-5"
    assert cam.county == "King"
    assert cam.nearby_place == "Seattle"
    assert cam.in_service is True
    assert cam.image_update_frequency_minutes == DEFAULT_REFRESH_MINUTES
    assert cam.recorded_at


def test_wsdot_zero_coordinates_dropped(wsdot):
    assert wsdot.normalize(wsdot_record(lat=0, lon=0), 0) is None


def test_wsdot_weather_category(wsdot):
    cam = wsdot.normalize(wsdot_record(Title="I-90 Snoqualmie Pass"), 0)
    assert cam.categories == [CameraCategory.WEATHER]


@pytest.mark.asyncio
async def test_wsdot_fetch_and_lookup(wsdot, fake_client):
    fake_client.responses[wsdot.base_url] = [wsdot_record(1), wsdot_record(2, lat=47.0, lon=-120.5)]
    seattle = BoundingBox(north=47.8, south=47.4, west=-122.5, east=-122.1)

    cameras = await wsdot.fetch_cameras(CameraQueryOptions(bbox=seattle))
    camera = await wsdot.fetch_camera_by_id("wsdot-2")

    assert [c.id for c in cameras] == ["wsdot-1"]
    assert camera.id == "wsdot-2"
    assert fake_client.calls_to(wsdot.base_url) == 1


@pytest.mark.asyncio
async def test_statewide_skips_fetch_outside_state(wsdot, fake_client):
    california = BoundingBox(north=38.9, south=36.9, west=-123.6, east=-121.2)
    assert await wsdot.fetch_cameras(CameraQueryOptions(bbox=california)) == []
    assert fake_client.calls == []


@pytest.mark.asyncio
async def test_statewide_bad_payload_is_empty(wsdot, fake_client):
    fake_client.responses[wsdot.base_url] = {"message": "rate limited"}
    assert await wsdot.fetch_cameras() == []
    assert wsdot.metrics.get_metrics().upstream_failures == 1


@pytest.mark.asyncio
async def test_statewide_malformed_id(wsdot, fake_client):
    assert await wsdot.fetch_camera_by_id("caltrans-d4-1") is None
    assert await wsdot.fetch_camera_by_id("wsdot-") is None
    assert fake_client.calls == []


def test_odot_normalize(fake_client):
    cam = OdotProvider(fake_client).normalize(odot_record(), 0)
    assert cam.id == "odot-1234"
    assert cam.in_service is True
    assert cam.nearby_place == "Portland"
    assert cam.image_url == "https://tripcheck.com/cam/1.jpg"
    assert cam.image_description == "East"
    assert cam.reference_images == ["https://tripcheck.com/cam/2.jpg"]


def test_odot_accepts_wrapped_payload(fake_client):
    provider = OdotProvider(fake_client)
    assert provider.extract_records({"data": [odot_record()]}) == [odot_record()]


def test_ny511_normalize(fake_client):
    provider = Ny511Provider(fake_client)
    cam = provider.normalize(ny511_record(), 0)
    assert cam.id == "ny511-NYSDOT-1"
    assert cam.route == "I-87"
    assert cam.in_service is True
    assert cam.streaming_video_url.endswith("playlist.m3u8")
    assert provider.parse_id("ny511-NYSDOT-1") == (0, "NYSDOT-1")


def test_ny511_blocked_camera_not_in_service(fake_client):
    cam = Ny511Provider(fake_client).normalize(ny511_record(Blocked=True), 0)
    assert cam.in_service is False


@pytest.mark.asyncio
async def test_odot_bad_views_do_not_fail_the_feed(fake_client):
    provider = OdotProvider(fake_client)
    odd = odot_record(cctvid="2")
    odd["views"] = 5
    fake_client.responses[provider.base_url] = [odot_record(cctvid="1"), odd]

    cameras = await provider.fetch_cameras()

    assert [c.id for c in cameras] == ["odot-1", "odot-2"]
    assert cameras[1].image_url is None
    assert cameras[1].reference_images == []
