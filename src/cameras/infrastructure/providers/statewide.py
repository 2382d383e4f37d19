"""
Single-feed state DOT providers. Disabled unless listed in
providers.enabled.
"""
from datetime import datetime, timezone
from typing import Any, List, Optional
from .base import StatewideCameraProvider
from .parsing import is_true, optional_text, parse_float, section, text
from ...domain.categories import infer_categories
from ....common.exceptions import ProviderError
from ....common.schemas import BoundingBox, Camera

# These feeds publish no refresh interval; stills update about every two minutes
DEFAULT_REFRESH_MINUTES = 2

STATE_WEATHER_KEYWORDS = ('weather', 'snow', 'fog', 'pass')
STATE_CONSTRUCTION_KEYWORDS = ('construction', 'work zone')


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _coordinates(lat: Any, lon: Any):
    """Parsed coordinates, None when missing or the (0, 0) placeholder is used."""
    latitude = parse_float(lat)
    longitude = parse_float(lon)
    if not latitude or not longitude:
        return None
    return latitude, longitude


def _as_list(payload: Any, provider: str) -> List[dict]:
    if isinstance(payload, dict):
        payload = payload.get("data")
    if not isinstance(payload, list):
        raise ProviderError(f"{provider} payload is not a list of cameras", provider=provider)
    return payload


class WsdotProvider(StatewideCameraProvider):
    """Washington State DOT travel monitoring cameras."""

    slug = "wsdot"
    display_name = "WSDOT"
    default_base_url = "https://wsdot.wa.gov/Traffic/api/v2/TravelMonitoringCamera/GetCamerasAsJson"
    bounds = BoundingBox(north=49.05, south=45.54, west=-124.85, east=-116.91)

    def extract_records(self, payload: Any) -> List[dict]:
        return _as_list(payload, self.slug)

    def native_id(self, raw: dict) -> str:
        return text(raw.get("CameraID"))

    def build_camera(self, raw: dict, region_id: int) -> Optional[Camera]:
        location = section(raw, "CameraLocation")
        coords = _coordinates(location.get("Latitude"), location.get("Longitude"))
        native = self.native_id(raw)
        if coords is None or not native:
            return None

        title = text(raw.get("Title"))
        description = text(raw.get("Description"))
        place = text(location.get("Description"))
        return Camera(
            id=self.camera_id(native),
            provider=self.slug,
            name=title,
            nearby_place=place,
            county=text(location.get("County")),
            route=text(location.get("RoadName")),
            direction=text(location.get("Direction")),
            latitude=coords[0],
            longitude=coords[1],
            in_service=is_true(raw.get("IsActive")),
            image_url=optional_text(raw.get("ImageURL")),
            image_update_frequency_minutes=DEFAULT_REFRESH_MINUTES,
            image_description=description,
            recorded_at=_now_iso(),
            categories=infer_categories(
                [title, description, place],
                STATE_WEATHER_KEYWORDS,
                STATE_CONSTRUCTION_KEYWORDS,
            ),
        )


class OdotProvider(StatewideCameraProvider):
    """Oregon DOT TripCheck cameras."""

    slug = "odot"
    display_name = "ODOT TripCheck"
    default_base_url = "https://api.tripcheck.com/api/1/cctv"
    bounds = BoundingBox(north=46.30, south=41.99, west=-124.70, east=-116.46)

    def extract_records(self, payload: Any) -> List[dict]:
        return _as_list(payload, self.slug)

    def native_id(self, raw: dict) -> str:
        return text(raw.get("cctvid"))

    def build_camera(self, raw: dict, region_id: int) -> Optional[Camera]:
        location = section(raw, "location")
        coords = _coordinates(location.get("latitude"), location.get("longitude"))
        native = self.native_id(raw)
        if coords is None or not native:
            return None

        views = raw.get("views")
        views = [v for v in views if isinstance(v, dict)] if isinstance(views, list) else []
        primary = views[0] if views else {}
        name = text(raw.get("cctvname"))
        city = text(location.get("city"))
        return Camera(
            id=self.camera_id(native),
            provider=self.slug,
            name=name,
            nearby_place=city,
            county=text(location.get("county")),
            route=text(location.get("highway")),
            direction=text(location.get("direction")),
            latitude=coords[0],
            longitude=coords[1],
            in_service=text(raw.get("operational_status")).lower() == "active",
            image_url=optional_text(primary.get("url")),
            image_update_frequency_minutes=DEFAULT_REFRESH_MINUTES,
            image_description=text(primary.get("description")) or name,
            reference_images=[url for url in (optional_text(v.get("url")) for v in views[1:]) if url],
            recorded_at=_now_iso(),
            categories=infer_categories(
                [name, city],
                STATE_WEATHER_KEYWORDS,
                STATE_CONSTRUCTION_KEYWORDS,
            ),
        )


class Ny511Provider(StatewideCameraProvider):
    """511 New York cameras."""

    slug = "ny511"
    display_name = "511 NY"
    default_base_url = "https://511ny.org/api/getitems?datatype=cameras&format=json"
    bounds = BoundingBox(north=45.02, south=40.50, west=-79.76, east=-71.78)

    def extract_records(self, payload: Any) -> List[dict]:
        return _as_list(payload, self.slug)

    def native_id(self, raw: dict) -> str:
        return text(raw.get("ID"))

    def build_camera(self, raw: dict, region_id: int) -> Optional[Camera]:
        coords = _coordinates(raw.get("Latitude"), raw.get("Longitude"))
        native = self.native_id(raw)
        if coords is None or not native:
            return None

        name = text(raw.get("Name"))
        roadway = text(raw.get("RoadwayName"))
        return Camera(
            id=self.camera_id(native),
            provider=self.slug,
            name=name,
            route=roadway,
            direction=text(raw.get("DirectionOfTravel")),
            latitude=coords[0],
            longitude=coords[1],
            in_service=not is_true(raw.get("Disabled")) and not is_true(raw.get("Blocked")),
            image_url=optional_text(raw.get("Url")),
            image_update_frequency_minutes=DEFAULT_REFRESH_MINUTES,
            image_description=name,
            streaming_video_url=optional_text(raw.get("VideoUrl")),
            recorded_at=_now_iso(),
            categories=infer_categories(
                [name, roadway],
                ('weather', 'snow', 'fog'),
                STATE_CONSTRUCTION_KEYWORDS,
            ),
        )
