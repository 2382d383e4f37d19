"""
Caltrans CWWP2 camera status feed, sharded by district.
"""
import re
from typing import Any, List, Optional, Tuple
from .base import RegionalCameraProvider
from .parsing import is_not_reported, is_true, optional_text, parse_float, parse_int, section, text
from ...domain.categories import infer_categories
from ...domain.regions import CALTRANS_DISTRICTS
from ....common.exceptions import ProviderError
from ....common.schemas import Camera, RegionPartition

# Older stills, most recent first. The first key is singular upstream.
REFERENCE_IMAGE_KEYS = ["referenceImage1UpdateAgoURL"] + [
    f"referenceImage{n}UpdatesAgoURL" for n in range(2, 13)
]


def reference_images(static: dict) -> List[str]:
    return [
        str(static[key]).strip()
        for key in REFERENCE_IMAGE_KEYS
        if not is_not_reported(static.get(key))
    ]


class CaltransProvider(RegionalCameraProvider):
    """
    Reads https://cwwp2.dot.ca.gov/data/d{N}/cctv/cctvStatusD{NN}.json.

    Ids are "caltrans-d{district}-{index}" where index is the record's
    position key inside its district file.
    """

    slug = "caltrans"
    display_name = "Caltrans CWWP2"
    default_base_url = "https://cwwp2.dot.ca.gov/data"

    @property
    def regions(self) -> List[RegionPartition]:
        return CALTRANS_DISTRICTS

    def region_url(self, region_id: int) -> str:
        return f"{self.base_url}/d{region_id}/cctv/cctvStatusD{region_id:02d}.json"

    def extract_records(self, payload: Any) -> List[dict]:
        if not isinstance(payload, dict):
            raise ProviderError("Caltrans payload is not a JSON object", provider=self.slug)
        entries = payload.get("data") or []
        if not isinstance(entries, list):
            raise ProviderError("Caltrans payload 'data' is not a list", provider=self.slug)
        return [entry["cctv"] for entry in entries if isinstance(entry, dict) and "cctv" in entry]

    def native_id(self, raw: dict) -> str:
        return text(raw.get("index"))

    def parse_id(self, camera_id: str) -> Optional[Tuple[int, str]]:
        match = re.fullmatch(rf"{self.slug}-d([1-9]\d*)-(.+)", camera_id)
        if not match:
            return None
        return int(match.group(1)), match.group(2)

    def build_camera(self, raw: dict, region_id: int) -> Optional[Camera]:
        location = section(raw, "location")
        image_data = section(raw, "imageData")
        static = section(image_data, "static")
        recorded = section(raw, "recordTimestamp")

        latitude = parse_float(location.get("latitude"))
        longitude = parse_float(location.get("longitude"))
        native = self.native_id(raw)
        if latitude is None or longitude is None or not native:
            return None

        name = text(location.get("locationName"))
        nearby_place = text(location.get("nearbyPlace"))
        county = text(location.get("county"))
        image_description = text(image_data.get("imageDescription"))

        record_date = text(recorded.get("recordDate"))
        record_time = text(recorded.get("recordTime"))
        recorded_at = f"{record_date}T{record_time}" if record_date and record_time else record_date

        return Camera(
            id=f"{self.slug}-d{region_id}-{native}",
            provider=self.slug,
            name=name,
            nearby_place=nearby_place,
            county=county,
            route=text(location.get("route")),
            direction=text(location.get("direction")),
            district=region_id,
            latitude=latitude,
            longitude=longitude,
            elevation=parse_int(location.get("elevation")),
            in_service=is_true(raw.get("inService")),
            image_url=optional_text(static.get("currentImageURL")),
            image_update_frequency_minutes=parse_int(static.get("currentImageUpdateFrequency")),
            image_description=image_description,
            streaming_video_url=optional_text(image_data.get("streamingVideoURL")),
            reference_images=reference_images(static),
            recorded_at=recorded_at,
            categories=infer_categories([image_description, name, nearby_place, county]),
        )
