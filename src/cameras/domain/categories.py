"""
Keyword heuristics mapping free text to camera categories.
"""
from typing import Iterable, List, Sequence
from ...common.schemas import CameraCategory

# Mountain passes and terrain names that usually mean a weather camera
PASS_KEYWORDS = (
    'pass', 'summit', 'grade', 'ridge', 'peak', 'canyon', 'mt ', 'mtn',
    'sierra', 'tahoe', 'donner', 'cajon', 'tejon', 'grapevine', 'pacheco',
    'altamont', 'gaviota', 'cuesta',
)

WEATHER_KEYWORDS = PASS_KEYWORDS + (
    'weather', 'snow', 'fog', 'wind', 'chain', 'ice', 'frost', 'elevation',
)

CONSTRUCTION_KEYWORDS = ('construction', 'work zone', 'roadwork', 'project')


def infer_categories(
    fields: Iterable[str],
    weather_keywords: Sequence[str] = WEATHER_KEYWORDS,
    construction_keywords: Sequence[str] = CONSTRUCTION_KEYWORDS,
) -> List[CameraCategory]:
    """
    Case-insensitive substring match over the joined text fields.

    Only weather and construction are ever inferred; camera feeds carry no
    incident data for accidents or congestion.
    """
    text = ' '.join(f for f in fields if f).lower()
    categories = []
    if any(kw in text for kw in weather_keywords):
        categories.append(CameraCategory.WEATHER)
    if any(kw in text for kw in construction_keywords):
        categories.append(CameraCategory.CONSTRUCTION)
    return categories
