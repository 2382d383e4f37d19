"""
Helpers for reading loosely typed upstream fields.
"""
import math
import re
from typing import Any, Optional

# Upstream markers for "no data"
SENTINELS = frozenset({"not reported", "", "n/a"})

_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")


def is_not_reported(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip().lower() in SENTINELS
    return False


def text(value: Any) -> str:
    """Text field, empty string for sentinels."""
    return "" if is_not_reported(value) else str(value).strip()


def optional_text(value: Any) -> Optional[str]:
    """Nullable text field, None for sentinels."""
    return None if is_not_reported(value) else str(value).strip()


def parse_float(value: Any) -> Optional[float]:
    """Finite float or None. Never raises."""
    if is_not_reported(value) or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    return result if math.isfinite(result) else None


def parse_int(value: Any) -> Optional[int]:
    """
    Leading integer of a string ("4500 ft" -> 4500), or an integral
    number. None when nothing parses.
    """
    if is_not_reported(value) or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def section(raw: Any, key: str) -> dict:
    """Nested object of raw, or an empty dict when missing or not an object."""
    value = raw.get(key) if isinstance(raw, dict) else None
    return value if isinstance(value, dict) else {}


def is_true(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() == "true"
