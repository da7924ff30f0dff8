"""
Utility helpers shared across repositories/services.
"""

from __future__ import annotations

import math
import re
import secrets
from datetime import datetime, timezone

EARTH_RADIUS_KM = 6371
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_SPECIAL_CHARS = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")


def new_id(prefix: str) -> str:
    """Opaque record id, e.g. ``pet-3f9a0c1d2b4e5f60``."""
    return f"{prefix}-{secrets.token_hex(8)}"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Distancia em km entre dois pontos (haversine), arredondada a uma casa.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round(EARTH_RADIUS_KM * c, 1)


def check_password_strength(password: str | None) -> str:
    """Return ``weak``, ``medium`` or ``strong``."""
    value = password or ""
    if len(value) < 6:
        return "weak"
    if len(value) < 8:
        return "medium"
    has_number = any(ch.isdigit() for ch in value)
    has_special = bool(_SPECIAL_CHARS.search(value))
    if has_number and has_special:
        return "strong"
    if has_number or has_special:
        return "medium"
    return "weak"


def validate_email(email: str | None) -> bool:
    if not email:
        return False
    return bool(EMAIL_PATTERN.match(email))
