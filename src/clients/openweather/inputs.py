from __future__ import annotations

from typing import Dict, Optional

from core.errors import ValidationError


def normalize_city(city: Optional[str]) -> str:
    # Cache keys and query params share one spelling: trimmed, inner text kept
    city_clean = (city or "").strip()
    if not city_clean:
        raise ValidationError("City name cannot be null or empty")
    return city_clean


def build_query(city: str, api_key: str) -> Dict[str, str]:
    return {"q": normalize_city(city), "appid": api_key}
