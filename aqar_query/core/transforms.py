"""
Transform functions for filters produced outside the rule-based parser.

A filter dict may come from a client, a saved search or another parser
with loosely typed values. coerce_filter() turns it into a valid
ExtractedFilter and drops whatever cannot be made valid instead of raising.
"""

import re
from enum import Enum
from typing import Any

from aqar_query.core.aliases import AMENITY_KEYWORDS_EN
from aqar_query.core.enums import Amenity, City, PropertyType, Status, ViewType
from aqar_query.core.models import ExtractedFilter
from aqar_query.logger_setup import get_logger

logger = get_logger(__name__)

__all__ = [
    "coerce_filter",
    "enum_value_or_str",
    "map_amenity",
    "match_city",
    "match_status",
    "match_view_type",
    "to_float_safe",
    "to_int_safe",
]

_STATUS_SYNONYMS = {
    "rent": Status.RENT,
    "rental": Status.RENT,
    "for rent": Status.RENT,
    "sale": Status.SALE,
    "buy": Status.SALE,
    "for sale": Status.SALE,
}


def enum_value_or_str(result: Enum | str) -> str:
    """Extract value from enum or return string as-is."""
    return result.value if isinstance(result, Enum) else result


def to_int_safe(value: Any) -> int | None:
    """
    Safely convert a value to integer.

    Args:
        value: int, float or text containing a number

    Returns:
        The integer, or None if there is no number
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    match = re.search(r"-?\d+", str(value))
    return int(match.group()) if match else None


def to_float_safe(value: Any) -> float | None:
    """
    Safely convert a value to float.

    Args:
        value: int, float or text containing a number

    Returns:
        The float, or None if there is no number
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    match = re.search(r"-?\d+(?:\.\d+)?", str(value).replace(",", ""))
    return float(match.group()) if match else None


def _match_enum(enum_cls: type[Enum], value: Any) -> Enum | None:
    if not isinstance(value, str):
        return None
    wanted = value.strip().lower()
    for member in enum_cls:
        if member.value.lower() == wanted:
            return member
    return None


def match_city(value: Any) -> City | None:
    """Exact case-insensitive match, then partial match in either direction."""
    city = _match_enum(City, value)
    if city or not isinstance(value, str) or not value.strip():
        return city
    wanted = value.strip().lower()
    for member in City:
        name = member.value.lower()
        if wanted in name or name in wanted:
            return member
    return None


def match_status(value: Any) -> Status | None:
    if not isinstance(value, str):
        return None
    return _STATUS_SYNONYMS.get(value.strip().lower())


def match_view_type(value: Any) -> ViewType | None:
    if not isinstance(value, str):
        return None
    text = value.strip().lower()
    if "sea" in text or "ocean" in text:
        return ViewType.SEA
    if "mountain" in text:
        return ViewType.MOUNTAIN
    if "open" in text:
        return ViewType.OPEN
    if "view" in text:
        return ViewType.GENERIC
    return None


def map_amenity(value: Any) -> Amenity | None:
    """Canonical name first, then the first English keyword found in the text."""
    amenity = _match_enum(Amenity, value)
    if amenity or not isinstance(value, str):
        return amenity
    text = value.lower()
    for keyword, mapped in AMENITY_KEYWORDS_EN.items():
        if re.search(rf"(?<![a-z]){re.escape(keyword)}(?![a-z])", text):
            return mapped
    return None


def _get(params: dict, snake: str, camel: str) -> Any:
    return params.get(camel, params.get(snake))


def _count(value: Any) -> int | None:
    number = to_int_safe(value)
    return number if number is not None and number >= 1 else None


def _non_negative(value: Any) -> float | None:
    number = to_float_safe(value)
    return number if number is not None and number >= 0 else None


def _ordered(low: float | None, high: float | None) -> tuple[float | None, float | None]:
    if low is not None and high is not None and low > high:
        return high, low
    return low, high


def coerce_filter(params: dict) -> ExtractedFilter:
    """
    Normalize a loosely typed filter dict into an ExtractedFilter.

    Accepts camelCase or snake_case keys. Invalid values are dropped with a
    debug log; this function never raises for bad values.

    Args:
        params: Filter dict, e.g. {"propertyType": "villa", "bedrooms": "3"}

    Returns:
        A valid ExtractedFilter
    """
    if not isinstance(params, dict):
        logger.debug(f"Cannot coerce filter of type {type(params).__name__}")
        return ExtractedFilter()

    price_min, price_max = _ordered(
        _non_negative(_get(params, "price_min", "priceMin")),
        _non_negative(_get(params, "price_max", "priceMax")),
    )
    size_min, size_max = _ordered(
        _non_negative(_get(params, "size_min", "sizeMin")),
        _non_negative(_get(params, "size_max", "sizeMax")),
    )

    amenities: list[Amenity] = []
    raw_amenities = params.get("amenities")
    if isinstance(raw_amenities, list):
        for raw in raw_amenities:
            amenity = map_amenity(raw)
            if amenity is None:
                logger.debug(f"Dropped unknown amenity: {raw!r}")
            elif amenity not in amenities:
                amenities.append(amenity)

    keywords: list[str] = []
    raw_keywords = params.get("keywords")
    if isinstance(raw_keywords, list):
        keywords = [k.strip() for k in raw_keywords if isinstance(k, str) and k.strip()]

    neighborhood = params.get("neighborhood")
    neighborhood = neighborhood.strip() or None if isinstance(neighborhood, str) else None

    furnished = params.get("furnished")
    garages = params.get("garages")

    return ExtractedFilter(
        property_type=_match_enum(PropertyType, _get(params, "property_type", "propertyType")),
        status=match_status(params.get("status")),
        bedrooms=_count(params.get("bedrooms")),
        bathrooms=_count(params.get("bathrooms")),
        price_min=price_min,
        price_max=price_max,
        size_min=size_min,
        size_max=size_max,
        city=match_city(params.get("city")),
        neighborhood=neighborhood,
        amenities=sorted(amenities, key=list(Amenity).index),
        furnished=None if furnished is None else bool(furnished),
        garages=None if garages is None else bool(garages),
        keywords=keywords,
        view_type=match_view_type(_get(params, "view_type", "viewType")),
    )
