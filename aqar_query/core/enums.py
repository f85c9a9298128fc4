"""
Enum classes for extracted search filter values.

These enums are the closed vocabularies shared with the downstream
query builder, so their values match the values stored on listings.
"""

from enum import Enum

__all__ = [
    "Amenity",
    "City",
    "PropertyType",
    "Status",
    "ViewType",
]


class PropertyType(str, Enum):
    """Type of property."""

    APARTMENT = "Apartment"
    VILLA = "Villa"
    OFFICE = "Office"
    LAND = "Land"
    COMMERCIAL = "Commercial"
    HOLIDAY_HOME = "Holiday Home"


class Status(str, Enum):
    """Listing status (offer type)."""

    SALE = "sale"
    RENT = "rent"


class City(str, Enum):
    """Syrian provinces."""

    ALEPPO = "Aleppo"
    AS_SUWAYDA = "As-Suwayda"
    DAMASCUS = "Damascus"
    DARAA = "Daraa"
    DEIR_EZ_ZUR = "Deir ez-Zur"
    HAMA = "Hama"
    HOMS = "Homs"
    IDLIB = "Idlib"
    LATAKIA = "Latakia"
    RAQQAH = "Raqqah"
    TARTUS = "Tartus"


class Amenity(str, Enum):
    """Amenities a listing can advertise."""

    SOLAR_ENERGY = "Solar energy system"
    STARLINK_INTERNET = "Star link internet"
    FIBER_INTERNET = "Fiber internet"
    BASIC_INTERNET = "Basic internet"
    PARKING = "Parking"
    LIFT = "Lift"
    AIR_CONDITIONING = "A/C"
    GYM = "Gym"
    SECURITY_CAMERAS = "Security cameras"
    RECEPTION = "Reception (nator)"
    BALCONY = "Balcony"
    SWIMMING_POOL = "Swimming pool"
    FIRE_ALARMS = "Fire alarms"


class ViewType(str, Enum):
    """View classification, highest priority first."""

    SEA = "sea view"
    MOUNTAIN = "mountain view"
    OPEN = "open view"
    GENERIC = "view"
