from aqar_query.core.enums import Amenity, City, Status, ViewType
from aqar_query.core.transforms import (
    coerce_filter,
    enum_value_or_str,
    map_amenity,
    match_city,
    match_status,
    match_view_type,
    to_float_safe,
    to_int_safe,
)


class TestEnumValueOrStr:
    def test_enum(self):
        assert enum_value_or_str(City.HOMS) == "Homs"

    def test_str(self):
        assert enum_value_or_str("Homs") == "Homs"


class TestSafeConversions:
    def test_to_int_safe(self):
        assert to_int_safe("3 bedrooms") == 3
        assert to_int_safe(2.9) == 2
        assert to_int_safe(4) == 4
        assert to_int_safe("none") is None
        assert to_int_safe(None) is None
        assert to_int_safe(True) is None

    def test_to_float_safe(self):
        assert to_float_safe("150,000") == 150000.0
        assert to_float_safe("1.5") == 1.5
        assert to_float_safe(7) == 7.0
        assert to_float_safe("") is None
        assert to_float_safe(None) is None


class TestMatchers:
    def test_match_city_exact_case_insensitive(self):
        assert match_city("aleppo") == City.ALEPPO
        assert match_city(" LATAKIA ") == City.LATAKIA

    def test_match_city_partial(self):
        assert match_city("Damascus city") == City.DAMASCUS
        assert match_city("Tart") == City.TARTUS

    def test_match_city_unknown(self):
        assert match_city("Beirut") is None
        assert match_city("") is None
        assert match_city(None) is None

    def test_match_status_synonyms(self):
        assert match_status("Rental") == Status.RENT
        assert match_status("buy") == Status.SALE
        assert match_status("lease-to-own") is None

    def test_match_view_type(self):
        assert match_view_type("Ocean view") == ViewType.SEA
        assert match_view_type("mountain") == ViewType.MOUNTAIN
        assert match_view_type("open") == ViewType.OPEN
        assert match_view_type("nice view") == ViewType.GENERIC
        assert match_view_type("garden") is None

    def test_map_amenity(self):
        assert map_amenity("parking") == Amenity.PARKING
        assert map_amenity("A/C") == Amenity.AIR_CONDITIONING
        assert map_amenity("swimming pool") == Amenity.SWIMMING_POOL
        assert map_amenity("rooftop garden") is None
        assert map_amenity(3) is None


class TestCoerceFilter:
    def test_camel_case_input(self):
        result = coerce_filter(
            {
                "propertyType": "villa",
                "status": "for sale",
                "bedrooms": "3",
                "priceMax": "250000",
                "city": "homs",
                "viewType": "sea",
            }
        )

        assert result.property_type == "Villa"
        assert result.status == "sale"
        assert result.bedrooms == 3
        assert result.price_max == 250000
        assert result.city == "Homs"
        assert result.view_type == "sea view"

    def test_snake_case_input(self):
        result = coerce_filter({"property_type": "Holiday Home", "size_min": 80, "size_max": 120})
        assert result.property_type == "Holiday Home"
        assert result.size_min == 80
        assert result.size_max == 120

    def test_invalid_values_dropped(self):
        result = coerce_filter(
            {
                "propertyType": "castle",
                "bedrooms": 0,
                "bathrooms": -2,
                "priceMin": -5,
                "status": "maybe",
                "city": "Paris",
            }
        )
        assert result.is_empty()

    def test_inverted_range_is_ordered(self):
        result = coerce_filter({"priceMin": 300, "priceMax": 100})
        assert (result.price_min, result.price_max) == (100, 300)

    def test_amenities_mapped_deduplicated_and_ordered(self):
        result = coerce_filter({"amenities": ["Lift", "elevator", "parking", "helipad"]})
        assert result.amenities == ["Parking", "Lift"]

    def test_keywords_and_neighborhood_stripped(self):
        result = coerce_filter({"keywords": [" nice ", "", 5, "view"], "neighborhood": "  Mazzeh "})
        assert result.keywords == ["nice", "view"]
        assert result.neighborhood == "Mazzeh"

    def test_booleans(self):
        result = coerce_filter({"furnished": 0, "garages": "yes"})
        assert result.furnished is False
        assert result.garages is True

    def test_not_a_dict(self):
        assert coerce_filter(["villa"]).is_empty()
