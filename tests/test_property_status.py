import pytest

from aqar_query.core.enums import PropertyType, Status
from aqar_query.core.extractor import ParseContext
from aqar_query.core.normalization import normalize_query
from aqar_query.extractors.property_type import PropertyTypeExtractor
from aqar_query.extractors.status import STATUS_PRECEDENCE, StatusExtractor


def run_pass(extractor, query: str) -> ParseContext:
    context = ParseContext(query=normalize_query(query))
    extractor.extract(context)
    return context


class TestPropertyType:
    @pytest.mark.parametrize(
        "query, expected",
        [
            ("Apartment for rent", PropertyType.APARTMENT),
            ("villas in latakia", PropertyType.VILLA),
            ("office space", PropertyType.OFFICE),
            ("land for sale", PropertyType.LAND),
            ("commercial shop", PropertyType.COMMERCIAL),
            ("holiday home by the sea", PropertyType.HOLIDAY_HOME),
            ("2 bedroom flat", PropertyType.APARTMENT),
            ("family house", PropertyType.VILLA),
            ("chalet near the beach", PropertyType.HOLIDAY_HOME),
            ("summer house", PropertyType.HOLIDAY_HOME),
            ("شقة للبيع", PropertyType.APARTMENT),
            ("فيلا في حمص", PropertyType.VILLA),
            ("مكتب تجاري", PropertyType.OFFICE),
            ("ارض زراعية", PropertyType.LAND),
            ("محل للإيجار", PropertyType.COMMERCIAL),
            ("شاليه على البحر", PropertyType.HOLIDAY_HOME),
        ],
    )
    def test_property_types(self, query, expected):
        assert run_pass(PropertyTypeExtractor(), query).draft.property_type == expected

    def test_canonical_english_name_wins_over_synonym(self):
        # "home" alone would be Villa
        context = run_pass(PropertyTypeExtractor(), "holiday home")
        assert context.draft.property_type == PropertyType.HOLIDAY_HOME
        assert context.draft.matched_rules["property_type"] == "en_name:Holiday Home"

    def test_english_needs_whole_word(self):
        assert run_pass(PropertyTypeExtractor(), "landmark").draft.property_type is None

    @pytest.mark.parametrize("query", ["بيت ارضي في حمص", "طابق أرضي", "ارضية سيراميك"])
    def test_ground_floor_is_not_land(self, query):
        assert run_pass(PropertyTypeExtractor(), query).draft.property_type is None

    def test_land_with_article(self):
        assert run_pass(PropertyTypeExtractor(), "الارض للبيع").draft.property_type == PropertyType.LAND

    def test_nothing_found(self):
        assert run_pass(PropertyTypeExtractor(), "something in aleppo").draft.property_type is None


class TestStatus:
    @pytest.mark.parametrize(
        "query, expected",
        [
            ("villa for sale", Status.SALE),
            ("apartment for rent", Status.RENT),
            ("looking to buy", Status.SALE),
            ("rental in homs", Status.RENT),
            ("شقة للبيع", Status.SALE),
            ("شقة للإيجار", Status.RENT),
            ("شقة للايجار", Status.RENT),
            ("شقة اجار", Status.RENT),
            ("بدي شراء شقة", Status.SALE),
        ],
    )
    def test_status(self, query, expected):
        assert run_pass(StatusExtractor(), query).draft.status == expected

    def test_rent_wins_over_sale(self):
        assert run_pass(StatusExtractor(), "villa for sale or rent").draft.status == Status.RENT

    def test_english_wins_over_arabic(self):
        assert run_pass(StatusExtractor(), "للبيع apartment for rent").draft.status == Status.RENT
        assert run_pass(StatusExtractor(), "للإيجار villa for sale").draft.status == Status.SALE

    def test_spring_is_not_a_sale(self):
        assert run_pass(StatusExtractor(), "فصل الربيع").draft.status is None

    def test_english_needs_whole_word(self):
        assert run_pass(StatusExtractor(), "parent wholesale").draft.status is None

    def test_precedence_is_data(self):
        assert STATUS_PRECEDENCE[0] == ("en", Status.RENT)
        assert [rule.name for rule in StatusExtractor.rules] == ["en:rent", "en:sale", "ar:rent", "ar:sale"]
