import pytest

from aqar_query.core.extractor import ParseContext
from aqar_query.core.normalization import normalize_query
from aqar_query.extractors.price import PriceExtractor


def run_pass(query: str) -> ParseContext:
    context = ParseContext(query=normalize_query(query))
    PriceExtractor().extract(context)
    return context


def price(query: str) -> tuple:
    draft = run_pass(query).draft
    return draft.price_min, draft.price_max


class TestRange:
    @pytest.mark.parametrize(
        "query, expected",
        [
            ("between 150000 and 300000 usd", (150000, 300000)),
            ("from $100k to $200k", (100000, 200000)),
            ("between 100 and 200k", (100000, 200000)),
            ("بين 100 و 200 ألف دولار", (100000, 200000)),
            ("من 50 الف الى 80 الف", (50000, 80000)),
            ("100000-200000 usd", (100000, 200000)),
            ("between 1.5 million and 2 million", (1500000, 2000000)),
        ],
    )
    def test_range_forms(self, query, expected):
        assert price(query) == expected

    def test_range_is_ordered(self):
        assert price("between 300000 and 150000 usd") == (150000, 300000)

    def test_dash_range_needs_currency(self):
        assert price("apartment 2-3") == (None, None)

    def test_range_of_rooms_is_not_a_price(self):
        assert price("between 2 and 3 bedrooms") == (None, None)

    def test_range_wins_over_approximate(self):
        assert price("between 100000 and 200000 usd around 150000") == (100000, 200000)


class TestBounds:
    @pytest.mark.parametrize(
        "query, expected",
        [
            ("apartment under 100k", (None, 100000)),
            ("less than 50000 dollars", (None, 50000)),
            ("max $80k", (None, 80000)),
            ("شقة أقل من 100 ألف", (None, 100000)),
            ("تحت 60 الف دولار", (None, 60000)),
            ("villa over 200000 usd", (200000, None)),
            ("at least 90k", (90000, None)),
            ("اكثر من 50 الف", (50000, None)),
        ],
    )
    def test_bound_forms(self, query, expected):
        assert price(query) == expected

    def test_size_bound_is_not_a_price(self):
        assert price("less than 200 sqm") == (None, None)


class TestApproximate:
    @pytest.mark.parametrize(
        "query, expected",
        [
            ("شقة بحدود 50 الف دولار", 50000),
            ("around 120k", 120000),
            ("حوالي مئة ألف", 100000),
            ("about 75000 usd", 75000),
        ],
    )
    def test_approximate_sets_max_only(self, query, expected):
        assert price(query) == (None, expected)

    def test_approximate_rule_recorded(self):
        context = run_pass("شقة بحدود 50 الف دولار")
        assert context.draft.matched_rules["price"] == "ar_approximate"


class TestBare:
    @pytest.mark.parametrize(
        "query, expected",
        [
            ("apartment 150000", 150000),
            ("apartment $500", 500),
            ("شقة 500 دولار", 500),
            ("villa 50k", 50000),
            ("price 700", 700),
            ("فيلا بمليون ونص", 1500000),
            ("شقة خمسين ألف", 50000),
            ("150,000 usd", 150000),
            ("٥٠ الف", 50000),
            ("شقة خمسين دولار", 50),
            ("سعر ميه", 100),
            ("شقة بعمر 5 سنوات بسعر 500 دولار", 500),
        ],
    )
    def test_bare_amounts(self, query, expected):
        assert price(query) == (None, expected)

    @pytest.mark.parametrize(
        "query",
        [
            "apartment 500",
            "3 bedrooms",
            "شقة 5 غرف",
            "apartment 120 sqm",
            "150 متر",
            "2 bathrooms",
            "5 floors",
            "شقة فيها ميه",
            "فيلا عشرين",
            "شقة عمرها عشرين سنة في حمص",
            "apartment less than 5 years old",
            "apartment under 10 minutes from the university",
            "villa built 6 months ago",
            "شقة 3 غرف اقل من 5 سنين",
            "شقة من 4 سنوات",
        ],
    )
    def test_not_a_price(self, query):
        assert price(query) == (None, None)

    def test_first_amount_with_evidence_wins(self):
        assert price("3 bedrooms 2 bathrooms 250000") == (None, 250000)
