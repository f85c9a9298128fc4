import pytest

from aqar_query.core.extractor import ParseContext
from aqar_query.core.normalization import normalize_query
from aqar_query.extractors.rooms import BATHROOM_RULES, BEDROOM_RULES, RoomCountExtractor


def run_pass(query: str) -> ParseContext:
    context = ParseContext(query=normalize_query(query))
    RoomCountExtractor().extract(context)
    return context


class TestBedrooms:
    @pytest.mark.parametrize(
        "query, expected",
        [
            ("3 bedroom apartment", 3),
            ("apartment with 2 bedrooms", 2),
            ("4br villa", 4),
            ("bedrooms: 5", 5),
            ("three bedrooms", 3),
            ("شقة غرفتين", 2),
            ("شقة غرفتان", 2),
            ("شقة 4 غرف", 4),
            ("شقة ٤ غرف", 4),
            ("غرف 3", 3),
            ("ثلاث غرف", 3),
            ("اربعة غرف", 4),
            ("غرفة واحدة", 1),
            ("شقة غرفة", 1),
        ],
    )
    def test_bedroom_forms(self, query, expected):
        assert run_pass(query).draft.bedrooms == expected

    def test_dual_is_not_read_as_singular(self):
        context = run_pass("شقة غرفتين")
        assert context.draft.bedrooms == 2
        assert context.draft.matched_rules["bedrooms"] == "ar_dual"

    def test_digits_win_over_bare_word(self):
        context = run_pass("شقة 5 غرف")
        assert context.draft.matched_rules["bedrooms"] == "ar_digits_noun"

    def test_no_bedrooms(self):
        assert run_pass("villa for sale").draft.bedrooms is None

    def test_zero_is_not_a_count(self):
        assert run_pass("0 bedrooms").draft.bedrooms is None

    def test_bathroom_word_is_not_a_bedroom(self):
        assert run_pass("2 bathrooms").draft.bedrooms is None

    def test_range_of_rooms_takes_the_count_next_to_the_noun(self):
        context = run_pass("شقة من 3 الى 4 غرف")
        assert context.draft.bedrooms == 4
        assert context.draft.matched_rules["bedrooms"] == "ar_digits_noun"


class TestBathrooms:
    @pytest.mark.parametrize(
        "query, expected",
        [
            ("2 bathrooms", 2),
            ("villa with 3 baths", 3),
            ("two bathrooms", 2),
            ("شقة حمامين", 2),
            ("حمامان", 2),
            ("ثلاث حمامات", 3),
            ("حمام واحد", 1),
            ("شقة 2 حمام", 2),
            ("حمامات 3", 3),
            ("شقة حمام", 1),
            ("شقة حمامات", 1),
        ],
    )
    def test_bathroom_forms(self, query, expected):
        assert run_pass(query).draft.bathrooms == expected

    def test_swimming_pool_is_not_a_bathroom(self):
        assert run_pass("فيلا مع حمام سباحة").draft.bathrooms is None

    def test_real_bathroom_next_to_swimming_pool(self):
        assert run_pass("فيلا حمامين و حمام سباحة").draft.bathrooms == 2


class TestRoomSignals:
    def test_salon_seen(self):
        context = run_pass("شقة غرفتين وصالون")
        assert context.draft.salon_seen is True
        # The pass itself does not adjust the count
        assert context.draft.bedrooms == 2

    def test_salon_hall_spelling(self):
        assert run_pass("شقة مع صالة").draft.salon_seen is True

    def test_utility_seen(self):
        context = run_pass("شقة مع منافع")
        assert context.draft.utility_seen is True
        assert context.draft.bathrooms is None

    def test_no_signals(self):
        context = run_pass("apartment")
        assert context.draft.salon_seen is False
        assert context.draft.utility_seen is False


class TestRuleOrder:
    def test_bedroom_rule_order(self):
        names = [rule.name for rule in BEDROOM_RULES]
        assert names.index("ar_dual") < names.index("ar_single_bare")
        assert names[-1] == "ar_single_bare"

    def test_bathroom_rule_order(self):
        names = [rule.name for rule in BATHROOM_RULES]
        assert names.index("ar_dual") < names.index("ar_bare")
        assert names[-1] == "ar_bare"
