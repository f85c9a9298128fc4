import re

from aqar_query.core.rules import (
    AR_WORD_START,
    Rule,
    any_phrase,
    constant,
    en_words,
    find_unblocked,
    first_match,
    is_blocked,
)


class TestFirstMatch:
    def test_rule_order_is_priority(self):
        rules = (
            Rule("first", re.compile(r"b"), lambda m: "from first"),
            Rule("second", re.compile(r"a"), lambda m: "from second"),
        )
        hit = first_match(rules, "a b")
        assert hit.name == "first"
        assert hit.value == "from first"

    def test_none_from_applier_tries_next_match_then_next_rule(self):
        rules = (
            Rule("even", re.compile(r"\d"), lambda m: int(m.group()) if int(m.group()) % 2 == 0 else None),
            Rule("any", re.compile(r"\d"), lambda m: "fallback"),
        )
        assert first_match(rules, "1 3 4").value == 4
        assert first_match(rules, "1 3").value == "fallback"

    def test_constant_applier(self):
        rules = (Rule("flag", re.compile(r"yes"), constant(True)),)
        assert first_match(rules, "say yes").value is True
        assert first_match(rules, "say no") is None

    def test_no_match(self):
        rules = (Rule("x", re.compile(r"x"), lambda m: True),)
        assert first_match(rules, "abc") is None

    def test_hit_keeps_match(self):
        hit = first_match((Rule("num", re.compile(r"\d+"), lambda m: m.group()),), "ab 42")
        assert hit.match.start() == 3


class TestPatternHelpers:
    def test_any_phrase_longest_first(self):
        pattern = re.compile(any_phrase(["حمام", "حمامين"]))
        assert pattern.search("شقة حمامين").group() == "حمامين"

    def test_any_phrase_escapes(self):
        assert re.search(any_phrase(["a/c", "s.p"]), "sxp") is None

    def test_en_words_whole_word(self):
        pattern = re.compile(en_words(["rent"]))
        assert pattern.search("for rent")
        assert not pattern.search("parent")
        assert not pattern.search("rented2")

    def test_arabic_word_start(self):
        pattern = re.compile(rf"{AR_WORD_START}ثلاث")
        assert pattern.search("ثلاث غرف")
        assert pattern.search("غرفة وثلاث")
        assert not pattern.search("الثلاث")


class TestBlockedContext:
    def test_span_inside_blocking_word(self):
        text = "شقة حمامين"
        start = text.index("حما")
        assert is_blocked(text, start, start + 3, ["حمامين"])

    def test_span_outside_blocking_word(self):
        text = "حمامين في حماة"
        start = text.index("حماة")
        assert not is_blocked(text, start, start + 3, ["حمامين"])

    def test_find_unblocked_skips_blocked_occurrences(self):
        text = "حمامين في حماة"
        assert find_unblocked(text, "حما", ["حمامين"]) == text.index("حماة")

    def test_find_unblocked_none(self):
        assert find_unblocked("شقة حمام", "حما", ["حمام"]) is None
        assert find_unblocked("شقة", "حما", ["حمام"]) is None
