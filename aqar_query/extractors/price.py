"""
Price extraction.

Branches are tried in a fixed order and are mutually exclusive:

    range -> upper bound -> lower bound -> approximate -> bare amount

An amount is a digit string with optional grouping and an optional scale
word ("50k", "1.5 مليون", "150,000"), or a spelled-out Arabic amount from
a fixed table ("خمسين ألف"). Currency tokens are only evidence that a
number is a price; no conversion is ever done.
"""

import re

from aqar_query.core.aliases import (
    AMOUNT_SCALE_WORDS,
    AR_AMOUNT_PHRASES,
    AREA_UNIT_PATTERNS,
    COUNTED_NOUN_PATTERNS,
    CURRENCY_PATTERNS,
    PRICE_MARKER_PATTERNS,
)
from aqar_query.core.extractor import BaseExtractor, ParseContext
from aqar_query.core.normalization import parse_amount
from aqar_query.core.rules import AR_WORD_START, Rule, any_phrase

CURRENCY = rf"(?:{'|'.join(CURRENCY_PATTERNS)})(?![a-z])"
AREA_UNIT = rf"(?:{'|'.join(AREA_UNIT_PATTERNS)})(?![a-z])"
SCALE = rf"(?:{any_phrase(AMOUNT_SCALE_WORDS)})(?![a-z])"
NUMBER = r"(?<![a-z\d.,])(?<!م)\d+(?:[.,]\d+)*(?!\d|[.,]\d)"

_NOT_A_PRICE = rf"(?!\s*(?:{AREA_UNIT}|{'|'.join(COUNTED_NOUN_PATTERNS)}))"
_AR_AMOUNT_WORDS = rf"{AR_WORD_START}(?:{any_phrase(AR_AMOUNT_PHRASES)})(?![\u0600-\u06FF])"

_CURRENCY_BEFORE = re.compile(rf"{CURRENCY}\s*$")
_CURRENCY_AFTER = re.compile(rf"\s*{CURRENCY}")
_PRICE_MARKER = re.compile("|".join(PRICE_MARKER_PATTERNS))

# Below this a bare number needs other evidence to count as a price
MIN_BARE_PRICE = 1000


def amount(prefix: str) -> str:
    """Regex for one price amount; groups are named <prefix>_num / _scale / _words."""
    return (
        rf"(?:(?P<{prefix}_num>{NUMBER})(?:\s*(?P<{prefix}_scale>{SCALE}))?"
        rf"|(?P<{prefix}_words>{_AR_AMOUNT_WORDS})){_NOT_A_PRICE}"
    )


def amount_value(match: re.Match, prefix: str) -> float | None:
    words = match.group(f"{prefix}_words")
    if words:
        return float(AR_AMOUNT_PHRASES[words])
    return parse_amount(match.group(f"{prefix}_num"), match.group(f"{prefix}_scale"))


def has_currency(match: re.Match) -> bool:
    text = match.string
    return bool(_CURRENCY_BEFORE.search(text[: match.start()]) or _CURRENCY_AFTER.match(text, match.end()))


_OPT_CURRENCY = rf"(?:{CURRENCY}\s*)?"

_EN_RANGE = re.compile(
    rf"\b(?:between|from)\s+{_OPT_CURRENCY}{amount('lo')}\s*{_OPT_CURRENCY}(?:and|to|-)\s*{_OPT_CURRENCY}{amount('hi')}"
)
_AR_RANGE = re.compile(
    rf"{AR_WORD_START}(?:بين|من)\s*{amount('lo')}\s*{_OPT_CURRENCY}(?:و|الى|إلى|لـ|ل|-)\s*{amount('hi')}"
)
_DASH_RANGE = re.compile(rf"{amount('lo')}\s*-\s*{amount('hi')}")

_EN_UPPER = r"\b(?:under|below|less\s+than|max(?:imum)?|up\s+to|at\s+most|not\s+more\s+than)"
_AR_UPPER = rf"{AR_WORD_START}(?:أقل\s+من|اقل\s+من|تحت|لا\s+يتجاوز|لا\s+يزيد\s+عن|حد\s+أقصى|حد\s+اقصى)"
_EN_LOWER = r"\b(?:over|above|more\s+than|min(?:imum)?|at\s+least|starting\s+(?:from|at))"
_AR_LOWER = rf"{AR_WORD_START}(?:أكثر\s+من|اكثر\s+من|أعلى\s+من|اعلى\s+من|فوق|لا\s+يقل\s+عن)"
_EN_APPROX = r"(?:\b(?:around|about|approximately|approx\.?|roughly)|~)"
_AR_APPROX = rf"{AR_WORD_START}(?:بحدود|حدود|بحوالي|حوالي|تقريبا|تقريباً)"


def _bounded(marker: str) -> re.Pattern:
    return re.compile(rf"{marker}\s*:?\s*{_OPT_CURRENCY}{amount('v')}")


def _ordered_range(match: re.Match) -> tuple[float, float] | None:
    low = amount_value(match, "lo")
    high = amount_value(match, "hi")
    if low is None or high is None:
        return None
    # "بين 100 و 200 ألف": a scale written only on the upper end covers both
    high_scale = match.group("hi_scale")
    if high_scale and not match.group("lo_scale") and not match.group("lo_words"):
        scaled = low * AMOUNT_SCALE_WORDS.get(high_scale, 1)
        if scaled <= high:
            low = scaled
    return (low, high) if low <= high else (high, low)


def _dash_range(match: re.Match) -> tuple[float, float] | None:
    if not has_currency(match):
        return None
    return _ordered_range(match)


def _single(match: re.Match) -> float | None:
    return amount_value(match, "v")


def _bare(match: re.Match) -> float | None:
    value = amount_value(match, "v")
    if value is None:
        return None
    # Spelled-out words below MIN_BARE_PRICE ("عشرين") need the same evidence as digits
    evidence = (
        match.group("v_scale")
        or has_currency(match)
        or _PRICE_MARKER.search(match.string)
        or value >= MIN_BARE_PRICE
    )
    return value if evidence else None


RANGE_RULES = (
    Rule("en_range", _EN_RANGE, _ordered_range),
    Rule("ar_range", _AR_RANGE, _ordered_range),
    Rule("dash_range", _DASH_RANGE, _dash_range),
)
UPPER_RULES = (
    Rule("en_upper", _bounded(_EN_UPPER), _single),
    Rule("ar_upper", _bounded(_AR_UPPER), _single),
)
LOWER_RULES = (
    Rule("en_lower", _bounded(_EN_LOWER), _single),
    Rule("ar_lower", _bounded(_AR_LOWER), _single),
)
APPROXIMATE_RULES = (
    Rule("en_approximate", _bounded(_EN_APPROX), _single),
    Rule("ar_approximate", _bounded(_AR_APPROX), _single),
)
BARE_RULES = (Rule("bare", re.compile(amount("v")), _bare),)


class PriceExtractor(BaseExtractor):
    """Sets price_min / price_max from the first branch that matches."""

    name = "price"

    def extract(self, context: ParseContext) -> None:
        draft = context.draft

        hit = self.run_rules(RANGE_RULES, context, "price")
        if hit:
            draft.price_min, draft.price_max = hit.value
            return

        hit = self.run_rules(UPPER_RULES, context, "price")
        if hit:
            draft.price_max = hit.value
            return

        hit = self.run_rules(LOWER_RULES, context, "price")
        if hit:
            draft.price_min = hit.value
            return

        hit = self.run_rules(APPROXIMATE_RULES, context, "price")
        if hit:
            draft.price_max = hit.value
            draft.price_min = None
            return

        hit = self.run_rules(BARE_RULES, context, "price")
        if hit:
            draft.price_max = hit.value
