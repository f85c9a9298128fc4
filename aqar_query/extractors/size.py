"""
Size extraction.

Uses the price grammar with an area unit in place of the currency: a
number only counts as a size when a unit follows it or an area marker
("size", "area", "مساحة") introduces it.
"""

import re

from aqar_query.core.aliases import AREA_MARKER_PATTERNS
from aqar_query.core.extractor import BaseExtractor, ParseContext
from aqar_query.core.normalization import parse_number
from aqar_query.core.rules import AR_WORD_START, Rule
from aqar_query.extractors.price import AREA_UNIT, NUMBER

_UNIT = rf"\s*{AREA_UNIT}"
_AREA_MARKER = rf"(?:{'|'.join(AREA_MARKER_PATTERNS)})"

_EN_UPPER = r"\b(?:under|below|less\s+than|max(?:imum)?|up\s+to|at\s+most|smaller\s+than)"
_AR_UPPER = rf"{AR_WORD_START}(?:أقل\s+من|اقل\s+من|تحت|لا\s+يتجاوز|أصغر\s+من|اصغر\s+من)"
_EN_LOWER = r"\b(?:over|above|more\s+than|min(?:imum)?|at\s+least|bigger\s+than|larger\s+than)"
_AR_LOWER = rf"{AR_WORD_START}(?:أكثر\s+من|اكثر\s+من|فوق|أكبر\s+من|اكبر\s+من|لا\s+يقل\s+عن)"
_EN_APPROX = r"\b(?:around|about|approximately|roughly)"
_AR_APPROX = rf"{AR_WORD_START}(?:بحدود|حدود|بحوالي|حوالي|تقريبا)"


def _area(prefix: str) -> str:
    return rf"(?P<{prefix}>{NUMBER})"


def _with_unit(marker: str) -> re.Pattern:
    return re.compile(rf"{marker}\s*:?\s*{_area('v')}{_UNIT}")


def _ordered_range(match: re.Match) -> tuple[float, float] | None:
    low = parse_number(match.group("lo"))
    high = parse_number(match.group("hi"))
    if low is None or high is None:
        return None
    return (low, high) if low <= high else (high, low)


def _single(match: re.Match) -> float | None:
    return parse_number(match.group("v"))


_RANGE_TAIL = rf"{_area('lo')}(?:{_UNIT})?\s*(?:and|to|-|و|الى|إلى)\s*{_area('hi')}{_UNIT}"

RANGE_RULES = (
    Rule("en_range", re.compile(rf"\b(?:between|from)\s+{_RANGE_TAIL}"), _ordered_range),
    Rule("ar_range", re.compile(rf"{AR_WORD_START}(?:بين|من)\s*{_RANGE_TAIL}"), _ordered_range),
    Rule("dash_range", re.compile(rf"{_area('lo')}\s*-\s*{_area('hi')}{_UNIT}"), _ordered_range),
)
UPPER_RULES = (
    Rule("en_upper", _with_unit(_EN_UPPER), _single),
    Rule("ar_upper", _with_unit(_AR_UPPER), _single),
)
LOWER_RULES = (
    Rule("en_lower", _with_unit(_EN_LOWER), _single),
    Rule("ar_lower", _with_unit(_AR_LOWER), _single),
)
APPROXIMATE_RULES = (
    Rule("en_approximate", _with_unit(_EN_APPROX), _single),
    Rule("ar_approximate", _with_unit(_AR_APPROX), _single),
)
BARE_RULES = (
    Rule("unit", re.compile(rf"{_area('v')}{_UNIT}"), _single),
    Rule("marker", re.compile(rf"{_AREA_MARKER}\s*(?:of\s+)?:?\s*{_area('v')}"), _single),
)


class SizeExtractor(BaseExtractor):
    """Sets size_min / size_max; a bare or approximate size is an upper bound."""

    name = "size"

    def extract(self, context: ParseContext) -> None:
        draft = context.draft

        hit = self.run_rules(RANGE_RULES, context, "size")
        if hit:
            draft.size_min, draft.size_max = hit.value
            return

        hit = self.run_rules(UPPER_RULES, context, "size")
        if hit:
            draft.size_max = hit.value
            return

        hit = self.run_rules(LOWER_RULES, context, "size")
        if hit:
            draft.size_min = hit.value
            return

        for rules in (APPROXIMATE_RULES, BARE_RULES):
            hit = self.run_rules(rules, context, "size")
            if hit:
                draft.size_max = hit.value
                return
