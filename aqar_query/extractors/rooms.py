"""
Bedroom and bathroom counts.

Both counts may be written as Latin or Arabic-Indic digits (already
normalized), English number words, or Arabic count words with gender and
dual inflection. Rules are ordered longest/most specific first so that a
dual form ("غرفتين", "حمامين") is never read as its singular stem.

The pass also records whether a salon token or a utility-room token was
seen; the assembler turns those into the bedroom / bathroom adjustments.
"""

import re

from aqar_query.core.aliases import (
    AR_COUNT_WORDS,
    BATHROOM_BLOCKING_WORDS,
    EN_NUMBER_WORDS,
    SALON_TOKENS,
    UTILITY_TOKENS,
)
from aqar_query.core.extractor import BaseExtractor, ParseContext
from aqar_query.core.normalization import arabic_count_to_number, word_to_number
from aqar_query.core.rules import AR_WORD_START, Rule, any_phrase, constant, is_blocked

_EN_BEDROOM_NOUN = r"(?:bedrooms?|beds?|br|rooms?)"
_EN_BATHROOM_NOUN = r"(?:bathrooms?|baths?)"
_EN_NUMBER_WORD = any_phrase(EN_NUMBER_WORDS)
_AR_COUNT_WORD = any_phrase(AR_COUNT_WORDS)


def _positive(value: int | None) -> int | None:
    return value if value is not None and value > 0 else None


def _digits(match: re.Match) -> int | None:
    return _positive(int(match.group(1)))


def _en_word(match: re.Match) -> int | None:
    return _positive(word_to_number(match.group(1)))


def _ar_word(match: re.Match) -> int | None:
    return _positive(arabic_count_to_number(match.group(1)))


BEDROOM_RULES = (
    Rule("en_digits_noun", re.compile(rf"(\d+)\s*{_EN_BEDROOM_NOUN}\b"), _digits),
    Rule("en_noun_digits", re.compile(rf"\b{_EN_BEDROOM_NOUN}\s*(?:of|with|has|:)?\s*(\d{{1,2}})(?![\d.,])"), _digits),
    Rule("en_word_noun", re.compile(rf"\b({_EN_NUMBER_WORD})\s*{_EN_BEDROOM_NOUN}\b"), _en_word),
    Rule("ar_dual", re.compile(r"غرفتين|غرفتان"), constant(2)),
    Rule("ar_digits_noun", re.compile(r"(\d+)\s*غرف"), _digits),
    Rule("ar_noun_digits", re.compile(r"غرف(?:ة|ه|ات)?\s*(\d{1,2})(?![\d.,])"), _digits),
    Rule("ar_count_noun", re.compile(rf"{AR_WORD_START}({_AR_COUNT_WORD})\s*غرف"), _ar_word),
    Rule("ar_single_explicit", re.compile(r"غرف(?:ة|ه)\s*(?:واحدة|واحده|وحدة)"), constant(1)),
    Rule("ar_single_bare", re.compile(r"غرفة|غرفه"), constant(1)),
)


def _bathroom_rule(name: str, pattern: str, apply) -> Rule:
    """Bathroom rules skip matches that sit inside a swimming-pool phrase."""

    def guarded(match: re.Match):
        if is_blocked(match.string, match.start(), match.end(), BATHROOM_BLOCKING_WORDS):
            return None
        return apply(match)

    return Rule(name, re.compile(pattern), guarded)


BATHROOM_RULES = (
    _bathroom_rule("en_digits_noun", rf"(\d+)\s*{_EN_BATHROOM_NOUN}\b", _digits),
    _bathroom_rule("en_noun_digits", rf"\b{_EN_BATHROOM_NOUN}\s*(?:of|with|has|:)?\s*(\d{{1,2}})(?![\d.,])", _digits),
    _bathroom_rule("en_word_noun", rf"\b({_EN_NUMBER_WORD})\s*{_EN_BATHROOM_NOUN}\b", _en_word),
    _bathroom_rule("ar_dual", r"حمامين|حمامان", constant(2)),
    _bathroom_rule("ar_count_noun", rf"{AR_WORD_START}({_AR_COUNT_WORD})\s*حمام", _ar_word),
    _bathroom_rule("ar_single_explicit", r"حمام\s*(?:واحد|وحيد)", constant(1)),
    _bathroom_rule("ar_digits_noun", r"(\d+)\s*حمام", _digits),
    _bathroom_rule("ar_noun_digits", r"حمام(?:ات)?\s*(\d{1,2})(?![\d.,])", _digits),
    _bathroom_rule("ar_bare", r"حمامات|حمام", constant(1)),
)


class RoomCountExtractor(BaseExtractor):
    name = "room_count"

    def extract(self, context: ParseContext) -> None:
        draft = context.draft

        bedrooms = self.run_rules(BEDROOM_RULES, context, "bedrooms")
        if bedrooms:
            draft.bedrooms = bedrooms.value

        bathrooms = self.run_rules(BATHROOM_RULES, context, "bathrooms")
        if bathrooms:
            draft.bathrooms = bathrooms.value

        draft.salon_seen = context.contains_any(SALON_TOKENS)
        draft.utility_seen = context.contains_any(UTILITY_TOKENS)
