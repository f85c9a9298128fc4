"""
City and neighborhood extraction.

Arabic city aliases are short and are matched as substrings, so every
candidate hit goes through the blocked-context guard before it is
accepted ("حما" inside "حمامين" is a bathroom count, not Hama).
"""

import re

from aqar_query.core.aliases import (
    CITY_ALIASES,
    CITY_BLOCKING_WORDS,
    DAMASCUS_COLLOQUIAL_ALIASES,
    DAMASCUS_COLLOQUIAL_BLOCKING_WORDS,
    NEIGHBORHOOD_ALIASES,
    NEIGHBORHOOD_STOPWORDS,
)
from aqar_query.core.enums import City
from aqar_query.core.extractor import BaseExtractor, ParseContext
from aqar_query.core.rules import Rule, en_words, find_unblocked
from aqar_query.logger_setup import get_logger

logger = get_logger(__name__)

_EN_NEIGHBORHOOD_MARKER = re.compile(r"\b(?:in|at|near|area|neighborhood|neighbourhood)\s+")
_AR_NEIGHBORHOOD_MARKER = re.compile(r"(?:^|\s)(?:ال)?حي\s+")
# "في" is too common to take an arbitrary next word; only curated names count after it
_AR_IN_MARKER = re.compile(r"(?:^|\s)في\s+")

_TOKEN = re.compile(r"[^\s,.;:!?()]+")
_MIN_NEIGHBORHOOD_LENGTH = 3

# Longest alias first so "كفر سوسة" beats a shorter prefix
_NEIGHBORHOOD_KEYS = tuple(sorted(NEIGHBORHOOD_ALIASES, key=len, reverse=True))

_CITY_NAMES = frozenset(
    name
    for city, aliases in CITY_ALIASES.items()
    for name in (city.value.lower(), *aliases.en, *aliases.ar)
)


def _city_rule(city: City) -> Rule:
    """EN spellings by whole word, AR aliases by guarded substring."""
    aliases = CITY_ALIASES[city]
    en_pattern = re.compile(en_words(aliases.en))
    ar_aliases = tuple(
        sorted(
            (alias for alias in aliases.ar if alias not in DAMASCUS_COLLOQUIAL_ALIASES),
            key=len,
            reverse=True,
        )
    )

    def apply(match: re.Match) -> City | None:
        text = match.string
        if en_pattern.search(text):
            return city
        for alias in ar_aliases:
            if find_unblocked(text, alias, CITY_BLOCKING_WORDS) is not None:
                return city
        return None

    # The pattern only anchors the rule; apply() does the actual lookup
    return Rule(f"city:{city.value}", re.compile(r"^"), apply)


def _damascus_colloquial(match: re.Match) -> City | None:
    for alias in DAMASCUS_COLLOQUIAL_ALIASES:
        if find_unblocked(match.string, alias, DAMASCUS_COLLOQUIAL_BLOCKING_WORDS) is not None:
            return City.DAMASCUS
    return None


CITY_RULES = (
    Rule("damascus_colloquial", re.compile(r"شام"), _damascus_colloquial),
    *(_city_rule(city) for city in City),
)


def is_city_name(candidate: str) -> bool:
    return candidate.lower() in _CITY_NAMES


def normalize_neighborhood(token: str) -> str:
    """Title-case Latin names; Arabic names are kept as written."""
    if re.search(r"[a-z]", token):
        return token.title()
    return token


def _alias_at(tail: str) -> str | None:
    for alias in _NEIGHBORHOOD_KEYS:
        if tail.startswith(alias) and (len(tail) == len(alias) or not tail[len(alias)].isalnum()):
            return NEIGHBORHOOD_ALIASES[alias]
    return None


def _accept(candidate: str | None) -> str | None:
    if not candidate:
        return None
    if len(candidate) < _MIN_NEIGHBORHOOD_LENGTH:
        logger.debug(f"Rejected neighborhood {candidate!r}: too short")
        return None
    if any(char.isdigit() for char in candidate):
        logger.debug(f"Rejected neighborhood {candidate!r}: contains digits")
        return None
    if candidate.lower() in NEIGHBORHOOD_STOPWORDS:
        logger.debug(f"Rejected neighborhood {candidate!r}: stopword")
        return None
    if is_city_name(candidate):
        logger.debug(f"Rejected neighborhood {candidate!r}: city name")
        return None
    return candidate


def _neighborhood_after_marker(match: re.Match) -> str | None:
    tail = match.string[match.end():]
    alias = _alias_at(tail)
    if alias:
        return alias
    token = _TOKEN.match(tail)
    if not token:
        return None
    return _accept(normalize_neighborhood(token.group(0)))


def _neighborhood_alias_only(match: re.Match) -> str | None:
    return _alias_at(match.string[match.end():])


NEIGHBORHOOD_RULES = (
    Rule("en_marker", _EN_NEIGHBORHOOD_MARKER, _neighborhood_after_marker),
    Rule("ar_marker", _AR_NEIGHBORHOOD_MARKER, _neighborhood_after_marker),
    Rule("ar_in_alias", _AR_IN_MARKER, _neighborhood_alias_only),
)


class LocationExtractor(BaseExtractor):
    name = "location"

    def extract(self, context: ParseContext) -> None:
        city = self.run_rules(CITY_RULES, context, "city")
        if city:
            context.draft.city = city.value

        neighborhood = self.run_rules(NEIGHBORHOOD_RULES, context, "neighborhood")
        if neighborhood:
            context.draft.neighborhood = neighborhood.value
