import re

from aqar_query.core.aliases import (
    AMENITY_KEYWORDS_AR,
    AMENITY_KEYWORDS_EN,
    FURNISHED_KEYWORDS_AR,
    FURNISHED_KEYWORDS_EN,
    GARAGE_KEYWORDS_AR,
    GARAGE_KEYWORDS_EN,
    KEYWORD_ADJECTIVES_EN,
    KEYWORD_TAGS_AR,
    UNFURNISHED_KEYWORDS_AR,
    UNFURNISHED_KEYWORDS_EN,
    VIEW_KEYWORDS,
    ViewKeywords,
)
from aqar_query.core.enums import Amenity
from aqar_query.core.extractor import BaseExtractor, ParseContext
from aqar_query.core.rules import Rule, any_phrase, constant, en_words

_EN_AMENITY_PATTERNS = tuple((re.compile(en_words([word])), amenity) for word, amenity in AMENITY_KEYWORDS_EN.items())
_EN_GARAGE = re.compile(en_words(GARAGE_KEYWORDS_EN))
_EN_ADJECTIVES = re.compile(en_words(KEYWORD_ADJECTIVES_EN))


# Unfurnished first: "غير مفروش" contains "مفروش"
FURNISHED_RULES = (
    Rule("en_unfurnished", re.compile(en_words(UNFURNISHED_KEYWORDS_EN)), constant(False)),
    Rule("ar_unfurnished", re.compile(any_phrase(UNFURNISHED_KEYWORDS_AR)), constant(False)),
    Rule("en_furnished", re.compile(en_words(FURNISHED_KEYWORDS_EN)), constant(True)),
    Rule("ar_furnished", re.compile(any_phrase(FURNISHED_KEYWORDS_AR)), constant(True)),
)


def _view_rule(view: ViewKeywords) -> Rule:
    pattern = re.compile(rf"{view.en}|{any_phrase(view.ar)}")
    return Rule(f"view:{view.view_type.value}", pattern, constant(view))


VIEW_RULES = tuple(_view_rule(view) for view in VIEW_KEYWORDS)


def find_amenities(text: str) -> set[Amenity]:
    found = {amenity for pattern, amenity in _EN_AMENITY_PATTERNS if pattern.search(text)}
    found.update(amenity for phrase, amenity in AMENITY_KEYWORDS_AR.items() if phrase in text)
    return found


def has_garage(text: str) -> bool:
    return bool(_EN_GARAGE.search(text)) or any(word in text for word in GARAGE_KEYWORDS_AR)


def find_keywords(text: str) -> list[str]:
    """English adjectives in order of appearance, then the Arabic tag groups."""
    keywords = [match.group(0) for match in _EN_ADJECTIVES.finditer(text)]
    for phrases, tags in KEYWORD_TAGS_AR:
        if any(phrase in text for phrase in phrases):
            keywords.extend(tags)
    return keywords


class FeaturesExtractor(BaseExtractor):
    """Amenities, furnishing, garage, view type and free keywords."""

    name = "features"

    def extract(self, context: ParseContext) -> None:
        draft = context.draft
        text = context.text

        draft.amenities |= find_amenities(text)

        furnished = self.run_rules(FURNISHED_RULES, context, "furnished")
        if furnished:
            draft.furnished = furnished.value

        if has_garage(text):
            draft.garages = True

        view = self.run_rules(VIEW_RULES, context, "view_type")
        if view:
            draft.view_type = view.value.view_type
            draft.keywords.extend(view.value.tags)

        draft.keywords.extend(find_keywords(text))
