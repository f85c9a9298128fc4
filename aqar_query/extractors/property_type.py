import re

from aqar_query.core.aliases import (
    PROPERTY_TYPE_KEYWORDS_AR,
    PROPERTY_TYPE_NAMES_EN,
    PROPERTY_TYPE_SYNONYMS_EN,
    PROPERTY_TYPES_AR_WHOLE_WORD,
)
from aqar_query.core.extractor import BaseExtractor, ParseContext
from aqar_query.core.rules import Rule, any_phrase, constant, en_words


def _ar_pattern(property_type, words) -> str:
    pattern = any_phrase(words)
    if property_type in PROPERTY_TYPES_AR_WHOLE_WORD:
        return rf"(?:{pattern})(?![\u0600-\u06FF])"
    return pattern


def _build_rules() -> tuple[Rule, ...]:
    rules = []
    for property_type, names in PROPERTY_TYPE_NAMES_EN.items():
        rules.append(Rule(f"en_name:{property_type.value}", re.compile(en_words(names)), constant(property_type)))
    for property_type, words in PROPERTY_TYPE_SYNONYMS_EN:
        rules.append(Rule(f"en_synonym:{property_type.value}", re.compile(en_words(words)), constant(property_type)))
    for property_type, words in PROPERTY_TYPE_KEYWORDS_AR:
        pattern = re.compile(_ar_pattern(property_type, words))
        rules.append(Rule(f"ar:{property_type.value}", pattern, constant(property_type)))
    return tuple(rules)


class PropertyTypeExtractor(BaseExtractor):
    """First category with a keyword hit wins; rule order is the tie-break."""

    name = "property_type"
    rules = _build_rules()

    def extract(self, context: ParseContext) -> None:
        hit = self.run_rules(self.rules, context, "property_type")
        if hit:
            context.draft.property_type = hit.value
