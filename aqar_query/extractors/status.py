import re

from aqar_query.core.aliases import STATUS_KEYWORDS_AR, STATUS_KEYWORDS_EN
from aqar_query.core.enums import Status
from aqar_query.core.extractor import BaseExtractor, ParseContext
from aqar_query.core.rules import Rule, any_phrase, en_words

# Precedence: English before Arabic, rent before sale within each language.
STATUS_PRECEDENCE = (
    ("en", Status.RENT),
    ("en", Status.SALE),
    ("ar", Status.RENT),
    ("ar", Status.SALE),
)


def _pattern(language: str, status: Status) -> re.Pattern:
    if language == "en":
        return re.compile(en_words(STATUS_KEYWORDS_EN[status]))
    # "بيع" must not match inside "ربيع" (spring)
    return re.compile(rf"(?<!ر)(?:{any_phrase(STATUS_KEYWORDS_AR[status])})")


class StatusExtractor(BaseExtractor):
    name = "status"
    rules = tuple(
        Rule(f"{language}:{status.value}", _pattern(language, status), lambda match, s=status: s)
        for language, status in STATUS_PRECEDENCE
    )

    def extract(self, context: ParseContext) -> None:
        hit = self.run_rules(self.rules, context, "status")
        if hit:
            context.draft.status = hit.value
