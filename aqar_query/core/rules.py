"""
Ordered rule evaluation for extraction passes.

Each pass declares its rules as an ordered tuple of Rule objects. The
order of the tuple is the priority order: the first rule whose pattern
matches and whose applier returns a value wins.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from aqar_query.logger_setup import get_logger

logger = get_logger(__name__)

__all__ = [
    "AR_WORD_START",
    "Rule",
    "RuleHit",
    "any_phrase",
    "constant",
    "en_words",
    "find_unblocked",
    "first_match",
    "is_blocked",
]

# Start of an Arabic word, optionally after a conjunction/preposition prefix (و، ب).
AR_WORD_START = r"(?:(?<![\u0600-\u06FF])|(?<=(?<![\u0600-\u06FF])[وب]))"


@dataclass(frozen=True)
class Rule:
    """
    One extraction rule.

    Attributes:
        name: Stable identifier used in logs and tests
        pattern: Compiled pattern searched in the normalized query
        apply: Turns a match into a value; returning None lets the next match or rule try
    """

    name: str
    pattern: re.Pattern
    apply: Callable[[re.Match], Any]


@dataclass(frozen=True)
class RuleHit:
    """The rule that fired, its match and the value it produced."""

    rule: Rule
    match: re.Match
    value: Any

    @property
    def name(self) -> str:
        return self.rule.name


def first_match(rules: Iterable[Rule], text: str) -> RuleHit | None:
    """
    Evaluate rules in priority order against text.

    Every match of a rule is tried in position order before moving on to
    the next rule.

    Returns:
        The first RuleHit, or None if no rule produced a value
    """
    for rule in rules:
        for match in rule.pattern.finditer(text):
            value = rule.apply(match)
            if value is not None:
                logger.debug(f"Rule '{rule.name}' matched {match.group(0)!r} -> {value!r}")
                return RuleHit(rule=rule, match=match, value=value)
    return None


def constant(value: Any) -> Callable[[re.Match], Any]:
    """Applier that ignores the match and always returns value."""
    return lambda match: value


def any_phrase(phrases: Iterable[str]) -> str:
    """Build a regex alternation of literal phrases, longest first."""
    return "|".join(re.escape(p) for p in sorted(set(phrases), key=len, reverse=True))


def en_words(words: Iterable[str]) -> str:
    """Build a whole-word regex for English words or phrases, longest first."""
    return rf"(?<![a-z0-9])(?:{any_phrase(words)})(?![a-z0-9])"


# =============================================================================
# BLOCKED-CONTEXT GUARD
# =============================================================================


def is_blocked(text: str, start: int, end: int, blocking_words: Iterable[str]) -> bool:
    """
    Check whether the span text[start:end] lies inside a blocking word.

    Args:
        text: Full text that was searched
        start: Start offset of the candidate match
        end: End offset of the candidate match
        blocking_words: Words whose occurrences swallow embedded matches

    Returns:
        True if any occurrence of a blocking word covers the whole span
    """
    for word in blocking_words:
        if len(word) < end - start:
            continue
        for occurrence in re.finditer(re.escape(word), text):
            if occurrence.start() <= start and end <= occurrence.end():
                return True
    return False


def find_unblocked(text: str, phrase: str, blocking_words: Iterable[str]) -> int | None:
    """
    Find the first occurrence of phrase that is not embedded in a blocking word.

    Returns:
        Start offset of the accepted occurrence, or None
    """
    blocking_words = tuple(blocking_words)
    for occurrence in re.finditer(re.escape(phrase), text):
        if is_blocked(text, occurrence.start(), occurrence.end(), blocking_words):
            logger.debug(f"Rejected {phrase!r} at {occurrence.start()}: inside a blocking word")
            continue
        return occurrence.start()
    return None
