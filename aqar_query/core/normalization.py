"""
Normalization of raw search queries.

Provides input validation, numeral normalization and number-word
conversion used by every extraction pass.

Features:
- Arabic-Indic (٠-٩) and Extended Arabic-Indic (۰-۹) digits become ASCII
- Latin text is lower-cased, Arabic letters are left untouched
- Spelled-out counts and amounts are converted through fixed lexicons
"""

import re
from dataclasses import dataclass

from aqar_query.config import app_config
from aqar_query.core.aliases import AMOUNT_SCALE_WORDS, AR_COUNT_WORDS, EN_NUMBER_WORDS
from aqar_query.core.errors import EmptyQueryError, InvalidQueryTypeError, QueryTooLongError
from aqar_query.logger_setup import get_logger

logger = get_logger(__name__)

__all__ = [
    "NormalizedQuery",
    "arabic_count_to_number",
    "convert_arabic_numerals",
    "extract_number",
    "normalize_query",
    "parse_amount",
    "parse_number",
    "validate_query",
    "word_to_number",
]

_DIGIT_MAP = str.maketrans(
    "٠١٢٣٤٥٦٧٨٩۰۱۲۳۴۵۶۷۸۹٬٫",
    "01234567890123456789,.",
)
_WHITESPACE = re.compile(r"\s+")
_GROUPED_THOUSANDS = re.compile(r"\d{1,3}(?:[.,]\d{3})+")


@dataclass(frozen=True)
class NormalizedQuery:
    """A validated query: trimmed original plus its normalized form."""

    raw: str
    text: str


def validate_query(query: object, max_length: int | None = None) -> str:
    """
    Validate a raw query and return it trimmed.

    Args:
        query: Value received from the caller
        max_length: Length cap, defaults to the configured cap

    Returns:
        The trimmed query

    Raises:
        InvalidQueryTypeError: If query is not a string
        EmptyQueryError: If query is empty after trimming
        QueryTooLongError: If the trimmed query exceeds the cap
    """
    if not isinstance(query, str):
        raise InvalidQueryTypeError(query)
    trimmed = query.strip()
    if not trimmed:
        raise EmptyQueryError()
    limit = max_length if max_length is not None else app_config.max_query_length
    if len(trimmed) > limit:
        raise QueryTooLongError(len(trimmed), limit)
    return trimmed


def convert_arabic_numerals(text: str) -> str:
    """Convert Arabic-Indic digits and separators to their ASCII forms."""
    if not text:
        return ""
    return text.translate(_DIGIT_MAP)


def normalize_query(query: object, max_length: int | None = None) -> NormalizedQuery:
    """
    Validate and normalize a search query.

    Args:
        query: Raw query text
        max_length: Optional length cap override

    Returns:
        NormalizedQuery with the trimmed raw text and the normalized text
    """
    raw = validate_query(query, max_length)
    text = convert_arabic_numerals(raw).lower()
    text = _WHITESPACE.sub(" ", text)
    return NormalizedQuery(raw=raw, text=text)


def extract_number(text: str) -> int | None:
    """
    Extract the first integer from text (Arabic or Latin digits).

    Args:
        text: Text containing a number like "٣" or "12"

    Returns:
        Parsed integer, or None if no digits are present
    """
    if not text:
        return None
    match = re.search(r"\d+", convert_arabic_numerals(text))
    return int(match.group()) if match else None


def word_to_number(word: str) -> int | None:
    """Convert an English number word (one..ten) to an integer."""
    if not word:
        return None
    return EN_NUMBER_WORDS.get(word.lower().strip())


def arabic_count_to_number(word: str) -> int | None:
    """Convert an Arabic count word ("ثلاث", "اربعة", ...) to an integer."""
    if not word:
        return None
    return AR_COUNT_WORDS.get(word.strip())


def parse_number(text: str) -> float | None:
    """
    Parse a digit string that may use thousands grouping or a decimal part.

    Handles formats like:
    - "150000"
    - "150,000" / "150.000"
    - "1.5" / "1,5"

    Returns:
        Parsed float, or None if the text is not numeric
    """
    if not text:
        return None
    cleaned = convert_arabic_numerals(text).strip()
    if _GROUPED_THOUSANDS.fullmatch(cleaned):
        cleaned = re.sub(r"[.,]", "", cleaned)
    else:
        cleaned = cleaned.replace(",", ".")
    try:
        return float(cleaned)
    except ValueError:
        logger.debug(f"Could not parse number: {text!r}")
        return None


def parse_amount(number_text: str, scale_word: str | None = None) -> float | None:
    """
    Parse an amount written as digits with an optional scale word.

    Args:
        number_text: Digits like "50" or "1.5"
        scale_word: Optional multiplier like "k", "الف" or "million"

    Returns:
        The scaled amount, or None if the digits cannot be parsed
    """
    value = parse_number(number_text)
    if value is None:
        return None
    if scale_word:
        value *= AMOUNT_SCALE_WORDS.get(scale_word.lower(), 1)
    return value
