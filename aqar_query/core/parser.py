"""
Public entry point: free-form search query -> ExtractedFilter.

    result = parse_query("villa for sale in Damascus between 150000 and 300000 usd")
    result.to_query_dict()  # {"propertyType": "Villa", "status": "sale", ...}

The parser holds no per-call state. Every call builds its own draft, so a
single QueryParser can be shared between threads.
"""

from aqar_query.core.assembler import FilterAssembler
from aqar_query.core.errors import QueryValidationError
from aqar_query.core.extractor import BaseExtractor, ParseContext
from aqar_query.core.models import ExtractedFilter
from aqar_query.core.normalization import normalize_query
from aqar_query.extractors import build_passes
from aqar_query.logger_setup import get_logger

logger = get_logger(__name__)


class QueryParser:
    """
    Runs the extraction passes in their fixed order and assembles the result.

    Args:
        max_query_length: Overrides the configured length cap for this parser
        passes: Custom pass list, mainly for tests; defaults to every registered pass
    """

    def __init__(self, max_query_length: int | None = None, passes: list[BaseExtractor] | None = None):
        self.max_query_length = max_query_length
        self.passes = passes if passes is not None else build_passes()
        self.assembler = FilterAssembler()

    def parse(self, query: object) -> ExtractedFilter:
        """
        Parse a raw search query.

        Raises:
            QueryValidationError: If the query is not a string, is empty or is too long
        """
        try:
            normalized = normalize_query(query, self.max_query_length)
        except QueryValidationError as e:
            logger.warning(f"Rejected query ({e.code}): {e}")
            raise

        context = ParseContext(query=normalized)
        for extraction_pass in self.passes:
            extraction_pass.extract(context)

        result = self.assembler.assemble(context.draft)
        logger.info(f"Parsed query {normalized.raw!r} -> {result.model_dump_json(by_alias=True, exclude_none=True)}")
        logger.debug(f"Matched rules: {context.draft.matched_rules}")
        return result


_default_parser: QueryParser | None = None


def parse_query(query: object) -> ExtractedFilter:
    """Parse a query with a shared default parser."""
    global _default_parser
    if _default_parser is None:
        _default_parser = QueryParser()
    return _default_parser.parse(query)
