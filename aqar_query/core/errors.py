"""
Validation errors raised for malformed search queries.

These are the only exceptions the parser lets escape; a query that
simply matches nothing is not an error.
"""

__all__ = [
    "EmptyQueryError",
    "InvalidQueryTypeError",
    "QueryTooLongError",
    "QueryValidationError",
]


class QueryValidationError(ValueError):
    """Base class for rejected search queries."""

    code = "InvalidQuery"


class InvalidQueryTypeError(QueryValidationError):
    code = "InvalidQueryType"

    def __init__(self, value: object):
        self.value_type = type(value).__name__
        super().__init__(f"Query must be a string, got {self.value_type}")


class EmptyQueryError(QueryValidationError):
    code = "EmptyQuery"

    def __init__(self):
        super().__init__("Query is required and must be a non-empty string")


class QueryTooLongError(QueryValidationError):
    code = "QueryTooLong"

    def __init__(self, length: int, max_length: int):
        self.length = length
        self.max_length = max_length
        super().__init__(f"Query is too long ({length} characters). Please keep it under {max_length} characters.")
