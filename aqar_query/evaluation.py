"""
Batch evaluation of labelled query corpora.

A case is a dict like:

    {"query": "شقة غرفتين في حلب", "expected": {"propertyType": "Apartment", "bedrooms": 2}}

Only the keys listed under "expected" are compared, so a case can pin down
the fields it cares about. A case may instead expect a validation error:

    {"query": "", "expected": {"error": "EmptyQuery"}}
"""

import json

import pandas as pd

from aqar_query.core.errors import QueryValidationError
from aqar_query.core.parser import QueryParser
from aqar_query.logger_setup import get_logger

logger = get_logger(__name__)

REPORT_COLUMNS = ["query", "passed", "mismatches", "actual", "error"]


def _mismatches(expected: dict, actual: dict) -> list[str]:
    return [
        f"{key}: expected {value!r}, got {actual.get(key)!r}"
        for key, value in expected.items()
        if actual.get(key) != value
    ]


def evaluate_case(parser: QueryParser, case: dict) -> dict:
    query = case.get("query")
    expected = case.get("expected", {})
    expected_error = expected.get("error")

    try:
        actual = parser.parse(query).to_query_dict()
    except QueryValidationError as e:
        passed = expected_error == e.code
        mismatches = [] if passed else [f"error: expected {expected_error!r}, got {e.code!r}"]
        return {"query": query, "passed": passed, "mismatches": "; ".join(mismatches), "actual": "", "error": e.code}

    if expected_error:
        mismatches = [f"error: expected {expected_error!r}, got no error"]
    else:
        mismatches = _mismatches(expected, actual)
    return {
        "query": query,
        "passed": not mismatches,
        "mismatches": "; ".join(mismatches),
        "actual": json.dumps(actual, ensure_ascii=False),
        "error": "",
    }


def evaluate_cases(cases: list[dict], parser: QueryParser | None = None) -> pd.DataFrame:
    """
    Run every case through the parser.

    Args:
        cases: Labelled cases with "query" and "expected" keys
        parser: Parser to use, a default QueryParser if omitted

    Returns:
        DataFrame with one row per case and REPORT_COLUMNS as columns
    """
    parser = parser or QueryParser()
    rows = [evaluate_case(parser, case) for case in cases]
    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    failed = int((~df["passed"]).sum()) if not df.empty else 0
    logger.info(f"Evaluated {len(df)} cases, {failed} failed")
    return df


def summarize(df: pd.DataFrame) -> dict:
    """Totals and pass rate of an evaluation report."""
    total = len(df)
    passed = int(df["passed"].sum()) if total else 0
    return {
        "total": total,
        "passed": passed,
        "failed": total - passed,
        "pass_rate": round(passed / total, 4) if total else 0.0,
    }


def load_cases(path: str) -> list[dict]:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return data["cases"] if isinstance(data, dict) else data
