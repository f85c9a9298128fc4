"""Shared pytest fixtures."""

import json
from pathlib import Path

import pytest

from aqar_query.core.parser import QueryParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def load_json_fixture():
    """Load and parse JSON fixture by filename.

    Usage:
        def test_something(load_json_fixture):
            data = load_json_fixture("queries.json")
    """

    def _load(filename: str):
        filepath = FIXTURES_DIR / filename
        if not filepath.exists():
            pytest.skip(f"Fixture not found: {filepath}")
        return json.loads(filepath.read_text(encoding="utf-8"))

    return _load


@pytest.fixture
def parser():
    return QueryParser()


@pytest.fixture
def parse(parser):
    """Parse a query and return the camelCase dict."""

    def _parse(query: str) -> dict:
        return parser.parse(query).to_query_dict()

    return _parse
