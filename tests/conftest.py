"""
Pytest fixtures for converter tests.

Editor JSON samples live in tests/fixtures/ and are loaded fresh per test.
"""

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from dmn_converter.services.node_accessor import EditorNode

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"
LAST_UPDATED = datetime(2017, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def load_model():
    """Return a loader: fixture file name -> parsed editor JSON dict."""

    def _load(name: str) -> dict:
        return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))

    return _load


@pytest.fixture
def last_updated() -> datetime:
    return LAST_UPDATED


@pytest.fixture
def basic_model(load_model) -> dict:
    return load_model("decisiontable_1.json")


@pytest.fixture
def basic_root(basic_model) -> EditorNode:
    return EditorNode(basic_model)
