"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    """Keep a developer's TO_WORDS_* environment out of the test run."""
    monkeypatch.delenv("TO_WORDS_LOCALE", raising=False)
    monkeypatch.delenv("TO_WORDS_LOG_LEVEL", raising=False)
    yield
