"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_config_env(monkeypatch):
    """Keep a developer's shell or .env settings out of the test run."""
    monkeypatch.delenv("NUMBERS_INTO_WORDS_AND", raising=False)
    monkeypatch.delenv("NUMBERS_INTO_WORDS_LOG_LEVEL", raising=False)
    yield
