"""Shared pytest fixtures."""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TWC_* settings from the caller's environment out of the tests."""
    for name in ("TWC_ATTRIBUTE", "TWC_MERGE_HELPER", "TWC_EXTENSIONS", "TWC_BACKUP"):
        monkeypatch.delenv(name, raising=False)
