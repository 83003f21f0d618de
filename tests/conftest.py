import pytest

from fallible import logger


@pytest.fixture(autouse=True)
def plain_logging(monkeypatch):
    """Keep console output uncolored and quiet between tests."""
    monkeypatch.setitem(logger._settings, "color", False)
    monkeypatch.setitem(logger._settings, "verbose", False)
