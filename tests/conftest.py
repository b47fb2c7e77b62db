"""
Fixtures for the unit tests.
"""

import pytest
from neoquery.query_builder import ParameterBinder


@pytest.fixture
def binder():
    """Create a ParameterBinder with braces placeholders."""
    return ParameterBinder()


@pytest.fixture
def log_queries(monkeypatch):
    """Turn on query logging for the duration of a test."""
    from neoquery.core.config import settings

    monkeypatch.setattr(settings, "log_queries", True)
    return settings
