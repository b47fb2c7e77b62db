"""
Shared helpers for the unit tests.
"""

from typing import Any

from neoquery.domain.models import CypherQuery
from neoquery.query_builder import ParameterBinder, format_start_bits


def to_cypher(start_bits: Any) -> CypherQuery:
    """Format start bits with a fresh binder, the way a query builder would."""
    binder = ParameterBinder()
    text = format_start_bits(start_bits, binder.placeholder)
    return CypherQuery(text, binder.bag)


class RecordingLogger:
    """Stand-in for a structlog logger that keeps the events it receives."""

    def __init__(self):
        self.events = []

    def debug(self, event, **kwargs):
        self.events.append((event, kwargs))

    info = debug
