"""Cypher query construction.

This package formats typed graph references into START clause text and an
ordered parameter bag.
"""

from .interfaces import CreateParameter, QueryRunner
from .parameters import ParameterBag, ParameterBinder
from .start_bits import StartBitFormatter, build_start_query, format_start_bit, format_start_bits

__all__ = [
    "CreateParameter",
    # Parameters
    "ParameterBag",
    "ParameterBinder",
    "QueryRunner",
    # Start bindings
    "StartBitFormatter",
    "build_start_query",
    "format_start_bit",
    "format_start_bits",
]
