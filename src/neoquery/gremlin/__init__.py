"""Gremlin traversal construction.

This package accumulates traversal steps on top of a seed reference and
exposes the result through typed result-shape wrappers.
"""

from .query import (
    GremlinNodeEnumerable,
    GremlinQuery,
    GremlinRelationshipEnumerable,
    GremlinTypedRelationshipEnumerable,
    start_traversal,
)
from .steps import GremlinSteps

__all__ = [
    "GremlinNodeEnumerable",
    "GremlinQuery",
    "GremlinRelationshipEnumerable",
    "GremlinSteps",
    "GremlinTypedRelationshipEnumerable",
    "start_traversal",
]
