"""Domain models for graph references and built queries."""

from .query import CypherQuery, ResultShape
from .references import (
    All,
    EntityKind,
    IdentityReference,
    IndexLookup,
    IndexQuery,
    Node,
    NodeReference,
    RawFragment,
    Reference,
    ReferenceSet,
    Relationship,
    RelationshipReference,
    RootNode,
    Wildcard,
)

__all__ = [
    "All",
    # Queries
    "CypherQuery",
    # References
    "EntityKind",
    "IdentityReference",
    "IndexLookup",
    "IndexQuery",
    "Node",
    "NodeReference",
    "RawFragment",
    "Reference",
    "ReferenceSet",
    "Relationship",
    "RelationshipReference",
    "ResultShape",
    "RootNode",
    "Wildcard",
]
