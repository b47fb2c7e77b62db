"""Typed query construction for Neo4j's Cypher START clauses and Gremlin traversals."""

from neoquery.core.errors import InvalidArgumentError, QueryExecutionError, UnsupportedTypeError
from neoquery.domain.models import (
    All,
    CypherQuery,
    EntityKind,
    IdentityReference,
    IndexLookup,
    IndexQuery,
    Node,
    NodeReference,
    RawFragment,
    ReferenceSet,
    Relationship,
    RelationshipReference,
    ResultShape,
    RootNode,
    Wildcard,
)
from neoquery.gremlin import (
    GremlinNodeEnumerable,
    GremlinQuery,
    GremlinRelationshipEnumerable,
    GremlinTypedRelationshipEnumerable,
    start_traversal,
)
from neoquery.query_builder import (
    ParameterBag,
    ParameterBinder,
    StartBitFormatter,
    build_start_query,
    format_start_bits,
)

__all__ = [
    "All",
    "CypherQuery",
    "EntityKind",
    "GremlinNodeEnumerable",
    "GremlinQuery",
    "GremlinRelationshipEnumerable",
    "GremlinTypedRelationshipEnumerable",
    "IdentityReference",
    "IndexLookup",
    "IndexQuery",
    "InvalidArgumentError",
    "Node",
    "NodeReference",
    "ParameterBag",
    "ParameterBinder",
    "QueryExecutionError",
    "RawFragment",
    "ReferenceSet",
    "Relationship",
    "RelationshipReference",
    "ResultShape",
    "RootNode",
    "StartBitFormatter",
    "UnsupportedTypeError",
    "Wildcard",
    "build_start_query",
    "format_start_bits",
    "start_traversal",
]
