"""Immutable Gremlin step chains.

A chain starts from a graph reference (``g.v(p0)``) and grows one step at a
time. Every append returns a new query that shares no mutable state with its
receiver, so partial chains can be kept and extended independently.
"""

from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from structlog.typing import FilteringBoundLogger

from neoquery.core.config import settings
from neoquery.core.errors import UnsupportedTypeError
from neoquery.core.logging import get_logger
from neoquery.domain.models import (
    EntityKind,
    IdentityReference,
    Node,
    RawFragment,
    ReferenceSet,
    ResultShape,
    Wildcard,
)
from neoquery.gremlin.steps import GremlinSteps
from neoquery.query_builder.parameters import GREMLIN_PLACEHOLDER, ParameterBag, ParameterBinder

logger: FilteringBoundLogger = get_logger(name=__name__)

TNode = TypeVar("TNode")
TData = TypeVar("TData")

# Seed accessors per entity kind: by id, and every entity
_BY_ID = {EntityKind.NODE: "g.v", EntityKind.RELATIONSHIP: "g.e"}
_ALL = {EntityKind.NODE: "g.V", EntityKind.RELATIONSHIP: "g.E"}


class GremlinQuery(GremlinSteps):
    """Gremlin script text plus its ordered parameters."""

    __slots__ = ("_query_text", "_parameters")

    result_shape: ClassVar[ResultShape] = ResultShape.PROJECTION

    def __init__(self, query_text: str, query_parameters: Mapping[str, Any] | None = None) -> None:
        self._query_text = query_text
        self._parameters: tuple[tuple[str, Any], ...] = tuple((query_parameters or {}).items())

    @property
    def query_text(self) -> str:
        return self._query_text

    @property
    def query_parameters(self) -> dict[str, Any]:
        """A fresh copy of the parameters, in bind order."""
        return dict(self._parameters)

    def append_step(self, step_name: str, *args: Any) -> "GremlinQuery":
        """Return a new query with ``.step_name(args)`` appended.

        Args:
            step_name: Gremlin step to call
            *args: Literal arguments are bound as parameters, ``RawFragment``
                arguments are emitted verbatim

        Returns:
            A new projection-shaped query; the receiver is left unchanged
        """
        binder = ParameterBinder(ParameterBag(dict(self._parameters)), placeholder=GREMLIN_PLACEHOLDER)
        rendered = ", ".join(
            argument.text if isinstance(argument, RawFragment) else binder.placeholder(argument)
            for argument in args
        )
        query = GremlinQuery(f"{self._query_text}.{step_name}({rendered})", binder.bag)

        if settings.log_queries:
            logger.debug(
                "Appended Gremlin step",
                step=step_name,
                query_text=query.query_text,
                parameter_count=len(binder.bag),
            )

        return query

    def as_nodes(self, node_type: type[TNode] = object) -> "GremlinNodeEnumerable[TNode]":
        """Present this query as yielding nodes of ``node_type``."""
        return GremlinNodeEnumerable(self._query_text, self.query_parameters, node_type=node_type)

    def as_relationships(self, data_type: type | None = None) -> "GremlinRelationshipEnumerable":
        """Present this query as yielding relationships, typed when ``data_type`` is given."""
        if data_type is None:
            return GremlinRelationshipEnumerable(self._query_text, self.query_parameters)
        return GremlinTypedRelationshipEnumerable(self._query_text, self.query_parameters, data_type=data_type)

    def to_payload(self) -> dict[str, Any]:
        """Body for the Gremlin plugin's execute_script endpoint."""
        return {"script": self._query_text, "params": self.query_parameters}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GremlinQuery):
            return NotImplemented
        return (
            self._query_text == other._query_text
            and self._parameters == other._parameters
            and self.result_shape == other.result_shape
        )

    def __hash__(self) -> int:
        return hash((self._query_text, self.result_shape))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._query_text!r}, {self.query_parameters!r})"


class GremlinNodeEnumerable(GremlinQuery, Generic[TNode]):
    """A traversal that yields nodes of ``node_type``."""

    __slots__ = ("node_type",)

    result_shape: ClassVar[ResultShape] = ResultShape.NODES

    def __init__(
        self,
        query_text: str,
        query_parameters: Mapping[str, Any] | None = None,
        node_type: type[TNode] = object,
    ) -> None:
        super().__init__(query_text, query_parameters)
        self.node_type = node_type


class GremlinRelationshipEnumerable(GremlinQuery):
    """A traversal that yields relationships without a typed payload."""

    __slots__ = ()

    result_shape: ClassVar[ResultShape] = ResultShape.RELATIONSHIPS


class GremlinTypedRelationshipEnumerable(GremlinRelationshipEnumerable, Generic[TData]):
    """A traversal that yields relationships carrying ``data_type`` payloads."""

    __slots__ = ("data_type",)

    def __init__(
        self,
        query_text: str,
        query_parameters: Mapping[str, Any] | None = None,
        data_type: type[TData] = object,
    ) -> None:
        super().__init__(query_text, query_parameters)
        self.data_type = data_type


def start_traversal(reference: Any) -> GremlinQuery:
    """Seed a traversal from a graph reference.

    Args:
        reference: Identity reference, ``Node``, reference set, wildcard or raw text

    Returns:
        A node or relationship enumerable for typed seeds, a plain query for raw text

    Raises:
        UnsupportedTypeError: If ``reference`` cannot start a traversal
    """
    binder = ParameterBinder(placeholder=GREMLIN_PLACEHOLDER)

    match reference:
        case Wildcard(entity=entity):
            query = GremlinQuery(_ALL[entity])
        case IdentityReference(id=identity, entity=entity):
            query = GremlinQuery(f"{_BY_ID[entity]}({binder.placeholder(identity)})", binder.bag)
        case Node(reference=node_reference):
            return start_traversal(node_reference)
        case ReferenceSet(entity=entity, items=items):
            placeholders = ", ".join(binder.placeholder(item.id) for item in items)
            query = GremlinQuery(f"{_BY_ID[entity]}({placeholders})", binder.bag)
        case RawFragment(text=text):
            return GremlinQuery(text)
        case str():
            return GremlinQuery(reference)
        case _:
            raise UnsupportedTypeError(binding_name="reference", value=reference)

    if entity == EntityKind.NODE:
        return query.as_nodes()
    return query.as_relationships()
