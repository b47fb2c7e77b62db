"""Typed references to graph entities.

Every reference is a frozen pydantic model: immutable, compared by value and
hashable. The formatters in :mod:`neoquery.query_builder` and
:mod:`neoquery.gremlin` turn them into query text.
"""

from collections.abc import Iterable
from enum import Enum
from typing import Any, ClassVar, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from neoquery.core.errors import InvalidArgumentError

TData = TypeVar("TData")


class EntityKind(str, Enum):
    """Kind of graph entity; the value is the word rendered into queries."""

    NODE = "node"
    RELATIONSHIP = "relationship"


class Reference(BaseModel):
    """Base class for all graph references."""

    model_config = ConfigDict(frozen=True)


class IdentityReference(Reference):
    """A node or relationship identified by its numeric id."""

    id: int
    entity: EntityKind

    def __int__(self) -> int:
        return self.id


class NodeReference(IdentityReference):
    entity: Literal[EntityKind.NODE] = EntityKind.NODE

    def __init__(self, id: int, **data: Any) -> None:
        super().__init__(id=id, **data)


class RootNode(NodeReference):
    """The server's reference node."""


class RelationshipReference(IdentityReference):
    entity: Literal[EntityKind.RELATIONSHIP] = EntityKind.RELATIONSHIP

    def __init__(self, id: int, **data: Any) -> None:
        super().__init__(id=id, **data)


class IndexLookup(Reference):
    """Exact-match lookup of ``key = value`` in a legacy index."""

    entity: EntityKind
    index_name: str
    key: str
    value: Any


class IndexQuery(Reference):
    """Free-text query against a legacy index, e.g. ``name:A``."""

    entity: EntityKind
    index_name: str
    query_text: str


class Wildcard(Reference):
    """All entities of one kind."""

    entity: EntityKind


class RawFragment(Reference):
    """Query text emitted verbatim and never parameterized."""

    text: str

    def __init__(self, text: str, **data: Any) -> None:
        super().__init__(text=text, **data)


class ReferenceSet(Reference):
    """Several identities bound under one name.

    All items must refer to the set's entity kind. An empty set is valid and
    renders as an empty argument list.
    """

    entity: EntityKind
    items: tuple[IdentityReference, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def check_items_match_entity(self) -> "ReferenceSet":
        for item in self.items:
            if item.entity != self.entity:
                raise ValueError(
                    f"{item.entity.value} reference {item.id} cannot join a set of {self.entity.value}s"
                )
        return self

    @classmethod
    def of(cls, references: Iterable[IdentityReference], entity: EntityKind | None = None) -> "ReferenceSet":
        """Build a set, inferring the entity kind from the first reference.

        Raises:
            InvalidArgumentError: If ``references`` is empty and no entity is given
        """
        items = tuple(references)
        if entity is None:
            if not items:
                raise InvalidArgumentError(
                    "An empty reference set needs an explicit entity kind",
                    param_name="entity",
                )
            entity = items[0].entity
        return cls(entity=entity, items=items)


class All:
    """Wildcards for every node or every relationship."""

    nodes: ClassVar[Wildcard] = Wildcard(entity=EntityKind.NODE)
    relationships: ClassVar[Wildcard] = Wildcard(entity=EntityKind.RELATIONSHIP)


class Node(BaseModel, Generic[TData]):
    """A node payload together with the reference it was loaded from."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    reference: NodeReference
    data: TData

    @property
    def id(self) -> int:
        return self.reference.id

    @classmethod
    def by_index_lookup(cls, index_name: str, key: str, value: Any) -> IndexLookup:
        return IndexLookup(entity=EntityKind.NODE, index_name=index_name, key=key, value=value)

    @classmethod
    def by_index_query(cls, index_name: str, query_text: str) -> IndexQuery:
        return IndexQuery(entity=EntityKind.NODE, index_name=index_name, query_text=query_text)


class Relationship:
    """Factories for relationship index references."""

    @classmethod
    def by_index_lookup(cls, index_name: str, key: str, value: Any) -> IndexLookup:
        return IndexLookup(entity=EntityKind.RELATIONSHIP, index_name=index_name, key=key, value=value)

    @classmethod
    def by_index_query(cls, index_name: str, query_text: str) -> IndexQuery:
        return IndexQuery(entity=EntityKind.RELATIONSHIP, index_name=index_name, query_text=query_text)
