"""Traversal steps for Gremlin queries.

This module provides the step helpers mixed into :class:`GremlinQuery`. Each
helper appends one step and casts the result to the shape the step yields.
Label arguments are bound as parameters; variable names are script-level
identifiers and are emitted verbatim.
"""

from typing import TYPE_CHECKING, TypeVar

from neoquery.domain.models import RawFragment

if TYPE_CHECKING:
    from neoquery.gremlin.query import GremlinNodeEnumerable, GremlinQuery, GremlinRelationshipEnumerable

TNode = TypeVar("TNode")


class GremlinSteps:
    """Mixin providing the common traversal steps."""

    __slots__ = ()

    def out_v(self: "GremlinQuery", *labels: str, node_type: type[TNode] = object) -> "GremlinNodeEnumerable[TNode]":
        """Follow outgoing relationships to their end nodes.

        Args:
            *labels: Relationship types to follow, all when empty
            node_type: Type the resulting nodes deserialize into

        Returns:
            Node enumerable ending in ``.out(...)``
        """
        return self.append_step("out", *labels).as_nodes(node_type)

    def in_v(self: "GremlinQuery", *labels: str, node_type: type[TNode] = object) -> "GremlinNodeEnumerable[TNode]":
        """Follow incoming relationships to their start nodes."""
        return self.append_step("in", *labels).as_nodes(node_type)

    def both_v(self: "GremlinQuery", *labels: str, node_type: type[TNode] = object) -> "GremlinNodeEnumerable[TNode]":
        """Follow relationships in either direction to the adjacent nodes."""
        return self.append_step("both", *labels).as_nodes(node_type)

    def out_e(self: "GremlinQuery", *labels: str, data_type: type | None = None) -> "GremlinRelationshipEnumerable":
        """Outgoing relationships, typed when ``data_type`` is given."""
        return self.append_step("outE", *labels).as_relationships(data_type)

    def in_e(self: "GremlinQuery", *labels: str, data_type: type | None = None) -> "GremlinRelationshipEnumerable":
        return self.append_step("inE", *labels).as_relationships(data_type)

    def both_e(self: "GremlinQuery", *labels: str, data_type: type | None = None) -> "GremlinRelationshipEnumerable":
        return self.append_step("bothE", *labels).as_relationships(data_type)

    def except_v(
        self: "GremlinQuery", variable: str, node_type: type[TNode] = object
    ) -> "GremlinNodeEnumerable[TNode]":
        """Drop nodes contained in the script collection ``variable``.

        Example:
            ```python
            start_traversal(NodeReference(123)).except_v("foo").query_text
            # "g.v(p0).except(foo)"
            ```
        """
        return self.append_step("except", RawFragment(variable)).as_nodes(node_type)

    def except_e(self: "GremlinQuery", variable: str, data_type: type | None = None) -> "GremlinRelationshipEnumerable":
        """Drop relationships contained in the script collection ``variable``."""
        return self.append_step("except", RawFragment(variable)).as_relationships(data_type)

    def retain_v(
        self: "GremlinQuery", variable: str, node_type: type[TNode] = object
    ) -> "GremlinNodeEnumerable[TNode]":
        """Keep only nodes contained in the script collection ``variable``."""
        return self.append_step("retain", RawFragment(variable)).as_nodes(node_type)

    def retain_e(self: "GremlinQuery", variable: str, data_type: type | None = None) -> "GremlinRelationshipEnumerable":
        return self.append_step("retain", RawFragment(variable)).as_relationships(data_type)

    def aggregate_v(
        self: "GremlinQuery", variable: str, node_type: type[TNode] = object
    ) -> "GremlinNodeEnumerable[TNode]":
        """Collect the current nodes into the script collection ``variable``."""
        return self.append_step("aggregate", RawFragment(variable)).as_nodes(node_type)
