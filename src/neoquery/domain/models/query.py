"""Built query values handed to the execution collaborator."""

from collections.abc import Mapping
from enum import Enum
from typing import Any


class ResultShape(str, Enum):
    """What a query is expected to yield; a marker for deserialization only."""

    NODES = "nodes"
    RELATIONSHIPS = "relationships"
    PROJECTION = "projection"


class CypherQuery:
    """Immutable Cypher text plus its ordered parameters."""

    __slots__ = ("_query_text", "_parameters", "_result_shape")

    def __init__(
        self,
        query_text: str,
        query_parameters: Mapping[str, Any],
        result_shape: ResultShape = ResultShape.PROJECTION,
    ) -> None:
        self._query_text = query_text
        self._parameters = tuple(query_parameters.items())
        self._result_shape = result_shape

    @property
    def query_text(self) -> str:
        return self._query_text

    @property
    def query_parameters(self) -> dict[str, Any]:
        """A fresh copy of the parameters, in bind order."""
        return dict(self._parameters)

    @property
    def result_shape(self) -> ResultShape:
        return self._result_shape

    def to_payload(self) -> dict[str, Any]:
        """Body for the REST cypher endpoint."""
        return {"query": self._query_text, "params": self.query_parameters}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CypherQuery):
            return NotImplemented
        return (
            self._query_text == other._query_text
            and self._parameters == other._parameters
            and self._result_shape == other._result_shape
        )

    def __hash__(self) -> int:
        return hash((self._query_text, self._result_shape))

    def __repr__(self) -> str:
        return f"CypherQuery({self._query_text!r}, {self.query_parameters!r}, {self._result_shape.value})"
