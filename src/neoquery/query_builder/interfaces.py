"""Query builder interfaces for dependency injection.

These protocols are the narrow seams between the builders and their
collaborators: something that hands out parameter placeholders, and
something that runs a finished query.
"""

from typing import Any, Protocol, runtime_checkable

from neoquery.domain.models import CypherQuery


class CreateParameter(Protocol):
    """Callable that externalizes a value and returns its placeholder token."""

    def __call__(self, value: Any) -> str: ...


@runtime_checkable
class QueryRunner(Protocol):
    """Protocol for the collaborator that executes built Cypher queries."""

    async def run(self, query: CypherQuery) -> list[Any]:
        """Execute the query and return the raw records.

        Args:
            query: Query built by this library

        Returns:
            Records exactly as the transport produced them
        """
        ...
