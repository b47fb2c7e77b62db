"""Neo4j driver adapter for built Cypher queries.

This module hands a :class:`CypherQuery` to an ``AsyncDriver`` session and
returns the raw records. Deserialization into domain objects is left to the
caller.
"""

from typing import Any

from neo4j import AsyncDriver, AsyncGraphDatabase, Record
from neo4j.exceptions import Neo4jError

from neoquery.core.base import ErrorDetails
from neoquery.core.config import settings
from neoquery.core.errors import QueryExecutionError
from neoquery.core.logging import get_logger
from neoquery.domain.models import CypherQuery

logger = get_logger(__name__)


def create_neo4j_driver() -> AsyncDriver:
    """Create an async driver from the configured URI and credentials."""
    logger.info("Creating Neo4j driver", uri=settings.neo4j_uri)
    return AsyncGraphDatabase.driver(
        settings.neo4j_uri,
        auth=(settings.neo4j_user, settings.neo4j_password),
    )


class Neo4jQueryRunner:
    """Runs built Cypher queries on a Neo4j driver.

    Bolt servers only understand ``$p0`` placeholders, so queries should be
    built with ``placeholder_style="dollar"`` when used with this runner.
    """

    def __init__(self, driver: AsyncDriver, database: str | None = None) -> None:
        """Initialize the runner.

        Args:
            driver: Connected Neo4j AsyncDriver
            database: Database name, the server default when None
        """
        self.driver: AsyncDriver = driver
        self.database = database

    async def run(self, query: CypherQuery) -> list[Record]:
        """Execute the query and return every record.

        Args:
            query: Query to execute

        Returns:
            Records in server order

        Raises:
            QueryExecutionError: If the server rejects the query
        """
        logger.debug(
            "Executing Neo4j query",
            query_text=query.query_text,
            parameter_count=len(query.query_parameters),
        )

        try:
            async with self.driver.session(database=self.database) as session:
                result = await session.run(query.query_text, parameters=query.query_parameters)
                return [record async for record in result]
        except Neo4jError as e:
            raise QueryExecutionError(
                message=f"Query failed: {e!s}",
                details=ErrorDetails(source="Neo4jQueryRunner.run", operation=query.result_shape.value),
            ) from e

    async def run_single(self, query: CypherQuery) -> Record | None:
        """Execute the query and return its first record, if any."""
        records = await self.run(query)
        return records[0] if records else None

    async def run_value(self, query: CypherQuery) -> Any:
        """Execute the query and return the first value of the first record."""
        record = await self.run_single(query)
        if record and len(record) > 0:
            return record[0]
        return None
