"""Configuration management."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PlaceholderStyle = Literal["braces", "dollar"]


class Settings(BaseSettings):
    # Query rendering
    cypher_placeholder_style: PlaceholderStyle = Field(
        default="braces",
        description="Cypher parameter syntax: {p0} for the REST endpoint, $p0 for Bolt-era servers",
    )

    # Logging
    log_queries: bool = Field(default=False, description="Debug-log every built query")
    log_level: str = "INFO"

    # Neo4j, only read by the driver-backed runner
    neo4j_uri: str = "bolt://localhost:7687"
    neo4j_user: str = "neo4j"
    neo4j_password: str = "password"

    model_config = SettingsConfigDict(
        env_prefix="NEOQUERY_",
        env_file=".env",
        extra="ignore",  # Ignore extra fields in .env file
    )


settings = Settings()
