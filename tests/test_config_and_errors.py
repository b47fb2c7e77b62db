"""Tests for settings, error types and payload serialization."""

import json

import pytest
from neoquery.core.base import ApplicationError, ErrorCode, ErrorLevel
from neoquery.core.config import Settings
from neoquery.core.errors import InvalidArgumentError, QueryExecutionError, UnsupportedTypeError
from neoquery.domain.models import CypherQuery, NodeReference, ResultShape
from neoquery.query_builder import StartBitFormatter, build_start_query
from pydantic import ValidationError


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        """Test the default placeholder style and logging flags."""
        monkeypatch.delenv("NEOQUERY_CYPHER_PLACEHOLDER_STYLE", raising=False)
        monkeypatch.delenv("NEOQUERY_LOG_QUERIES", raising=False)

        settings = Settings(_env_file=None)

        assert settings.cypher_placeholder_style == "braces"
        assert settings.log_queries is False

    def test_reads_prefixed_environment(self, monkeypatch):
        """Test settings come from NEOQUERY_ variables."""
        monkeypatch.setenv("NEOQUERY_CYPHER_PLACEHOLDER_STYLE", "dollar")
        monkeypatch.setenv("NEOQUERY_LOG_QUERIES", "true")

        settings = Settings(_env_file=None)

        assert settings.cypher_placeholder_style == "dollar"
        assert settings.log_queries is True

    def test_rejects_unknown_style(self, monkeypatch):
        """Test an unknown placeholder style fails validation."""
        monkeypatch.setenv("NEOQUERY_CYPHER_PLACEHOLDER_STYLE", "colon")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_formatter_follows_settings(self, monkeypatch):
        """Test the formatter falls back to the configured style."""
        from neoquery.core.config import settings

        monkeypatch.setattr(settings, "cypher_placeholder_style", "dollar")

        text, _ = StartBitFormatter().format({"n": NodeReference(1)})

        assert text == "n=node($p0)"


class TestErrors:
    """Test the error hierarchy."""

    def test_invalid_argument(self):
        """Test the invalid argument error fields."""
        error = InvalidArgumentError("no bindings", param_name="start_bits")

        assert isinstance(error, ApplicationError)
        assert error.code == ErrorCode.INVALID_INPUT
        assert error.level == ErrorLevel.ERROR
        assert error.details.field == "start_bits"
        assert str(error) == "no bindings"

    def test_unsupported_type(self):
        """Test the unsupported type error fields."""
        error = UnsupportedTypeError(binding_name="n1", value=object())

        assert error.code == ErrorCode.UNSUPPORTED_TYPE
        assert error.type_name == "builtins.object"
        assert "n1" in error.message
        assert "builtins.object" in error.message
        assert error.details.field == "n1"
        assert error.details.expected_type == "Reference | str | int | float | bool"

    def test_default_details(self):
        """Test errors raised without details still carry a details model."""
        error = QueryExecutionError("connection refused")

        assert error.code == ErrorCode.DB_QUERY
        assert error.details.source == "unknown"
        assert error.details.operation == "unknown"

    def test_details_serialize(self):
        """Test error details dump to JSON-friendly data."""
        error = InvalidArgumentError("no bindings", param_name="start_bits")

        dumped = error.details.model_dump()

        assert dumped["field"] == "start_bits"
        assert isinstance(dumped["timestamp"], str)


class TestCypherQuery:
    """Test the immutable Cypher query value."""

    def test_to_payload(self):
        """Test the REST request body."""
        query = build_start_query({"n": NodeReference(3)})

        assert query.to_payload() == {"query": "START n=node({p0})", "params": {"p0": 3}}
        assert json.loads(json.dumps(query.to_payload()))["params"] == {"p0": 3}

    def test_parameters_are_copied(self):
        """Test callers cannot mutate the query through its parameters."""
        query = CypherQuery("n=node({p0})", {"p0": 1})

        query.query_parameters["p0"] = 2

        assert query.query_parameters == {"p0": 1}

    def test_equality(self):
        """Test queries compare by text, parameters and shape."""
        first = CypherQuery("n=node({p0})", {"p0": 1}, ResultShape.NODES)

        assert first == CypherQuery("n=node({p0})", {"p0": 1}, ResultShape.NODES)
        assert first != CypherQuery("n=node({p0})", {"p0": 1}, ResultShape.PROJECTION)
