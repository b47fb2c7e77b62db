"""Formatting of Cypher START bindings.

A binding source is either an explicit mapping of names to references, or a
structural record (``SimpleNamespace``, dataclass, named tuple or pydantic
model) whose fields are the bindings. An empty mapping is a valid "no
bindings" request; a record without fields is treated as a caller mistake.

Example:
    ```python
    text, params = StartBitFormatter().format({"n1": NodeReference(1), "all": All.nodes})
    # text == "n1=node({p0}), all=node(*)", params == {"p0": 1}
    ```
"""

import dataclasses
from collections.abc import Mapping, Sequence
from types import SimpleNamespace
from typing import Any

from pydantic import BaseModel
from structlog.typing import FilteringBoundLogger

from neoquery.core.config import PlaceholderStyle, settings
from neoquery.core.errors import InvalidArgumentError, UnsupportedTypeError
from neoquery.core.logging import get_logger
from neoquery.domain.models import (
    CypherQuery,
    EntityKind,
    IdentityReference,
    IndexLookup,
    IndexQuery,
    Node,
    RawFragment,
    Reference,
    ReferenceSet,
    ResultShape,
    Wildcard,
)
from neoquery.query_builder.interfaces import CreateParameter
from neoquery.query_builder.parameters import CYPHER_PLACEHOLDERS, ParameterBinder

logger: FilteringBoundLogger = get_logger(name=__name__)

START_BITS_PARAM = "start_bits"
SEPARATOR = ", "


def _binding_items(start_bits: Any) -> list[tuple[str, Any]]:
    """Read bindings in declaration order from a mapping or a structural record."""
    if isinstance(start_bits, Mapping):
        return list(start_bits.items())

    if isinstance(start_bits, Reference | Node):
        raise InvalidArgumentError(
            "Start bindings need a name for each reference; wrap the reference in a mapping",
            param_name=START_BITS_PARAM,
        )

    if isinstance(start_bits, BaseModel):
        items = [(name, getattr(start_bits, name)) for name in type(start_bits).model_fields]
    elif dataclasses.is_dataclass(start_bits) and not isinstance(start_bits, type):
        items = [(field.name, getattr(start_bits, field.name)) for field in dataclasses.fields(start_bits)]
    elif isinstance(start_bits, tuple) and hasattr(start_bits, "_fields"):
        items = list(start_bits._asdict().items())
    elif isinstance(start_bits, SimpleNamespace):
        items = list(vars(start_bits).items())
    else:
        raise InvalidArgumentError(
            f"Start bindings must be a mapping or a record, got {type(start_bits).__qualname__}",
            param_name=START_BITS_PARAM,
        )

    if not items:
        raise InvalidArgumentError(
            "The start bindings record has no fields; pass an empty dict if no bindings are intended",
            param_name=START_BITS_PARAM,
        )
    return items


def _identity_sequence_entity(value: Sequence[Any]) -> EntityKind | None:
    """Entity shared by every item of a plain sequence of identity references, if any."""
    if not value or not all(isinstance(item, IdentityReference) for item in value):
        return None
    entities = {item.entity for item in value}
    return entities.pop() if len(entities) == 1 else None


def _format_identities(
    name: str,
    entity: EntityKind,
    items: Sequence[IdentityReference],
    create_parameter: CreateParameter,
) -> str:
    placeholders = SEPARATOR.join(create_parameter(item.id) for item in items)
    return f"{name}={entity.value}({placeholders})"


def format_start_bit(name: str, value: Any, create_parameter: CreateParameter) -> str:
    """Render a single binding.

    Args:
        name: Identifier the binding introduces
        value: Reference, raw text or scalar bound to ``name``
        create_parameter: Externalizes a literal and returns its placeholder

    Returns:
        The clause fragment, e.g. ``n1=node({p0})``

    Raises:
        UnsupportedTypeError: If ``value`` is not a known reference kind or scalar
    """
    match value:
        case Wildcard(entity=entity):
            return f"{name}={entity.value}(*)"
        case IdentityReference(id=identity, entity=entity):
            return f"{name}={entity.value}({create_parameter(identity)})"
        case Node(reference=reference):
            return format_start_bit(name, reference, create_parameter)
        case ReferenceSet(entity=entity, items=items):
            return _format_identities(name, entity, items, create_parameter)
        case IndexLookup(entity=entity, index_name=index_name, key=key, value=lookup_value):
            return f"{name}={entity.value}:{index_name}({key} = {create_parameter(lookup_value)})"
        case IndexQuery(entity=entity, index_name=index_name, query_text=query_text):
            return f"{name}={entity.value}:{index_name}({create_parameter(query_text)})"
        case RawFragment(text=text):
            return f"{name}={text}"
        case str():
            return f"{name}={value}"
        case bool():
            return f"{name}={'true' if value else 'false'}"
        case int() | float():
            return f"{name}={value}"
        case list() | tuple() if (entity := _identity_sequence_entity(value)) is not None:
            return _format_identities(name, entity, value, create_parameter)
        case _:
            raise UnsupportedTypeError(binding_name=name, value=value)


def format_start_bits(start_bits: Any, create_parameter: CreateParameter) -> str:
    """Render every binding in order, joined with ``", "``.

    Raises:
        InvalidArgumentError: If ``start_bits`` is a record without fields
        UnsupportedTypeError: If any bound value has an unsupported type
    """
    return SEPARATOR.join(
        format_start_bit(name, value, create_parameter) for name, value in _binding_items(start_bits)
    )


class StartBitFormatter:
    """Formats START bindings with a fresh parameter bag per call."""

    def __init__(self, placeholder_style: PlaceholderStyle | None = None) -> None:
        self._placeholder = CYPHER_PLACEHOLDERS[placeholder_style or settings.cypher_placeholder_style]

    def format(self, start_bits: Any) -> tuple[str, dict[str, Any]]:
        """Format bindings into clause text and their parameters.

        Args:
            start_bits: Mapping or structural record of name -> reference

        Returns:
            Tuple of (clause text, parameters in bind order)
        """
        binder = ParameterBinder(placeholder=self._placeholder)
        text = format_start_bits(start_bits, binder.placeholder)
        return text, dict(binder.bag)

    def build(self, start_bits: Any, result_shape: ResultShape = ResultShape.PROJECTION) -> CypherQuery:
        """Build a complete ``START`` query.

        Args:
            start_bits: Mapping or structural record of name -> reference
            result_shape: Expected shape of the results

        Returns:
            The immutable query
        """
        text, parameters = self.format(start_bits)
        query = CypherQuery(f"START {text}", parameters, result_shape)

        if settings.log_queries:
            logger.debug(
                "Built Cypher start query",
                query_text=query.query_text,
                parameter_count=len(parameters),
                result_shape=result_shape.value,
            )

        return query


def build_start_query(
    start_bits: Any,
    result_shape: ResultShape = ResultShape.PROJECTION,
    placeholder_style: PlaceholderStyle | None = None,
) -> CypherQuery:
    """Shortcut for ``StartBitFormatter(placeholder_style).build(start_bits, result_shape)``."""
    return StartBitFormatter(placeholder_style).build(start_bits, result_shape)
