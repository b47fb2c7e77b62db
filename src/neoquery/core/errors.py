"""Specific error types raised while building queries."""

from typing import Any

from .base import ApplicationError, ErrorCode, ErrorDetails, ErrorLevel, ValidationErrorDetails


class InvalidArgumentError(ApplicationError):
    """A caller passed an argument the builders cannot work with."""

    def __init__(self, message: str, param_name: str, details: ValidationErrorDetails | None = None):
        self.param_name = param_name
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_INPUT,
            level=ErrorLevel.ERROR,
            details=details
            or ValidationErrorDetails(source="neoquery", operation="validate_argument", field=param_name),
        )


class UnsupportedTypeError(ApplicationError):
    """A bound value is none of the known reference kinds or scalars."""

    def __init__(self, binding_name: str, value: Any, details: ValidationErrorDetails | None = None):
        value_type = type(value)
        self.binding_name = binding_name
        self.type_name = f"{value_type.__module__}.{value_type.__qualname__}"
        super().__init__(
            message=(
                f"Binding '{binding_name}' has a value of type {self.type_name}, "
                "which cannot be rendered as a graph reference"
            ),
            code=ErrorCode.UNSUPPORTED_TYPE,
            level=ErrorLevel.ERROR,
            details=details
            or ValidationErrorDetails(
                source="neoquery",
                operation="format_reference",
                field=binding_name,
                expected_type="Reference | str | int | float | bool",
            ),
        )


class QueryExecutionError(ApplicationError):
    """The execution collaborator failed to run a built query."""

    def __init__(self, message: str, details: ErrorDetails | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.DB_QUERY,
            level=ErrorLevel.ERROR,
            details=details,
        )
