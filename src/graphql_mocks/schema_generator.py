"""Schema construction and per-field resolver hooks over graphql-core."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from graphql import (
    GraphQLField,
    GraphQLInterfaceType,
    GraphQLObjectType,
    GraphQLSchema,
    build_schema,
    is_abstract_type,
)
from graphql.pyutils import is_awaitable

from graphql_mocks.exceptions import SchemaError

logger = logging.getLogger(__name__)

RESOLVE_TYPE_KEY = "__resolve_type"

FieldVisitor = Callable[[GraphQLField, str, str], None]


def build_schema_from_type_definitions(type_defs: str | Sequence[str]) -> GraphQLSchema:
    """Build a schema from SDL, given as one string or a sequence of strings."""
    if not type_defs:
        raise SchemaError("Must provide typeDefs")
    source = type_defs if isinstance(type_defs, str) else "\n".join(type_defs)
    if not source.strip():
        raise SchemaError("Must provide typeDefs")
    return build_schema(source)


def for_each_field(schema: GraphQLSchema, fn: FieldVisitor) -> None:
    """Call ``fn(field, type_name, field_name)`` for every object type field."""
    for type_name, type_ in schema.type_map.items():
        if type_name.startswith("__") or not isinstance(type_, GraphQLObjectType):
            continue
        for field_name, field in type_.fields.items():
            fn(field, type_name, field_name)


def add_resolve_functions_to_schema(
    schema: GraphQLSchema,
    resolvers: Mapping[str, Mapping[str, Callable[..., Any]]],
) -> None:
    """Attach resolvers given as ``{TypeName: {fieldName: fn}}``.

    The ``__resolve_type`` key sets the type resolver of a union or interface.

    Raises:
        SchemaError: If a type or field is not part of the schema.
    """
    for type_name, type_resolvers in resolvers.items():
        type_ = schema.get_type(type_name)
        if type_ is None:
            raise SchemaError(f'"{type_name}" defined in resolvers, but not in schema')

        for field_name, resolve in type_resolvers.items():
            if field_name == RESOLVE_TYPE_KEY:
                if not is_abstract_type(type_):
                    raise SchemaError(f"{type_name}.{field_name} can only be defined on unions and interfaces")
                type_.resolve_type = resolve
                continue

            fields = type_.fields if isinstance(type_, (GraphQLObjectType, GraphQLInterfaceType)) else {}
            if field_name not in fields:
                raise SchemaError(f"{type_name}.{field_name} defined in resolvers, but not in schema")
            fields[field_name].resolve = resolve


def decorate_with_logger(fn: Callable[..., Any], log: logging.Logger, hint: str) -> Callable[..., Any]:
    """Wrap a resolver so its errors are logged with ``hint`` and re-raised."""

    async def await_logged(result: Any) -> Any:
        try:
            return await result
        except Exception:
            log.exception("Error in resolver %s", hint)
            raise

    @functools.wraps(fn)
    def resolve_logged(root: Any, info: Any, **args: Any) -> Any:
        try:
            result = fn(root, info, **args)
        except Exception:
            log.exception("Error in resolver %s", hint)
            raise
        if is_awaitable(result):
            return await_logged(result)
        return result

    return resolve_logged


def add_error_logging_to_schema(schema: GraphQLSchema, log: logging.Logger | None = None) -> None:
    """Log errors raised by every resolver attached to the schema.

    Fields without a resolver are left untouched.
    """
    target = log or logger
    if not callable(getattr(target, "exception", None)):
        raise SchemaError("Logger must provide an exception() method")

    def wrap(field: GraphQLField, type_name: str, field_name: str) -> None:
        if field.resolve is not None:
            field.resolve = decorate_with_logger(field.resolve, target, f"{type_name}.{field_name}")

    for_each_field(schema, wrap)
