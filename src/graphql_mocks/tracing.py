"""OpenTelemetry spans around field resolvers."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from graphql import GraphQLField, GraphQLSchema
from graphql.pyutils import is_awaitable
from opentelemetry import trace

from graphql_mocks.schema_generator import for_each_field

TRACER_NAME = "graphql_mocks"


async def _end_after(result: Any, span: Any) -> Any:
    try:
        with trace.use_span(span, record_exception=True, set_status_on_exception=True):
            return await result
    finally:
        span.end()


def decorate_with_tracer(fn: Callable[..., Any], tracer: trace.Tracer, span_name: str) -> Callable[..., Any]:
    """Wrap a resolver in a span that ends once its value is available."""

    @functools.wraps(fn)
    def resolve_traced(root: Any, info: Any, **args: Any) -> Any:
        span = tracer.start_span(span_name, attributes={"graphql.field.name": info.field_name})
        try:
            with trace.use_span(span, record_exception=True, set_status_on_exception=True):
                result = fn(root, info, **args)
        except BaseException:
            span.end()
            raise
        if is_awaitable(result):
            return _end_after(result, span)
        span.end()
        return result

    return resolve_traced


def add_tracing_to_schema(schema: GraphQLSchema, tracer: trace.Tracer | None = None) -> None:
    """Trace every resolver attached to the schema as ``Type.field`` spans."""
    active_tracer = tracer or trace.get_tracer(TRACER_NAME)

    def wrap(field: GraphQLField, type_name: str, field_name: str) -> None:
        if field.resolve is not None:
            field.resolve = decorate_with_tracer(field.resolve, active_tracer, f"{type_name}.{field_name}")

    for_each_field(schema, wrap)
