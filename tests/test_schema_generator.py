"""Tests for schema construction and resolver hooks."""

from __future__ import annotations

import logging
from typing import Any
from unittest.mock import MagicMock

import pytest
from graphql import GraphQLError, GraphQLSchema, graphql, graphql_sync

from graphql_mocks import (
    SchemaError,
    add_error_logging_to_schema,
    add_resolve_functions_to_schema,
    build_schema_from_type_definitions,
    for_each_field,
)


class TestBuildSchema:
    def test_from_string(self, shorthand: str) -> None:
        schema = build_schema_from_type_definitions(shorthand)
        assert schema.query_type is not None
        assert schema.query_type.name == "RootQuery"
        assert schema.mutation_type is not None

    def test_from_sequence(self) -> None:
        schema = build_schema_from_type_definitions(["type Query { a: A }", "type A { b: Int }"])
        assert schema.get_type("A") is not None

    @pytest.mark.parametrize("type_defs", ["", "  \n", [], None])
    def test_empty_type_definitions(self, type_defs: Any) -> None:
        with pytest.raises(SchemaError, match="Must provide typeDefs"):
            build_schema_from_type_definitions(type_defs)

    def test_syntax_errors_propagate(self) -> None:
        with pytest.raises(GraphQLError):
            build_schema_from_type_definitions("type Query {")


class TestForEachField:
    def test_visits_object_type_fields_only(self, schema: GraphQLSchema) -> None:
        visited: list[tuple[str, str]] = []
        for_each_field(schema, lambda field, type_name, field_name: visited.append((type_name, field_name)))

        assert ("Bird", "returnStringArgument") in visited
        assert ("RootMutation", "returnStringArgument") in visited
        assert ("RootQuery", "returnListOfListOfObject") in visited
        assert not any(type_name in {"Flying", "BirdsAndBees", "SomeEnum"} for type_name, _ in visited)
        assert not any(type_name.startswith("__") for type_name, _ in visited)


class TestAddResolveFunctions:
    def test_attaches_field_resolvers(self, schema: GraphQLSchema) -> None:
        add_resolve_functions_to_schema(schema, {"RootQuery": {"returnInt": lambda root, info: 5}})
        assert graphql_sync(schema, "{ returnInt }").data == {"returnInt": 5}

    def test_attaches_type_resolvers(self, schema: GraphQLSchema) -> None:
        def resolve_type(value: Any, info: Any, abstract_type: Any) -> str:
            return "Bird"

        add_resolve_functions_to_schema(schema, {"Flying": {"__resolve_type": resolve_type}})
        flying = schema.get_type("Flying")
        assert flying.resolve_type is resolve_type  # type: ignore[union-attr]

    def test_unknown_type(self, schema: GraphQLSchema) -> None:
        with pytest.raises(SchemaError, match='"Wasp" defined in resolvers, but not in schema'):
            add_resolve_functions_to_schema(schema, {"Wasp": {"sting": lambda root, info: 1}})

    def test_unknown_field(self, schema: GraphQLSchema) -> None:
        with pytest.raises(SchemaError, match="RootQuery.returnWasp defined in resolvers, but not in schema"):
            add_resolve_functions_to_schema(schema, {"RootQuery": {"returnWasp": lambda root, info: 1}})

    def test_resolve_type_on_object_type(self, schema: GraphQLSchema) -> None:
        with pytest.raises(SchemaError, match="only be defined on unions and interfaces"):
            add_resolve_functions_to_schema(schema, {"Bird": {"__resolve_type": lambda value, info, t: "Bird"}})


class TestErrorLogging:
    def test_logs_and_reraises(self, schema: GraphQLSchema) -> None:
        def broken(root: Any, info: Any) -> int:
            raise ValueError("boom")

        log = MagicMock(spec=logging.Logger)
        add_resolve_functions_to_schema(schema, {"RootQuery": {"returnInt": broken}})
        add_error_logging_to_schema(schema, log)

        result = graphql_sync(schema, "{ returnInt }")
        assert result.errors is not None
        assert result.errors[0].message == "boom"
        log.exception.assert_called_once_with("Error in resolver %s", "RootQuery.returnInt")

    @pytest.mark.asyncio
    async def test_logs_async_errors(self, schema: GraphQLSchema) -> None:
        async def broken(root: Any, info: Any) -> int:
            raise ValueError("boom")

        log = MagicMock(spec=logging.Logger)
        add_resolve_functions_to_schema(schema, {"RootQuery": {"returnInt": broken}})
        add_error_logging_to_schema(schema, log)

        result = await graphql(schema, "{ returnInt }")
        assert result.errors is not None
        log.exception.assert_called_once_with("Error in resolver %s", "RootQuery.returnInt")

    def test_leaves_fields_without_resolver(self, schema: GraphQLSchema) -> None:
        add_error_logging_to_schema(schema)
        assert schema.query_type is not None
        assert schema.query_type.fields["returnInt"].resolve is None

    def test_passes_results_through(self, schema: GraphQLSchema) -> None:
        add_resolve_functions_to_schema(schema, {"RootQuery": {"returnString": lambda root, info: "ok"}})
        add_error_logging_to_schema(schema)
        assert graphql_sync(schema, "{ returnString }").data == {"returnString": "ok"}

    def test_rejects_logger_without_exception_method(self, schema: GraphQLSchema) -> None:
        with pytest.raises(SchemaError, match="exception"):
            add_error_logging_to_schema(schema, object())  # type: ignore[arg-type]
