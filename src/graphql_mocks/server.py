"""Convenience wrapper running queries against a mocked schema."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from graphql import ExecutionResult, GraphQLSchema, graphql, graphql_sync

from graphql_mocks.mocking import MockFunction, add_mocks_to_schema
from graphql_mocks.random_source import PseudoRandomSource, RandomSource
from graphql_mocks.schema_generator import build_schema_from_type_definitions
from graphql_mocks.settings import MockSettings
from graphql_mocks.tracing import add_tracing_to_schema

logger = logging.getLogger(__name__)


class MockServer:
    """Executes queries against a schema whose fields are mocked.

    Example:
        >>> server = mock_server("type Query { hello: String }")
        >>> server.query_sync("{ hello }").data
        {'hello': 'Hello World'}
    """

    def __init__(self, schema: GraphQLSchema):
        self.schema = schema

    async def query(self, source: str, variables: dict[str, Any] | None = None) -> ExecutionResult:
        """Execute ``source``; supports resolvers returning awaitables."""
        return await graphql(self.schema, source, root_value={}, context_value={}, variable_values=variables)

    def query_sync(self, source: str, variables: dict[str, Any] | None = None) -> ExecutionResult:
        """Execute ``source`` synchronously; fails if a resolver is async."""
        return graphql_sync(self.schema, source, root_value={}, context_value={}, variable_values=variables)


def mock_server(
    schema: GraphQLSchema | str | Sequence[str],
    mocks: Mapping[str, MockFunction] | None = None,
    preserve_resolvers: bool | None = None,
    random_source: RandomSource | None = None,
) -> MockServer:
    """Mock a schema, or the schema built from SDL, and wrap it in a MockServer.

    ``preserve_resolvers`` and the random seed default to ``MockSettings``.
    """
    settings = MockSettings()
    executable_schema = (
        schema if isinstance(schema, GraphQLSchema) else build_schema_from_type_definitions(schema)
    )
    if preserve_resolvers is None:
        preserve_resolvers = settings.preserve_resolvers

    add_mocks_to_schema(
        executable_schema,
        mocks,
        preserve_resolvers=preserve_resolvers,
        random_source=random_source or PseudoRandomSource(settings.seed),
    )
    if settings.tracing_enabled:
        add_tracing_to_schema(executable_schema)
        logger.info("Tracing enabled for mocked schema")
    return MockServer(executable_schema)
