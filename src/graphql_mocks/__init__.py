"""graphql-mocks.

Mock resolvers for graphql-core schemas, so queries can run before any real
resolver exists.
"""

from __future__ import annotations

from graphql_mocks.exceptions import MockConfigurationError, MockError, NoMockDefinedError, SchemaError
from graphql_mocks.mock_list import MockList
from graphql_mocks.mocking import add_mocks_to_schema
from graphql_mocks.random_source import PseudoRandomSource, RandomSource
from graphql_mocks.schema_generator import (
    add_error_logging_to_schema,
    add_resolve_functions_to_schema,
    build_schema_from_type_definitions,
    for_each_field,
)
from graphql_mocks.server import MockServer, mock_server
from graphql_mocks.settings import MockSettings
from graphql_mocks.tracing import add_tracing_to_schema

__version__ = "0.1.0"

__all__ = [
    "MockConfigurationError",
    "MockError",
    "MockList",
    "MockServer",
    "MockSettings",
    "NoMockDefinedError",
    "PseudoRandomSource",
    "RandomSource",
    "SchemaError",
    "add_error_logging_to_schema",
    "add_mocks_to_schema",
    "add_resolve_functions_to_schema",
    "add_tracing_to_schema",
    "build_schema_from_type_definitions",
    "for_each_field",
    "mock_server",
]
