"""Type-directed mock resolvers for every field of a graphql-core schema.

``add_mocks_to_schema`` installs a resolver on each object type field. At
query time a resolver decides the field's value in this order:

1. a value (or function) already present on the parent object under the
   field name, completed with the registered mock for the field's type;
2. two independently mocked elements for list types;
3. the registered mock for the type;
4. an empty object for object types, whose fields resolve on their own;
5. a random member for unions and interfaces, stamped with ``typename``;
6. a random value for enums;
7. the built-in generator for ``Int``, ``Float``, ``String``, ``Boolean`` and
   ``ID``, failing with ``NoMockDefinedError`` for any other scalar.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import StrEnum
from types import SimpleNamespace
from typing import Any, NamedTuple

from graphql import (
    GraphQLEnumType,
    GraphQLField,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLOutputType,
    GraphQLSchema,
    GraphQLUnionType,
    get_named_type,
    get_nullable_type,
    is_abstract_type,
)
from graphql.pyutils import Undefined

from graphql_mocks.defaults import DEFAULT_MOCKS
from graphql_mocks.exceptions import MockConfigurationError, MockError, NoMockDefinedError
from graphql_mocks.merging import is_record, merge_mocks, merge_resolvers, record_fields
from graphql_mocks.mock_list import MockList
from graphql_mocks.random_source import PseudoRandomSource, RandomSource, choice
from graphql_mocks.schema_generator import for_each_field
from graphql_mocks.settings import MockSettings
from graphql_mocks.utils import invoke_mock, is_parameterized

logger = logging.getLogger(__name__)

TYPENAME_FIELD = "typename"
DEFAULT_LIST_LENGTH = 2

MockFunction = Callable[..., Any]
Resolver = Callable[..., Any]


class OverrideKind(StrEnum):
    """How the parent object supplies a field."""

    ABSENT = "absent"
    VALUE = "value"
    GENERATOR = "generator"


class FieldOverride(NamedTuple):
    """What the parent object holds under a field name."""

    kind: OverrideKind
    value: Any = None

    @classmethod
    def of(cls, root: Any, field_name: str | None) -> FieldOverride:
        if root is None or field_name is None:
            return ABSENT
        if isinstance(root, Mapping):
            value = root.get(field_name, Undefined)
        else:
            value = getattr(root, field_name, Undefined)
        if value is Undefined:
            return ABSENT
        if callable(value):
            return cls(OverrideKind.GENERATOR, value)
        return cls(OverrideKind.VALUE, value)


ABSENT = FieldOverride(OverrideKind.ABSENT)


def resolve_mocked_type(value: Any, info: Any, abstract_type: Any = None) -> str | None:
    """Resolve an abstract type from the ``typename`` stamped on mocked values."""
    if isinstance(value, Mapping):
        type_name = value.get(TYPENAME_FIELD)
    else:
        type_name = getattr(value, TYPENAME_FIELD, None)
    if not type_name:
        return None
    concrete_type = info.schema.get_type(type_name)
    return concrete_type.name if concrete_type is not None else None


class SchemaMocker:
    """Builds and installs mock resolvers for one schema and mock registry."""

    def __init__(
        self,
        schema: GraphQLSchema,
        mocks: Mapping[str, MockFunction],
        preserve_resolvers: bool,
        random_source: RandomSource,
    ):
        self.schema = schema
        self.mocks = dict(mocks)
        self.preserve_resolvers = preserve_resolvers
        self.random_source = random_source
        self._root_type_names = {
            root_type.name for root_type in (schema.query_type, schema.mutation_type) if root_type is not None
        }

    # ─── Resolver construction ───────────────────────────

    def mock_type(self, type_: GraphQLOutputType, field_name: str | None = None) -> Resolver:
        """Return a resolver producing mock values of ``type_``."""

        def resolve_mock(root: Any, info: Any, **args: Any) -> Any:
            # nullability does not matter for mocking
            field_type = get_nullable_type(type_)

            override = FieldOverride.of(root, field_name)
            if override.kind is not OverrideKind.ABSENT:
                return self._complete_override(override, field_type, root, info, args)

            if isinstance(field_type, GraphQLList):
                item_resolver = self.mock_type(field_type.of_type)
                return [item_resolver(root, info, **args) for _ in range(DEFAULT_LIST_LENGTH)]

            mock = self.mocks.get(field_type.name)
            if mock is not None:
                return invoke_mock(mock, root, info, args)
            if isinstance(field_type, GraphQLObjectType):
                return {}
            if isinstance(field_type, GraphQLUnionType):
                return self._mock_abstract(field_type, field_type.types, root, info, args)
            if isinstance(field_type, GraphQLInterfaceType):
                possible_types = self.schema.get_possible_types(field_type)
                return self._mock_abstract(field_type, possible_types, root, info, args)
            if isinstance(field_type, GraphQLEnumType):
                name, enum_value = choice(self.random_source, list(field_type.values.items()))
                return name if enum_value.value is None else enum_value.value

            default_mock = DEFAULT_MOCKS.get(field_type.name)
            if default_mock is not None:
                return default_mock(self.random_source)
            raise NoMockDefinedError(field_type.name)

        return resolve_mock

    def _complete_override(
        self,
        override: FieldOverride,
        field_type: GraphQLOutputType,
        root: Any,
        info: Any,
        args: dict[str, Any],
    ) -> Any:
        if override.kind is OverrideKind.GENERATOR:
            value = invoke_mock(override.value, root, info, args)
        else:
            value = override.value
        if isinstance(value, MockList):
            value = value.mock(root, info, args, field_type, self.mock_type, self.random_source)

        mock = self.mocks.get(get_named_type(field_type).name)
        if mock is None:
            return value
        return merge_mocks(lambda: invoke_mock(mock, root, info, args), value)

    def _mock_abstract(
        self,
        abstract_type: GraphQLNamedType,
        candidates: Any,
        root: Any,
        info: Any,
        args: dict[str, Any],
    ) -> dict[str, Any]:
        if not candidates:
            raise MockError(f'No possible types to mock for abstract type "{abstract_type.name}"')
        concrete_type = choice(self.random_source, list(candidates))
        value = self.mock_type(concrete_type)(root, info, **args)
        stamped: dict[str, Any] = {TYPENAME_FIELD: concrete_type.name}
        if is_record(value):
            stamped.update(record_fields(value))
        return stamped

    def _root_field_resolver(self, field: GraphQLField, type_name: str, field_name: str) -> Resolver | None:
        """Resolver for a root field whose value the root type mock provides.

        Root fields have no parent object, so the root mock is called per
        request and its entry for the field is placed on a copy of the root
        value before regular mocking runs.
        """
        root_mock = self.mocks.get(type_name)
        if root_mock is None:
            return None
        probe = invoke_mock(root_mock, {}, self._setup_info(type_name, field_name, field), {})
        if not isinstance(probe, Mapping) or field_name not in probe:
            return None

        field_resolver = self.mock_type(field.type, field_name)

        def resolve_root_field(root: Any, info: Any, **args: Any) -> Any:
            updated_root = record_fields(root) if is_record(root) else {}
            updated_root[field_name] = invoke_mock(root_mock, root, info, args)[field_name]
            return field_resolver(updated_root, info, **args)

        return resolve_root_field

    def _setup_info(self, type_name: str, field_name: str, field: GraphQLField) -> SimpleNamespace:
        """Stand-in for ``info`` when root mocks are probed outside a query."""
        return SimpleNamespace(
            schema=self.schema,
            field_name=field_name,
            return_type=field.type,
            parent_type=self.schema.get_type(type_name),
            context={},
            root_value={},
            variable_values={},
        )

    # ─── Installation ────────────────────────────────────

    def assign_resolve_types(self) -> int:
        """Install the ``typename`` type resolver on unions and interfaces."""
        assigned = 0
        for type_name, type_ in self.schema.type_map.items():
            if type_name.startswith("__") or not is_abstract_type(type_):
                continue
            existing = type_.resolve_type
            if self.preserve_resolvers and existing is not None and is_parameterized(existing):
                logger.debug("Preserving type resolver for %s", type_name)
                continue
            type_.resolve_type = resolve_mocked_type
            assigned += 1
        return assigned

    def install_field(self, field: GraphQLField, type_name: str, field_name: str) -> None:
        mock_resolver = None
        if type_name in self._root_type_names:
            mock_resolver = self._root_field_resolver(field, type_name, field_name)
        if mock_resolver is None:
            mock_resolver = self.mock_type(field.type, field_name)

        if not self.preserve_resolvers or field.resolve is None:
            field.resolve = mock_resolver
        else:
            logger.debug("Merging mocks with existing resolver for %s.%s", type_name, field_name)
            field.resolve = merge_resolvers(mock_resolver, field.resolve)

    def install(self) -> None:
        abstract_count = self.assign_resolve_types()
        field_count = 0

        def install_and_count(field: GraphQLField, type_name: str, field_name: str) -> None:
            nonlocal field_count
            self.install_field(field, type_name, field_name)
            field_count += 1

        for_each_field(self.schema, install_and_count)
        logger.info(
            "Mocked %d fields and %d abstract types (preserve_resolvers=%s)",
            field_count,
            abstract_count,
            self.preserve_resolvers,
        )


def add_mocks_to_schema(
    schema: GraphQLSchema,
    mocks: Mapping[str, MockFunction] | None = None,
    preserve_resolvers: bool = False,
    random_source: RandomSource | None = None,
) -> None:
    """Install mock resolvers on every field of ``schema`` in place.

    Args:
        schema: Schema to mutate.
        mocks: Type name to mock function. Functions are called as
            ``fn(root, info, **args)`` (or ``fn()`` if they take no
            parameters) and return a value, or a dict of per-field values and
            functions for object types.
        preserve_resolvers: Keep existing field resolvers and merge their
            results over the mocks, and keep customized type resolvers.
        random_source: Source of all random draws; defaults to a
            ``PseudoRandomSource`` seeded from ``MockSettings.seed``.

    Raises:
        MockConfigurationError: If the schema is missing or the mocks are not
            a mapping of callables.
    """
    if schema is None:
        raise MockConfigurationError("Must provide schema to mock")
    if not isinstance(schema, GraphQLSchema):
        raise MockConfigurationError(f"Expected a GraphQLSchema to mock, got {type(schema).__name__}")
    if mocks is None:
        mocks = {}
    if not isinstance(mocks, Mapping):
        raise MockConfigurationError("mocks must be a mapping of type names to callables")
    for type_name, mock in mocks.items():
        if not callable(mock):
            raise MockConfigurationError(f'mocks["{type_name}"] must be callable')

    if random_source is None:
        random_source = PseudoRandomSource(MockSettings().seed)

    SchemaMocker(schema, mocks, preserve_resolvers, random_source).install()
