"""Shared schema fixtures for mocking tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from graphql import GraphQLSchema

from graphql_mocks import build_schema_from_type_definitions

SHORTHAND = """
    scalar MissingMockType

    interface Flying {
      returnInt: Int
    }

    type Bird implements Flying {
      returnInt: Int
      returnString: String
      returnStringArgument(s: String): String
    }

    type Bee implements Flying {
      returnInt: Int
      returnEnum: SomeEnum
    }

    union BirdsAndBees = Bird | Bee

    enum SomeEnum {
      A
      B
      C
    }

    type RootQuery {
      returnInt: Int
      returnFloat: Float
      returnString: String
      returnBoolean: Boolean
      returnID: ID
      returnEnum: SomeEnum
      returnBirdsAndBees: [BirdsAndBees]
      returnFlying: [Flying]
      returnMockError: MissingMockType
      returnNullableString: String
      returnNonNullString: String!
      returnObject: Bird
      returnListOfInt: [Int]
      returnListOfIntArg(l: Int): [Int]
      returnListOfListOfInt: [[Int!]!]!
      returnListOfListOfIntArg(l: Int): [[Int]]
      returnListOfListOfObject: [[Bird!]]!
      returnStringArgument(s: String): String
    }

    type RootMutation {
      returnStringArgument(s: String): String
    }

    schema {
      query: RootQuery
      mutation: RootMutation
    }
"""


class LowestRandomSource:
    """Always draws the lower bound, so picks are deterministic."""

    def __init__(self) -> None:
        self.calls: list[tuple[float, float]] = []

    def uniform_int(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return low

    def uniform(self, low: float, high: float) -> float:
        self.calls.append((low, high))
        return low


@pytest.fixture
def schema_factory() -> Callable[[], GraphQLSchema]:
    return lambda: build_schema_from_type_definitions(SHORTHAND)


@pytest.fixture
def schema(schema_factory: Callable[[], GraphQLSchema]) -> GraphQLSchema:
    """A fresh schema per test, since mocking mutates it in place."""
    return schema_factory()


@pytest.fixture
def lowest_random() -> LowestRandomSource:
    return LowestRandomSource()


@pytest.fixture
def shorthand() -> str:
    return SHORTHAND
