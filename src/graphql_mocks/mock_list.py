"""Sized list descriptor returned by mock functions to control list cardinality."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from graphql import GraphQLList, GraphQLOutputType, get_nullable_type

from graphql_mocks.exceptions import MockConfigurationError, MockError
from graphql_mocks.random_source import PseudoRandomSource, RandomSource
from graphql_mocks.utils import invoke_mock

MockTypeFactory = Callable[..., Callable[..., Any]]


class MockList:
    """A list of ``length`` mocked elements.

    Return it from a mock function for a list-typed field::

        mocks = {
            "Query": lambda: {"posts": lambda root, info, **args: MockList(args["num"])},
            "Thread": lambda: {"tags": lambda: MockList((1, 5), lambda: "tag")},
        }

    Args:
        length: Exact element count, or an inclusive ``(low, high)`` range
            drawn anew every time the list is generated.
        element_generator: Optional function producing each element. It may
            return another MockList to size a nested list level.
    """

    def __init__(
        self,
        length: int | Sequence[int],
        element_generator: Callable[..., Any] | None = None,
    ):
        if element_generator is not None and not callable(element_generator):
            raise MockConfigurationError("Second argument to MockList must be callable or None")
        self.length = _validate_length(length)
        self.element_generator = element_generator

    def __repr__(self) -> str:
        return f"MockList({self.length!r})"

    def _draw_length(self, random_source: RandomSource) -> int:
        if isinstance(self.length, int):
            return self.length
        low, high = self.length
        return random_source.uniform_int(low, high)

    def mock(
        self,
        root: Any,
        info: Any,
        args: Mapping[str, Any],
        list_type: GraphQLOutputType,
        mock_type: MockTypeFactory,
        random_source: RandomSource | None = None,
    ) -> list[Any]:
        """Generate the list for ``list_type`` (nullability already stripped).

        Elements without an ``element_generator`` are produced independently
        by ``mock_type(list_type.of_type)``.
        """
        if not isinstance(list_type, GraphQLList):
            raise MockError(f"MockList returned for non-list type {list_type}")
        source = random_source or PseudoRandomSource()
        item_type = list_type.of_type

        items: list[Any] = []
        for _ in range(self._draw_length(source)):
            if self.element_generator is None:
                items.append(mock_type(item_type)(root, info, **args))
                continue
            value = invoke_mock(self.element_generator, root, info, args)
            if isinstance(value, MockList):
                value = value.mock(root, info, args, get_nullable_type(item_type), mock_type, source)
            items.append(value)
        return items


def _validate_length(length: int | Sequence[int]) -> int | tuple[int, int]:
    if isinstance(length, bool):
        raise MockConfigurationError(f"MockList length must be an int or a (low, high) pair, got {length!r}")
    if isinstance(length, int):
        if length < 0:
            raise MockConfigurationError(f"MockList length must not be negative, got {length}")
        return length
    if isinstance(length, Sequence) and not isinstance(length, str) and len(length) == 2:
        low, high = length
        if isinstance(low, int) and isinstance(high, int) and 0 <= low <= high:
            return (low, high)
    raise MockConfigurationError(
        f"MockList length must be an int or a (low, high) pair with 0 <= low <= high, got {length!r}"
    )
