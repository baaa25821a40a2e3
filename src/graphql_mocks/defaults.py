"""Built-in generators for the scalar types every schema carries."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from graphql_mocks.random_source import RandomSource

DEFAULT_STRING = "Hello World"


def _mock_id(source: RandomSource) -> str:
    return str(uuid.UUID(int=source.uniform_int(0, (1 << 128) - 1), version=4))


DEFAULT_MOCKS: MappingProxyType[str, Callable[[RandomSource], Any]] = MappingProxyType(
    {
        "Int": lambda source: source.uniform_int(-100, 100),
        "Float": lambda source: source.uniform(-100.0, 100.0),
        "String": lambda source: DEFAULT_STRING,
        "Boolean": lambda source: source.uniform_int(0, 1) == 1,
        "ID": _mock_id,
    }
)
