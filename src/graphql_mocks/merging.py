"""Combining mocked values with caller-supplied and real resolver values."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping
from enum import Enum
from functools import cached_property
from types import FunctionType
from typing import Any

from graphql.pyutils import Undefined, is_awaitable

Resolver = Callable[..., Any]

_NON_RECORD_TYPES = (str, bytes, bytearray, int, float, complex, list, tuple, set, frozenset, Enum)
_CLASS_FIELD_TYPES = (property, cached_property, FunctionType, staticmethod, classmethod)


def is_record(value: Any) -> bool:
    """Return True for mappings and attribute-carrying objects."""
    if isinstance(value, Mapping):
        return True
    if value is None or value is Undefined or isinstance(value, _NON_RECORD_TYPES) or callable(value):
        return False
    return hasattr(value, "__dict__") or any(_slot_names(cls) for cls in type(value).__mro__)


def _slot_names(cls: type) -> tuple[str, ...]:
    slots = cls.__dict__.get("__slots__", ())
    return (slots,) if isinstance(slots, str) else tuple(slots)


def record_fields(value: Any) -> dict[str, Any]:
    """Flatten a record into a dict of its public fields.

    Instance attributes come first, then slots, properties and methods declared
    on the class and its bases in MRO order; the first occurrence of a name
    wins. Methods are copied bound, so they resolve their field as generators.
    """
    if isinstance(value, Mapping):
        return dict(value)

    fields: dict[str, Any] = {}
    for name, attr in getattr(value, "__dict__", {}).items():
        if not name.startswith("_"):
            fields[name] = attr

    for cls in type(value).__mro__:
        slots = _slot_names(cls)
        for name, attr in vars(cls).items():
            if name.startswith("_") or name in fields:
                continue
            if not isinstance(attr, _CLASS_FIELD_TYPES) and name not in slots:
                continue
            try:
                fields[name] = getattr(value, name)
            except AttributeError:
                continue
    return fields


def merge_records(*sources: Any) -> dict[str, Any]:
    """Merge records key by key; earlier sources take precedence."""
    merged: dict[str, Any] = {}
    for source in sources:
        for name, value in record_fields(source).items():
            merged.setdefault(name, value)
    return merged


def merge_mocks(generic_mock: Callable[[], Any], custom: Any) -> Any:
    """Complete ``custom`` with fields from ``generic_mock()``.

    Lists are merged element by element, records get the generic fields they
    lack, and anything else is returned unchanged.
    """
    if isinstance(custom, (list, tuple)):
        return [merge_mocks(generic_mock, item) for item in custom]
    if is_record(custom):
        generic = generic_mock()
        if is_record(generic):
            return merge_records(custom, generic)
    return custom


def merge_resolved_values(mocked: Any, resolved: Any) -> Any:
    """Merge a real resolver result over its mocked counterpart.

    Real fields win and the mock fills the gaps. A non-record real result,
    ``None`` included, replaces the mock unless it is ``Undefined``.
    """
    if is_record(mocked) and is_record(resolved):
        return merge_records(resolved, mocked)
    return mocked if resolved is Undefined else resolved


async def _settle(value: Any) -> Any:
    if is_awaitable(value):
        return await value
    return value


async def _merge_awaited(mocked: Awaitable[Any] | Any, resolved: Awaitable[Any] | Any) -> Any:
    mocked_value, resolved_value = await asyncio.gather(_settle(mocked), _settle(resolved))
    return merge_resolved_values(mocked_value, resolved_value)


def merge_resolvers(mock_resolver: Resolver, real_resolver: Resolver) -> Resolver:
    """Build a resolver running both resolvers and merging their results.

    The merged resolver stays synchronous when both sides are; otherwise it
    returns a coroutine awaiting both together.
    """

    def resolve_merged(root: Any, info: Any, **args: Any) -> Any:
        mocked = mock_resolver(root, info, **args)
        resolved = real_resolver(root, info, **args)
        if is_awaitable(mocked) or is_awaitable(resolved):
            return _merge_awaited(mocked, resolved)
        return merge_resolved_values(mocked, resolved)

    return resolve_merged
