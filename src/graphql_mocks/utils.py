"""Calling conventions shared by mock factories and override functions."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from typing import Any

_KEYWORD_KINDS = (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)
_POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def is_parameterized(fn: Callable[..., Any]) -> bool:
    """Return True if ``fn`` declares at least one parameter.

    Callables whose signature cannot be inspected (some builtins) count as
    parameterized.
    """
    try:
        return bool(inspect.signature(fn).parameters)
    except (TypeError, ValueError):
        return True


def accepted_args(fn: Callable[..., Any], args: Mapping[str, Any]) -> dict[str, Any]:
    """Narrow field arguments to the keywords ``fn`` can take after ``root, info``.

    Mocks registered per type are shared by fields with different arguments,
    so arguments ``fn`` does not name are dropped unless it takes ``**kwargs``.
    """
    try:
        parameters = list(inspect.signature(fn).parameters.values())
    except (TypeError, ValueError):
        return dict(args)
    if any(param.kind is inspect.Parameter.VAR_KEYWORD for param in parameters):
        return dict(args)
    positional = [param for param in parameters if param.kind in _POSITIONAL_KINDS]
    bound = {param.name for param in positional[:2]}
    names = {param.name for param in parameters if param.kind in _KEYWORD_KINDS} - bound
    return {name: value for name, value in args.items() if name in names}


def invoke_mock(fn: Callable[..., Any], root: Any, info: Any, args: Mapping[str, Any]) -> Any:
    """Call a mock function with the resolver convention ``fn(root, info, **args)``.

    Zero-argument callables are called bare, so ``lambda: 42`` is a valid mock.
    Field arguments the function does not declare are not passed.
    """
    if not is_parameterized(fn):
        return fn()
    return fn(root, info, **accepted_args(fn, args))
