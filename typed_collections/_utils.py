# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import importlib
import inspect
import logging
from collections.abc import Callable
from typing import Any

import orjson
from pydantic import BaseModel

from ._errors import UnknownKindError

__all__ = (
    "adapt_callable",
    "json_dumps",
    "load_type_from_string",
    "positional_arity",
    "strict_equals",
    "strict_key",
)

logger = logging.getLogger(__name__)

_TYPE_CACHE: dict[str, type] = {}

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def load_type_from_string(type_str: str) -> type:
    """Load type from fully qualified path (e.g., 'myapp.models.Node').

    Args:
        type_str: Fully qualified type path.

    Returns:
        The loaded type class.

    Raises:
        UnknownKindError: If path invalid or type not found.
    """
    if not isinstance(type_str, str):
        raise UnknownKindError(f"Expected string, got {type(type_str)}")

    if type_str in _TYPE_CACHE:
        return _TYPE_CACHE[type_str]

    if "." not in type_str:
        raise UnknownKindError(f"Invalid type path (no module): {type_str}")

    module_path, class_name = type_str.rsplit(".", 1)
    try:
        module = importlib.import_module(module_path)
        type_class = getattr(module, class_name)
    except (ImportError, AttributeError) as e:
        logger.debug("Failed to resolve type path %r: %s", type_str, e)
        raise UnknownKindError(
            f"Unknown class '{type_str}'",
            details={"path": type_str},
            cause=e,
        ) from e

    if not isinstance(type_class, type):
        raise UnknownKindError(
            f"'{type_str}' is not a type", details={"path": type_str}
        )

    _TYPE_CACHE[type_str] = type_class
    return type_class


def positional_arity(func: Callable) -> int:
    """Number of positional arguments `func` accepts.

    Callables taking ``*args`` report a very large arity; callables whose
    signature cannot be inspected (some builtins) are assumed to take one.
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return 1

    count = 0
    for param in sig.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return 1 << 16
        if param.kind in _POSITIONAL:
            count += 1
    return count


def adapt_callable(func: Callable, max_args: int) -> Callable[..., Any]:
    """Wrap `func` so it can always be called with `max_args` arguments.

    Extra trailing arguments are dropped according to the arity of `func`,
    e.g. a one-argument predicate ignores the index it is offered.
    """
    take = min(positional_arity(func), max_args)
    if take >= max_args:
        return func
    return lambda *args: func(*args[:take])


def strict_key(value: Any) -> Any:
    """Hashable key under which only strictly equal values collide.

    ``1``, ``1.0`` and ``True`` hash alike in Python; tagging every value
    (and every member of a tuple or frozenset) with its exact type keeps
    them apart.

    Raises:
        TypeError: If `value` is unhashable.
    """
    if isinstance(value, tuple):
        return type(value), tuple(map(strict_key, value))
    if isinstance(value, frozenset):
        return type(value), frozenset(map(strict_key, value))
    return type(value), value


def strict_equals(a: Any, b: Any) -> bool:
    """Equality that also requires identical types, recursively.

    Example:
        >>> strict_equals(1, True), strict_equals([1, 2], [1, 2])
        (False, True)
    """
    if type(a) is not type(b):
        return False
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(map(strict_equals, a, b))
    if isinstance(a, (set, frozenset)):
        return set(map(strict_key, a)) == set(map(strict_key, b))
    if isinstance(a, dict):
        if set(map(strict_key, a)) != set(map(strict_key, b)):
            return False
        return all(strict_equals(v, b[k]) for k, v in a.items())
    return a == b


def _json_default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def json_dumps(obj: Any, /, *, decode: bool = True) -> str | bytes:
    """Encode `obj` with orjson, falling back on pydantic for models."""
    data = orjson.dumps(obj, default=_json_default)
    return data.decode("utf-8") if decode else data
