# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Final, Literal, TypeVar, Union

__all__ = (
    "MaybeUndefined",
    "SingletonType",
    "Undefined",
    "UndefinedType",
    "is_sentinel",
)

T = TypeVar("T")


class _SingletonMeta(type):
    """Metaclass that guarantees exactly one instance per subclass."""

    _cache: dict[type, SingletonType] = {}

    def __call__(cls, *a, **kw):
        if cls not in cls._cache:
            cls._cache[cls] = super().__call__(*a, **kw)
        return cls._cache[cls]


class SingletonType(metaclass=_SingletonMeta):
    """Base class for singleton sentinel types.

    Provides consistent interface for sentinel values with:
    - Identity preservation across deepcopy
    - Falsy boolean evaluation
    - Clear string representation
    """

    __slots__: tuple[str, ...] = ()

    def __deepcopy__(self, memo):
        return self

    def __copy__(self):
        return self

    # concrete classes *must* override the two methods below
    def __bool__(self) -> bool: ...
    def __repr__(self) -> str: ...


class UndefinedType(SingletonType):
    """Sentinel for a lookup that found nothing.

    Collections may legitimately hold ``None``, so searches report a miss
    with ``Undefined`` instead.

    Example:
        >>> IntCollection.new().first_or_none() is None
        True
    """

    __slots__ = ()

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> Literal["Undefined"]:
        return "Undefined"

    def __str__(self) -> Literal["Undefined"]:
        return "Undefined"

    def __reduce__(self):
        """Ensure pickle preservation of singleton identity."""
        return "Undefined"


Undefined: Final = UndefinedType()
"""A lookup that found nothing."""

MaybeUndefined = Union[T, UndefinedType]


def is_sentinel(value: Any, *, none_as_sentinel: bool = False) -> bool:
    """Check if a value is the Undefined sentinel.

    Args:
        value: Any value to check.
        none_as_sentinel: Treat ``None`` as a sentinel as well.
    """
    if isinstance(value, UndefinedType):
        return True
    return none_as_sentinel and value is None
