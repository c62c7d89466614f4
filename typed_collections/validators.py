# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging
from types import UnionType
from typing import Any, Union, get_args, get_origin

from ._errors import InvalidItemError

__all__ = (
    "Kind",
    "TypeValidator",
    "is_subkind",
    "kind_name",
    "normalize_kind",
)

logger = logging.getLogger(__name__)

Kind = type | tuple[type, ...] | UnionType
"""An element kind: a type, a tuple of types, or a union annotation."""


def _is_union(t: Any) -> bool:
    origin = get_origin(t)
    return origin is Union or isinstance(t, UnionType)


def normalize_kind(kind: Any) -> tuple[type, ...]:
    """Flatten an element kind into a tuple of concrete types.

    Handles ``None``, unions, tuples and lists of those, and single types.
    Order is preserved and duplicates are dropped.

    Raises:
        TypeError: If the kind contains something that is not a type.
    """
    extracted: list[type] = []

    def _add(t: Any) -> None:
        if t is None:
            t = type(None)
        if _is_union(t):
            for arg in get_args(t):
                _add(arg)
            return
        if isinstance(t, (tuple, list, set, frozenset)):
            for arg in t:
                _add(arg)
            return
        if not isinstance(t, type):
            raise TypeError(f"Element kind must be a type, not {t!r}")
        if t not in extracted:
            extracted.append(t)

    _add(kind)
    return tuple(extracted)


def is_subkind(kind: Any, of: Any) -> bool:
    """True if every type of `kind` is the same as or a subtype of `of`."""
    sub = normalize_kind(kind)
    sup = normalize_kind(of)
    return all(issubclass(t, sup) for t in sub)


def kind_name(kind: Any) -> str:
    """Readable name of an element kind, e.g. ``'int | None'``."""
    return " | ".join(
        "None" if t is type(None) else t.__qualname__
        for t in normalize_kind(kind)
    )


class TypeValidator:
    """Accepts instances of `kind` (subclasses included).

    Args:
        kind: Admissible element kind.
        exclude: Subtypes to reject even though they match `kind`, e.g.
            ``bool`` for an integer validator.
        expected: Name reported in errors, defaults to the kind's name.

    Example:
        >>> check = TypeValidator(int, exclude=bool, expected="integer")
        >>> check(True, 0, owner)
        Traceback (most recent call last):
        InvalidItemError: Invalid collection item at index 0: ...
    """

    __slots__ = ("kind", "exclude", "expected")

    def __init__(
        self,
        kind: Any,
        *,
        exclude: Any = (),
        expected: str | None = None,
    ):
        self.kind = normalize_kind(kind)
        self.exclude = normalize_kind(exclude) if exclude else ()
        self.expected = expected or kind_name(self.kind)

    def accepts(self, item: Any) -> bool:
        if not isinstance(item, self.kind):
            return False
        return not (self.exclude and isinstance(item, self.exclude))

    def __call__(self, item: Any, index: int | None, owner: Any) -> None:
        if not self.accepts(item):
            logger.debug(
                "%s rejected %r at index %s (expected %s)",
                type(owner).__name__,
                item,
                index,
                self.expected,
            )
            raise InvalidItemError.from_item(item, self.expected, index)

    def __repr__(self) -> str:
        return f"TypeValidator(kind={kind_name(self.kind)!r})"
