# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing_extensions import Self

from .._errors import InvalidArgumentError
from ..collection import Collection
from ..validators import TypeValidator

__all__ = (
    "BoolCollection",
    "FloatCollection",
    "IntCollection",
    "StringCollection",
)


def _inclusive_range(start: int, end: int, step: int) -> range:
    """Range including both ends, counting down when ``start > end``."""
    if step <= 0:
        raise InvalidArgumentError(
            f"step must be positive, got {step}", details={"step": step}
        )
    if start <= end:
        return range(start, end + 1, step)
    return range(start, end - 1, -step)


class BoolCollection(Collection[bool]):
    """A collection of booleans."""

    item_kind = bool
    item_validator = TypeValidator(bool, expected="boolean")


class IntCollection(Collection[int]):
    """A collection of integers. Booleans are rejected."""

    item_kind = int
    item_validator = TypeValidator(int, exclude=bool, expected="integer")

    @classmethod
    def from_range(cls, start: int, end: int, step: int = 1) -> Self:
        """Integers from `start` to `end` inclusive.

        Counts down when `start` is greater than `end`.

        Example:
            >>> IntCollection.from_range(5, 1, 2).to_list()
            [5, 3, 1]

        Raises:
            InvalidArgumentError: If `step` is not positive.
        """
        return cls.from_list(_inclusive_range(start, end, step))


class FloatCollection(Collection[float]):
    """A collection of floats. Integers are rejected."""

    item_kind = float
    item_validator = TypeValidator(float, expected="float")


class StringCollection(Collection[str]):
    """A collection of strings."""

    item_kind = str
    item_validator = TypeValidator(str, expected="string")

    @classmethod
    def from_range(cls, start: str, end: str, step: int = 1) -> Self:
        """Characters from `start` to `end` inclusive, e.g. ``"a"``-``"e"``.

        Raises:
            InvalidArgumentError: If a bound is not a single character or
                `step` is not positive.
        """
        for bound in (start, end):
            if not isinstance(bound, str) or len(bound) != 1:
                raise InvalidArgumentError(
                    f"range bounds must be single characters, got {bound!r}"
                )
        codes = _inclusive_range(ord(start), ord(end), step)
        return cls.from_list(chr(code) for code in codes)
