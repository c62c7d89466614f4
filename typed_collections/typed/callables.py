# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from collections.abc import Callable
from typing import Any

from ..collection import Collection
from ..validators import TypeValidator

__all__ = ("CallableCollection",)


class CallableCollection(Collection[Callable[..., Any]]):
    """A collection of callables (functions, methods, classes, ...)."""

    item_kind = Callable
    item_validator = TypeValidator(Callable, expected="callable")

    def invoke(self, *args: Any, **kwargs: Any) -> list[Any]:
        """Calls every item with the same arguments, in order."""
        return [func(*args, **kwargs) for func in self._items]
