# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from ..collection import Collection
from ..validators import TypeValidator

__all__ = (
    "DictCollection",
    "ListCollection",
)


class ListCollection(Collection[list[Any]]):
    """A collection of lists."""

    item_kind = list
    item_validator = TypeValidator(list, expected="list")


class DictCollection(Collection[dict[Any, Any]]):
    """A collection of dictionaries."""

    item_kind = dict
    item_validator = TypeValidator(dict, expected="dict")
