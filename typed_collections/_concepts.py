# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .collection import Collection

__all__ = (
    "ItemValidator",
    "MutationPolicy",
)


class MutationPolicy(str, Enum):
    """How mutating operations treat the receiving collection."""

    IN_PLACE = "in_place"
    """Mutate the receiver and return it."""

    COPY_ON_WRITE = "copy_on_write"
    """Leave the receiver untouched and return a modified copy."""


@runtime_checkable
class ItemValidator(Protocol):
    """Per-item check run on construction and on every insertion.

    ``index`` is the item position during construction, ``None`` for
    insertions. Implementations raise ``InvalidItemError`` to reject.
    """

    def __call__(
        self, item: Any, index: int | None, owner: "Collection"
    ) -> None: ...
