# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any

from ..collection import Collection

__all__ = ("MixedCollection",)


class MixedCollection(Collection[Any]):
    """A collection accepting values of any kind.

    Projections such as ``select`` and ``join`` return this variant.
    """
