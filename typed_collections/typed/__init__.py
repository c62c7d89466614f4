# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .callables import CallableCollection
from .classes import ClassCollection
from .container import DictCollection, ListCollection
from .mixed import MixedCollection
from .resource import ResourceCollection
from .scalar import (
    BoolCollection,
    FloatCollection,
    IntCollection,
    StringCollection,
)

__all__ = (
    "BoolCollection",
    "CallableCollection",
    "ClassCollection",
    "DictCollection",
    "FloatCollection",
    "IntCollection",
    "ListCollection",
    "MixedCollection",
    "ResourceCollection",
    "StringCollection",
)
