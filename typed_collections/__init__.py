# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import logging

from ._concepts import ItemValidator, MutationPolicy
from ._errors import (
    CollectionError,
    EmptyCollectionError,
    IncompatibleKindError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    InvalidItemError,
    InvalidOperationError,
    ItemNotFoundError,
    NoPredicateResultError,
    TooManyItemsError,
    TooManyPredicateResultsError,
    UnknownKindError,
    UnsupportedOperationError,
)
from .collection import Collection
from .config import CollectionSettings, settings
from .typed import (
    BoolCollection,
    CallableCollection,
    ClassCollection,
    DictCollection,
    FloatCollection,
    IntCollection,
    ListCollection,
    MixedCollection,
    ResourceCollection,
    StringCollection,
)
from .validators import TypeValidator
from .version import __version__

logger = logging.getLogger(__name__)
logger.setLevel(settings.log_level)

__all__ = (
    "__version__",
    "BoolCollection",
    "CallableCollection",
    "ClassCollection",
    "Collection",
    "CollectionError",
    "CollectionSettings",
    "DictCollection",
    "EmptyCollectionError",
    "FloatCollection",
    "IncompatibleKindError",
    "IndexOutOfBoundsError",
    "IntCollection",
    "InvalidArgumentError",
    "InvalidItemError",
    "InvalidOperationError",
    "ItemNotFoundError",
    "ItemValidator",
    "ListCollection",
    "MixedCollection",
    "MutationPolicy",
    "NoPredicateResultError",
    "ResourceCollection",
    "StringCollection",
    "TooManyItemsError",
    "TooManyPredicateResultsError",
    "TypeValidator",
    "UnknownKindError",
    "UnsupportedOperationError",
    "logger",
    "settings",
)
