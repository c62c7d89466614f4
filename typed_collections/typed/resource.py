# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

import io
import socket
from typing import Any

from ..collection import Collection
from ..validators import TypeValidator

__all__ = ("ResourceCollection",)

RESOURCE_TYPES = (io.IOBase, socket.socket)


class ResourceCollection(Collection[Any]):
    """A collection of open handles (file objects, streams, sockets).

    The handles stay owned by the caller: the collection never opens,
    closes or flushes them.
    """

    item_kind = RESOURCE_TYPES
    item_validator = TypeValidator(RESOURCE_TYPES, expected="resource")
