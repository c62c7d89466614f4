# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any, ClassVar

__all__ = (
    "CollectionError",
    "EmptyCollectionError",
    "IncompatibleKindError",
    "IndexOutOfBoundsError",
    "InvalidArgumentError",
    "InvalidItemError",
    "InvalidOperationError",
    "ItemNotFoundError",
    "NoPredicateResultError",
    "TooManyItemsError",
    "TooManyPredicateResultsError",
    "UnknownKindError",
    "UnsupportedOperationError",
)


class CollectionError(Exception):
    default_message: ClassVar[str] = "Collection error"
    __slots__ = ("message", "details")

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or self.default_message)
        if cause:
            self.__cause__ = cause  # preserves traceback
        self.message = message or self.default_message
        self.details = details or {}

    def to_dict(self, *, include_cause: bool = False) -> dict[str, Any]:
        data = {
            "error": self.__class__.__name__,
            "message": self.message,
            **({"details": self.details} if self.details else {}),
        }
        if include_cause and (cause := self.get_cause()):
            data["cause"] = repr(cause)
        return data

    def get_cause(self) -> Exception | None:
        """Get the cause of this error, if any."""
        return self.__cause__ if hasattr(self, "__cause__") else None


class InvalidOperationError(CollectionError):
    """The operation cannot run in the collection's current state."""

    default_message = "Invalid collection operation"
    __slots__ = ()


class EmptyCollectionError(InvalidOperationError):
    """An operation requiring at least one item met an empty collection."""

    default_message = "The collection is empty"
    __slots__ = ()


class NoPredicateResultError(CollectionError, LookupError):
    default_message = "No item satisfies the predicate"
    __slots__ = ()


class TooManyItemsError(CollectionError):
    default_message = "The collection contains more than one item"
    __slots__ = ()


class TooManyPredicateResultsError(TooManyItemsError):
    default_message = "More than one item satisfies the predicate"
    __slots__ = ()


class InvalidItemError(CollectionError, TypeError):
    """An item was rejected by the collection's validator."""

    default_message = "Invalid collection item"
    __slots__ = ()

    @classmethod
    def from_item(
        cls,
        item: Any,
        expected: str,
        index: int | None = None,
        *,
        cause: Exception | None = None,
    ):
        position = f" at index {index}" if index is not None else ""
        message = (
            f"Invalid collection item{position}: expected {expected}, "
            f"got {type(item).__name__}"
        )
        details = {
            "value": item,
            "type": type(item).__name__,
            "expected": expected,
            "index": index,
        }
        return cls(message, details=details, cause=cause)

    @property
    def item(self) -> Any:
        return self.details.get("value")

    @property
    def expected(self) -> str | None:
        return self.details.get("expected")

    @property
    def index(self) -> int | None:
        return self.details.get("index")


class ItemNotFoundError(CollectionError, LookupError):
    default_message = "Item not found in the collection"
    __slots__ = ()


class IncompatibleKindError(CollectionError, TypeError):
    """A collection or target type does not match the expected element kind."""

    default_message = "Incompatible collection kind"
    __slots__ = ()


class UnknownKindError(CollectionError, LookupError):
    """A type identifier could not be resolved."""

    default_message = "Unknown element kind"
    __slots__ = ()


class InvalidArgumentError(CollectionError, ValueError):
    default_message = "Invalid argument"
    __slots__ = ()


class UnsupportedOperationError(CollectionError, TypeError):
    default_message = "Unsupported collection operation"
    __slots__ = ()


class IndexOutOfBoundsError(CollectionError, IndexError):
    default_message = "Index out of bounds"
    __slots__ = ()
