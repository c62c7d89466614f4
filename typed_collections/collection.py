# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from itertools import islice
from random import Random
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    PrivateAttr,
    model_serializer,
    model_validator,
)
from typing_extensions import Self

from ._concepts import ItemValidator, MutationPolicy
from ._errors import (
    EmptyCollectionError,
    IncompatibleKindError,
    IndexOutOfBoundsError,
    InvalidArgumentError,
    InvalidOperationError,
    ItemNotFoundError,
    NoPredicateResultError,
    TooManyItemsError,
    TooManyPredicateResultsError,
    UnsupportedOperationError,
)
from ._sentinel import MaybeUndefined, Undefined, is_sentinel
from ._utils import (
    adapt_callable,
    json_dumps,
    load_type_from_string,
    strict_equals,
    strict_key,
)
from .config import default_rng
from .validators import is_subkind, kind_name, normalize_kind

if TYPE_CHECKING:
    from .typed.mixed import MixedCollection

T = TypeVar("T")

__all__ = ("Collection",)

logger = logging.getLogger(__name__)


class _KeySet:
    """Membership set under strict equality, tolerant of unhashable keys."""

    __slots__ = ("_hashable", "_other")

    def __init__(self, keys: Iterable[Any] = ()):
        self._hashable: set[Any] = set()
        self._other: list[Any] = []
        for key in keys:
            self.add(key)

    def add(self, key: Any) -> None:
        try:
            self._hashable.add(strict_key(key))
        except TypeError:
            self._other.append(key)

    def __contains__(self, key: Any) -> bool:
        try:
            return strict_key(key) in self._hashable
        except TypeError:
            return any(strict_equals(key, other) for other in self._other)


def _items_of(other: Any) -> list[Any]:
    if isinstance(other, Collection):
        return list(other._items)
    if not isinstance(other, Iterable):
        raise InvalidArgumentError(
            f"Expected a collection or an iterable, got {type(other).__name__}"
        )
    return list(other)


class Collection(BaseModel, Generic[T]):
    """An ordered, index-addressable sequence of items of one element kind.

    Items are validated on construction and on every insertion. Variants
    configure the element kind, the item validator and the mutation policy
    through class variables; everything else is shared.

    Mutating operations (append, where, sort, ...) go through the mutation
    policy: with ``MutationPolicy.IN_PLACE`` they change the receiver and
    return it, with ``MutationPolicy.COPY_ON_WRITE`` they return a modified
    copy and leave the receiver untouched.

    Items compare strictly: ``1``, ``1.0`` and ``True`` are different items
    for ``contains``, ``remove``, ``distinct`` and the set operations.

    Attributes:
        items (tuple[T, ...]): Read-only snapshot of the items, in order.
        item_kind (ClassVar): Element kind used for compatibility checks.
        item_validator (ClassVar[ItemValidator | None]): Per-item check,
            ``None`` to accept anything.
        mutation_policy (ClassVar[MutationPolicy]): In-place or
            copy-on-write.

    Example:
        >>> IntCollection([5, 2, 1, 3, 4]).sort().take(2).to_list()
        [1, 2]
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    _items: list[Any] = PrivateAttr(default_factory=list)

    item_kind: ClassVar[Any] = object
    item_validator: ClassVar[ItemValidator | None] = None
    mutation_policy: ClassVar[MutationPolicy] = MutationPolicy.IN_PLACE

    def __init__(self, items: Iterable[T] | None = None, /, **data: Any):
        if items is not None:
            data["items"] = items
        super().__init__(**data)

    @property
    def items(self) -> tuple[T, ...]:
        """Read-only snapshot of the items, in order."""
        return tuple(self._items)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _split_input(data: Any) -> tuple[Any, list[Any]]:
        if isinstance(data, Collection):
            return {}, list(data._items)
        if isinstance(data, (list, tuple)):
            return {}, list(data)
        if not (isinstance(data, dict) and "items" in data):
            return data, []

        data = dict(data)
        items = data.pop("items")
        if isinstance(items, Collection):
            return data, list(items._items)
        if not isinstance(items, Iterable) or isinstance(
            items, (str, bytes, Mapping)
        ):
            raise InvalidArgumentError(
                f"items must be an iterable, got {type(items).__name__}"
            )
        return data, list(items)

    @model_validator(mode="wrap")
    @classmethod
    def _load_items(cls, data: Any, handler: Callable[[Any], Self]) -> Self:
        """Accepts a bare list (or another collection) as input data.

        Items bypass pydantic's field coercion: they are checked by the
        variant's item validator only and stored privately.
        """
        rest, items = cls._split_input(data)
        collection = handler(rest)
        validator = collection.get_validator()
        if validator is not None:
            for index, item in enumerate(items):
                validator(item, index, collection)
        collection._items = items
        return collection

    @classmethod
    def get_validator(cls) -> ItemValidator | None:
        """Returns the item validator in effect for this variant."""
        return cls.item_validator

    @classmethod
    def get_item_kind(cls) -> tuple[type, ...]:
        """Returns the element kind as a tuple of types."""
        return normalize_kind(cls.item_kind)

    def _validate_insert(self, items: Iterable[Any]) -> None:
        validator = self.get_validator()
        if validator is not None:
            for item in items:
                validator(item, None, self)

    def _modifiable(self) -> Self:
        if self.mutation_policy is MutationPolicy.COPY_ON_WRITE:
            return self._derive(self._items)
        return self

    def _derive(self, items: Iterable[Any]) -> Self:
        """Fresh collection of the same variant holding already-valid items."""
        collection = self.model_copy()
        collection._items = list(items)
        return collection

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def new(cls) -> Self:
        """Creates an empty collection."""
        return cls.from_list([])

    @classmethod
    def from_list(cls, items: Iterable[T], /) -> Self:
        """Creates a collection holding `items`.

        Every item is validated in order; the first rejected item raises
        and no collection is created.

        Raises:
            InvalidItemError: If an item is rejected by the validator.
            UnknownKindError: If the variant's element kind cannot be
                resolved.
        """
        return cls(list(items))

    @classmethod
    def repeat(cls, value: T, count: int) -> Self:
        """Creates a collection holding `count` times `value`.

        Raises:
            InvalidArgumentError: If `count` is negative.
        """
        if count < 0:
            raise InvalidArgumentError(
                f"count must not be negative, got {count}",
                details={"count": count},
            )
        return cls.from_list([value] * count)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _find(
        self, predicate: Callable[[T], bool] | None, *, last: bool = False
    ) -> MaybeUndefined[T]:
        items = reversed(self._items) if last else self._items
        for item in items:
            if predicate is None or predicate(item):
                return item
        return Undefined

    def _single(
        self, predicate: Callable[[T], bool] | None
    ) -> MaybeUndefined[T]:
        if predicate is None:
            if len(self._items) > 1:
                raise TooManyItemsError()
            return self._items[0] if self._items else Undefined

        matches = list(islice(filter(predicate, self._items), 2))
        if len(matches) > 1:
            raise TooManyPredicateResultsError()
        return matches[0] if matches else Undefined

    @staticmethod
    def _check_default(default: Any, method: str) -> None:
        if is_sentinel(default, none_as_sentinel=True):
            raise InvalidArgumentError(
                f"{method}_or_default() requires a default value, "
                f"use {method}_or_none() instead"
            )

    def first(self, predicate: Callable[[T], bool] | None = None) -> T:
        """Returns the first item (satisfying `predicate`, if given).

        Raises:
            EmptyCollectionError: If the collection is empty.
            NoPredicateResultError: If no item satisfies `predicate`.
        """
        if not self._items:
            raise EmptyCollectionError()
        found = self._find(predicate)
        if found is Undefined:
            raise NoPredicateResultError()
        return found

    def first_or_default(
        self, default: T, predicate: Callable[[T], bool] | None = None
    ) -> T:
        """Returns the first item (satisfying `predicate`), else `default`.

        Raises:
            InvalidArgumentError: If `default` is None.
        """
        self._check_default(default, "first")
        found = self._find(predicate)
        return default if found is Undefined else found

    def first_or_none(
        self, predicate: Callable[[T], bool] | None = None
    ) -> T | None:
        """Returns the first item (satisfying `predicate`), else None."""
        found = self._find(predicate)
        return None if found is Undefined else found

    def last(self, predicate: Callable[[T], bool] | None = None) -> T:
        """Returns the last item (satisfying `predicate`, if given).

        Raises:
            EmptyCollectionError: If the collection is empty.
            NoPredicateResultError: If no item satisfies `predicate`.
        """
        if not self._items:
            raise EmptyCollectionError()
        found = self._find(predicate, last=True)
        if found is Undefined:
            raise NoPredicateResultError()
        return found

    def last_or_default(
        self, default: T, predicate: Callable[[T], bool] | None = None
    ) -> T:
        """Returns the last item (satisfying `predicate`), else `default`.

        Raises:
            InvalidArgumentError: If `default` is None.
        """
        self._check_default(default, "last")
        found = self._find(predicate, last=True)
        return default if found is Undefined else found

    def last_or_none(
        self, predicate: Callable[[T], bool] | None = None
    ) -> T | None:
        """Returns the last item (satisfying `predicate`), else None."""
        found = self._find(predicate, last=True)
        return None if found is Undefined else found

    def single(self, predicate: Callable[[T], bool] | None = None) -> T:
        """Returns the only item (satisfying `predicate`, if given).

        Raises:
            EmptyCollectionError: If the collection is empty.
            TooManyItemsError: If there is no predicate and the collection
                holds more than one item.
            NoPredicateResultError: If no item satisfies `predicate`.
            TooManyPredicateResultsError: If several items satisfy
                `predicate`.
        """
        if not self._items:
            raise EmptyCollectionError()
        found = self._single(predicate)
        if found is Undefined:
            raise NoPredicateResultError()
        return found

    def single_or_default(
        self, default: T, predicate: Callable[[T], bool] | None = None
    ) -> T:
        """Like `single`, but returns `default` when nothing matches.

        Raises:
            InvalidArgumentError: If `default` is None.
            TooManyItemsError: If there is no predicate and the collection
                holds more than one item.
            TooManyPredicateResultsError: If several items satisfy
                `predicate`.
        """
        self._check_default(default, "single")
        found = self._single(predicate)
        return default if found is Undefined else found

    def single_or_none(
        self, predicate: Callable[[T], bool] | None = None
    ) -> T | None:
        """Like `single`, but returns None when nothing matches."""
        found = self._single(predicate)
        return None if found is Undefined else found

    def contains(
        self, needle: Any, comparer: Callable[[T, Any], bool] | None = None
    ) -> bool:
        """Checks whether an item strictly equals `needle`.

        Args:
            needle: The value to locate.
            comparer: Optional ``comparer(item, needle)`` equality test.
        """
        if comparer is None:
            return any(strict_equals(item, needle) for item in self._items)
        return any(comparer(item, needle) for item in self._items)

    def min(self, selector: Callable[[T], Any] | None = None) -> Any:
        """Returns the smallest item (or selected value).

        Raises:
            EmptyCollectionError: If the collection is empty.
        """
        if not self._items:
            raise EmptyCollectionError()
        if selector is None:
            return min(self._items)
        return min(map(selector, self._items))

    def max(self, selector: Callable[[T], Any] | None = None) -> Any:
        """Returns the largest item (or selected value).

        Raises:
            EmptyCollectionError: If the collection is empty.
        """
        if not self._items:
            raise EmptyCollectionError()
        if selector is None:
            return max(self._items)
        return max(map(selector, self._items))

    def random(
        self,
        count: int = 1,
        preserve_order: bool = False,
        rng: Random | None = None,
    ) -> list[T]:
        """Draws `count` distinct items, without replacement.

        Args:
            count: Number of items to draw, between 1 and the size.
            preserve_order: Return the items in collection order instead
                of draw order.
            rng: Generator to draw with, defaults to the shared one.

        Raises:
            EmptyCollectionError: If the collection is empty.
            InvalidArgumentError: If `count` is out of range.
        """
        size = len(self._items)
        if size == 0:
            raise EmptyCollectionError()
        if count < 1 or count > size:
            raise InvalidArgumentError(
                f"count must be between 1 and {size}, got {count}",
                details={"count": count, "size": size},
            )
        indexes = (rng or default_rng()).sample(range(size), count)
        if preserve_order:
            indexes.sort()
        return [self._items[i] for i in indexes]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def append(self, *items: T) -> Self:
        """Adds `items` to the end, in argument order.

        All items are validated before any is added.
        """
        self._validate_insert(items)
        collection = self._modifiable()
        collection._items.extend(items)
        return collection

    def prepend(self, *items: T) -> Self:
        """Adds `items` to the beginning; the first argument ends up first.

        All items are validated before any is added.
        """
        self._validate_insert(items)
        collection = self._modifiable()
        collection._items[:0] = items
        return collection

    def remove(self, item: T) -> Self:
        """Removes the first item strictly equal to `item`.

        Raises:
            ItemNotFoundError: If `item` is not in the collection.
        """
        index = next(
            (i for i, x in enumerate(self._items) if strict_equals(x, item)),
            None,
        )
        if index is None:
            raise ItemNotFoundError(
                f"Item not found in the collection: {item!r}"
            )
        collection = self._modifiable()
        del collection._items[index]
        return collection

    def concat(self, other: Collection) -> Self:
        """Appends the items of `other`, keeping both orders.

        `other` must hold the same element kind or a subkind of it.

        Raises:
            IncompatibleKindError: If `other` is not a compatible collection.
            InvalidItemError: If an incoming item is rejected.
        """
        if not isinstance(other, Collection):
            raise IncompatibleKindError(
                f"Cannot concat {type(other).__name__} "
                f"to {type(self).__name__}"
            )
        ours, theirs = self.get_item_kind(), other.get_item_kind()
        if not is_subkind(theirs, ours):
            logger.debug(
                "Rejected concat of %s (%s) into %s (%s)",
                type(other).__name__,
                kind_name(theirs),
                type(self).__name__,
                kind_name(ours),
            )
            raise IncompatibleKindError(
                f"Cannot concat a collection of {kind_name(theirs)} "
                f"to a collection of {kind_name(ours)}",
                details={
                    "expected": kind_name(ours),
                    "actual": kind_name(theirs),
                },
            )

        incoming = list(other._items)
        self._validate_insert(incoming)
        collection = self._modifiable()
        collection._items.extend(incoming)
        return collection

    def shuffle(self, rng: Random | None = None) -> Self:
        """Randomizes the order of the items (uniform permutation)."""
        collection = self._modifiable()
        (rng or default_rng()).shuffle(collection._items)
        return collection

    def reverse(self) -> Self:
        """Inverts the order of the items."""
        collection = self._modifiable()
        collection._items.reverse()
        return collection

    def distinct(self) -> Self:
        """Removes duplicates, keeping the first occurrence of each item."""
        return self.distinct_by(lambda item: item)

    def distinct_by(self, key_selector: Callable[[T], Any]) -> Self:
        """Removes items whose key was already seen, keeping the first."""
        seen = _KeySet()
        items = []
        for item in self._items:
            key = key_selector(item)
            if key in seen:
                continue
            seen.add(key)
            items.append(item)

        collection = self._modifiable()
        collection._items = items
        return collection

    def sort(self) -> Self:
        """Sorts the items in ascending natural order."""
        collection = self._modifiable()
        collection._items.sort()
        return collection

    def sort_descending(self) -> Self:
        """Sorts the items in descending natural order."""
        collection = self._modifiable()
        collection._items.sort(reverse=True)
        return collection

    def sort_by(self, key_selector: Callable[[T], Any]) -> Self:
        """Sorts by key, ascending; equal keys keep their relative order."""
        collection = self._modifiable()
        collection._items.sort(key=key_selector)
        return collection

    def sort_by_descending(self, key_selector: Callable[[T], Any]) -> Self:
        """Sorts by key, descending; equal keys keep their relative order."""
        collection = self._modifiable()
        collection._items.sort(key=key_selector, reverse=True)
        return collection

    # ------------------------------------------------------------------
    # Partitioning
    # ------------------------------------------------------------------

    def where(self, predicate: Callable[[T], bool]) -> Self:
        """Keeps only the items satisfying `predicate`."""
        collection = self._modifiable()
        collection._items = [item for item in self._items if predicate(item)]
        return collection

    def except_(self, other: Collection | Iterable[Any]) -> Self:
        """Removes the items found in `other`."""
        return self.except_by(other, lambda item: item)

    def except_by(
        self,
        other: Collection | Iterable[Any],
        key_selector: Callable[[Any], Any],
    ) -> Self:
        """Removes the items whose key is the key of an item of `other`."""
        excluded = _KeySet(map(key_selector, _items_of(other)))
        collection = self._modifiable()
        collection._items = [
            item for item in self._items if key_selector(item) not in excluded
        ]
        return collection

    def intersect(self, other: Collection | Iterable[Any]) -> Self:
        """Keeps only the items also found in `other`."""
        return self.intersect_by(other, lambda item: item)

    def intersect_by(
        self,
        other: Collection | Iterable[Any],
        key_selector: Callable[[Any], Any],
    ) -> Self:
        """Keeps only the items whose key is the key of an item of `other`."""
        kept = _KeySet(map(key_selector, _items_of(other)))
        collection = self._modifiable()
        collection._items = [
            item for item in self._items if key_selector(item) in kept
        ]
        return collection

    def skip(self, count: int) -> Self:
        """Bypasses the first `count` items."""
        collection = self._modifiable()
        collection._items = self._items[max(count, 0) :]
        return collection

    def skip_last(self, count: int) -> Self:
        """Omits the last `count` items."""
        collection = self._modifiable()
        collection._items = self._items[: max(len(self._items) - count, 0)]
        return collection

    def skip_while(self, predicate: Callable[..., bool]) -> Self:
        """Bypasses items while `predicate(item[, index])` holds."""
        test = adapt_callable(predicate, 2)
        for index, item in enumerate(self._items):
            if not test(item, index):
                break
        else:
            index = len(self._items)

        collection = self._modifiable()
        collection._items = self._items[index:]
        return collection

    def take(self, count: int) -> Self:
        """Keeps the first `count` items."""
        collection = self._modifiable()
        collection._items = self._items[: max(count, 0)]
        return collection

    def take_last(self, count: int) -> Self:
        """Keeps the last `count` items."""
        collection = self._modifiable()
        if count <= 0:
            collection._items = []
        else:
            collection._items = self._items[-count:]
        return collection

    def take_while(self, predicate: Callable[..., bool]) -> Self:
        """Keeps items while `predicate(item[, index])` holds."""
        test = adapt_callable(predicate, 2)
        for index, item in enumerate(self._items):
            if not test(item, index):
                break
        else:
            index = len(self._items)

        collection = self._modifiable()
        collection._items = self._items[:index]
        return collection

    def chunk(self, size: int) -> list[Self]:
        """Splits the items into collections of at most `size` items.

        The receiver is left untouched.

        Raises:
            InvalidArgumentError: If `size` is not positive.
        """
        if size <= 0:
            raise InvalidArgumentError(
                f"chunk size must be positive, got {size}",
                details={"size": size},
            )
        return [
            self._derive(self._items[start : start + size])
            for start in range(0, len(self._items), size)
        ]

    # ------------------------------------------------------------------
    # Aggregation & projection
    # ------------------------------------------------------------------

    def average(self, selector: Callable[[T], float] | None = None) -> float:
        """Arithmetic mean of the items (or selected values).

        Raises:
            EmptyCollectionError: If the collection is empty.
        """
        if not self._items:
            raise EmptyCollectionError("Cannot average an empty collection")
        values = (
            self._items if selector is None else map(selector, self._items)
        )
        return float(sum(values) / len(self._items))

    def sum(self, selector: Callable[[T], float] | None = None) -> float:
        """Sum of the items (or selected values); 0.0 when empty."""
        values = (
            self._items if selector is None else map(selector, self._items)
        )
        return float(sum(values, 0))

    def aggregate(
        self, seed: Any, accumulator: Callable[[Any, T], Any]
    ) -> Any:
        """Left fold: ``seed = accumulator(seed, item)`` for each item."""
        for item in self._items:
            seed = accumulator(seed, item)
        return seed

    def select(self, selector: Callable[..., Any]) -> MixedCollection:
        """Projects each item through `selector(item[, index])`."""
        from .typed.mixed import MixedCollection

        project = adapt_callable(selector, 2)
        return MixedCollection(
            [project(item, index) for index, item in enumerate(self._items)]
        )

    def select_many(
        self,
        iterable_selector: Callable[[T], Iterable[Any]],
        result_selector: Callable[[T, Any], Any] | None = None,
    ) -> MixedCollection:
        """Projects each item to an iterable and flattens the results.

        Args:
            iterable_selector: Returns the sub-items of an item.
            result_selector: Optional ``result_selector(item, sub_item)``
                building each output value.

        Raises:
            InvalidOperationError: If `iterable_selector` returns a value
                that is not iterable.
        """
        from .typed.mixed import MixedCollection

        results = []
        for item in self._items:
            sub_items = iterable_selector(item)
            if not isinstance(sub_items, Iterable):
                raise InvalidOperationError(
                    "select_many() selector must return an iterable, "
                    f"got {type(sub_items).__name__}",
                    details={"item": item},
                )
            for sub_item in sub_items:
                results.append(
                    sub_item
                    if result_selector is None
                    else result_selector(item, sub_item)
                )
        return MixedCollection(results)

    def group_by(self, key_selector: Callable[[T], Any]) -> dict[str, Self]:
        """Groups items by the string form of their key.

        Keys keep their first-seen order and groups keep insertion order.
        """
        groups: dict[str, list[T]] = {}
        for item in self._items:
            groups.setdefault(str(key_selector(item)), []).append(item)
        return {key: self._derive(items) for key, items in groups.items()}

    def join(
        self,
        other: Collection | Iterable[Any],
        key_selector: Callable[[T], Any],
        other_key_selector: Callable[[Any], Any],
        result_selector: Callable[[T, Any], Any],
        comparer: Callable[[Any, Any], bool] | None = None,
    ) -> MixedCollection:
        """Inner join with `other`, receiver-major.

        Every pair ``(item, other_item)`` whose keys are strictly equal
        yields ``result_selector(item, other_item)``.

        Args:
            other: The collection (or iterable) to join with.
            key_selector: Key of the receiver's items.
            other_key_selector: Key of `other`'s items.
            result_selector: Builds a result row from a matching pair.
            comparer: Optional ``comparer(key, other_key)`` equality test.
        """
        from .typed.mixed import MixedCollection

        others = [(o, other_key_selector(o)) for o in _items_of(other)]
        results = []
        for item in self._items:
            key = key_selector(item)
            for other_item, other_key in others:
                matched = (
                    strict_equals(key, other_key)
                    if comparer is None
                    else comparer(key, other_key)
                )
                if matched:
                    results.append(result_selector(item, other_item))
        return MixedCollection(results)

    # ------------------------------------------------------------------
    # Quantifiers & traversal
    # ------------------------------------------------------------------

    def all(self, predicate: Callable[[T], bool]) -> bool:
        """True if every item satisfies `predicate` (or if empty)."""
        return all(predicate(item) for item in self._items)

    def any(self, predicate: Callable[[T], bool] | None = None) -> bool:
        """True if the collection has an item (satisfying `predicate`)."""
        if predicate is None:
            return bool(self._items)
        return any(predicate(item) for item in self._items)

    def for_each(self, action: Callable[..., Any]) -> Self:
        """Calls `action(item[, collection])` on every item; returns self."""
        act = adapt_callable(action, 2)
        for item in list(self._items):
            act(item, self)
        return self

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_list(self) -> list[T]:
        """Returns a copy of the items."""
        return list(self._items)

    def to_collection(self, target: type[Collection] | str) -> Collection:
        """Copies the items into a collection of another variant.

        Args:
            target: A `Collection` subclass, or its dotted path.

        Raises:
            UnknownKindError: If `target` is a path that cannot be resolved.
            IncompatibleKindError: If `target` is not a `Collection` subclass.
            InvalidItemError: If an item is rejected by the target.
        """
        if isinstance(target, str):
            target = load_type_from_string(target)
        if not (isinstance(target, type) and issubclass(target, Collection)):
            logger.debug("Rejected conversion target %r", target)
            raise IncompatibleKindError(
                f"{target!r} is not a collection type",
                details={"target": repr(target)},
            )
        return target.from_list(self._items)

    def to_serializable(self) -> list[T]:
        """Items in a form suitable for a structured-data encoder."""
        return self.to_list()

    @model_serializer(mode="plain")
    def _serialize(self) -> list[Any]:
        return list(self._items)

    def to_json(self, decode: bool = True) -> str | bytes:
        """Encodes the items as a JSON array."""
        return json_dumps(self.to_serializable(), decode=decode)

    # ------------------------------------------------------------------
    # Structural interfaces
    # ------------------------------------------------------------------

    def count(self) -> int:
        """Returns the number of items."""
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterates over a snapshot of the current items."""
        return iter(list(self._items))

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def __getitem__(self, key: int | slice) -> T | Self:
        """Gets one item by index, or a new collection by slice.

        Raises:
            IndexOutOfBoundsError: If the index is out of range.
            TypeError: If `key` is neither an int nor a slice.
        """
        if isinstance(key, slice):
            return self._derive(self._items[key])
        if isinstance(key, bool) or not isinstance(key, int):
            key_cls = key.__class__.__name__
            raise TypeError(
                f"indices must be integers or slices, not {key_cls}"
            )
        try:
            return self._items[key]
        except IndexError:
            raise IndexOutOfBoundsError(
                f"index {key} out of range for collection of size "
                f"{len(self._items)}",
                details={"index": key, "size": len(self._items)},
            ) from None

    def __setitem__(self, key: Any, value: Any) -> None:
        raise UnsupportedOperationError(
            "Direct modification of collection's items is not allowed, "
            "use appropriate methods instead."
        )

    def __delitem__(self, key: Any) -> None:
        raise UnsupportedOperationError(
            "Direct removal of collection's items is not allowed, "
            "use appropriate methods instead."
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
