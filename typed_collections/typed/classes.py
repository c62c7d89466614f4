# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import ClassVar, TypeVar

from .._errors import UnknownKindError
from .._utils import load_type_from_string
from ..collection import Collection
from ..validators import TypeValidator

__all__ = ("ClassCollection",)

C = TypeVar("C")


class ClassCollection(Collection[C]):
    """A collection of instances of one class (subclasses included).

    Subclasses declare the class through `class_path`, either the class
    itself or its dotted path. Paths are resolved when a collection is
    built, so a typo fails with ``UnknownKindError`` before any item is
    checked.

    Example:
        >>> class UserCollection(ClassCollection[User]):
        ...     class_path = "myapp.models.User"
    """

    class_path: ClassVar[str | type | None] = None

    @classmethod
    def target_class(cls) -> type:
        """Resolves `class_path` into the admitted class.

        Raises:
            UnknownKindError: If `class_path` is missing or unresolvable.
        """
        if cls.class_path is None:
            raise UnknownKindError(
                f"{cls.__name__} does not declare a class_path"
            )
        if isinstance(cls.class_path, type):
            return cls.class_path
        return load_type_from_string(cls.class_path)

    @classmethod
    def get_item_kind(cls) -> tuple[type, ...]:
        return (cls.target_class(),)

    @classmethod
    def get_validator(cls) -> TypeValidator:
        target = cls.target_class()
        return TypeValidator(target, expected=target.__qualname__)
