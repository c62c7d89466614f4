# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from random import Random

import pytest

from tests.fakes import Foo, FooChild
from typed_collections import IntCollection, StringCollection


@pytest.fixture
def rng():
    """Seeded generator for reproducible random() / shuffle() runs."""
    return Random(1234)


@pytest.fixture
def ints():
    """IntCollection holding 1..6."""
    return IntCollection([1, 2, 3, 4, 5, 6])


@pytest.fixture
def empty_ints():
    return IntCollection.new()


@pytest.fixture
def words():
    return StringCollection(["apple", "banana", "cherry", "avocado"])


@pytest.fixture
def foos():
    """Three Foo instances followed by one FooChild."""
    return [Foo(1), Foo(2), Foo(3), FooChild(4)]
