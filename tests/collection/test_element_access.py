# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for first/last/single, contains, min/max and random."""

from random import Random

import pytest

from typed_collections import (
    Collection,
    EmptyCollectionError,
    IntCollection,
    InvalidArgumentError,
    NoPredicateResultError,
    TooManyItemsError,
    TooManyPredicateResultsError,
)


def is_even(x):
    return x % 2 == 0


# ---------------------------------------------------------------------------
# first / last
# ---------------------------------------------------------------------------


class TestFirst:
    def test_first(self, ints):
        assert ints.first() == 1

    def test_first_with_predicate(self, ints):
        assert ints.first(is_even) == 2

    def test_first_on_empty(self, empty_ints):
        with pytest.raises(EmptyCollectionError):
            empty_ints.first()

    def test_first_empty_takes_precedence_over_predicate(self, empty_ints):
        with pytest.raises(EmptyCollectionError):
            empty_ints.first(lambda x: x > 100)

    def test_first_without_match(self, ints):
        with pytest.raises(NoPredicateResultError):
            ints.first(lambda x: x > 100)

    def test_first_or_default(self, ints, empty_ints):
        assert ints.first_or_default(0) == 1
        assert ints.first_or_default(0, lambda x: x > 4) == 5
        assert ints.first_or_default(0, lambda x: x > 100) == 0
        assert empty_ints.first_or_default(-1) == -1

    def test_first_or_default_rejects_none(self, ints):
        with pytest.raises(InvalidArgumentError):
            ints.first_or_default(None)

    def test_first_or_none(self, ints, empty_ints):
        assert ints.first_or_none(lambda x: x > 4) == 5
        assert ints.first_or_none(lambda x: x > 100) is None
        assert empty_ints.first_or_none() is None

    def test_first_or_none_returns_none_items(self):
        collection = Collection([None, 1])
        assert collection.first_or_none() is None
        assert collection.first() is None


class TestLast:
    def test_last(self, ints):
        assert ints.last() == 6

    def test_last_with_predicate(self, ints):
        assert ints.last(lambda x: x < 4) == 3

    def test_last_on_empty(self, empty_ints):
        with pytest.raises(EmptyCollectionError):
            empty_ints.last()

    def test_last_without_match(self, ints):
        with pytest.raises(NoPredicateResultError):
            ints.last(lambda x: x > 100)

    def test_last_or_default(self, ints, empty_ints):
        assert ints.last_or_default(0) == 6
        assert ints.last_or_default(0, lambda x: x < 3) == 2
        assert ints.last_or_default(0, lambda x: x > 100) == 0
        assert empty_ints.last_or_default(-1) == -1

    def test_last_or_default_rejects_none(self, ints):
        with pytest.raises(InvalidArgumentError):
            ints.last_or_default(None, is_even)

    def test_last_or_none(self, ints, empty_ints):
        assert ints.last_or_none(is_even) == 6
        assert ints.last_or_none(lambda x: x > 100) is None
        assert empty_ints.last_or_none() is None


# ---------------------------------------------------------------------------
# single
# ---------------------------------------------------------------------------


class TestSingle:
    def test_single_item(self):
        assert IntCollection([1]).single() == 1

    def test_single_on_empty(self, empty_ints):
        with pytest.raises(EmptyCollectionError):
            empty_ints.single()

    def test_single_with_several_items(self):
        with pytest.raises(TooManyItemsError):
            IntCollection([1, 2, 3, 1]).single()

    def test_single_with_predicate(self):
        assert IntCollection([1, 2, 3]).single(lambda x: x == 2) == 2

    def test_single_without_match(self):
        with pytest.raises(NoPredicateResultError):
            IntCollection([1, 2, 3]).single(lambda x: x == 4)

    def test_single_with_several_matches(self):
        with pytest.raises(TooManyPredicateResultsError):
            IntCollection([1, 2, 3, 1]).single(lambda x: x == 1)

    def test_too_many_predicate_results_is_too_many_items(self):
        with pytest.raises(TooManyItemsError):
            IntCollection([1, 1]).single(lambda x: x == 1)

    def test_single_or_default(self, empty_ints):
        assert empty_ints.single_or_default(9) == 9
        assert IntCollection([1]).single_or_default(9) == 1
        assert IntCollection([1, 2]).single_or_default(9, is_even) == 2
        assert IntCollection([1, 3]).single_or_default(9, is_even) == 9

    def test_single_or_default_still_raises_on_several(self):
        with pytest.raises(TooManyItemsError):
            IntCollection([1, 2]).single_or_default(9)
        with pytest.raises(TooManyPredicateResultsError):
            IntCollection([2, 4]).single_or_default(9, is_even)

    def test_single_or_default_rejects_none(self, empty_ints):
        with pytest.raises(InvalidArgumentError):
            empty_ints.single_or_default(None)

    def test_single_or_none(self, empty_ints):
        assert empty_ints.single_or_none() is None
        assert IntCollection([1, 3]).single_or_none(is_even) is None
        assert IntCollection([1, 2]).single_or_none(is_even) == 2


# ---------------------------------------------------------------------------
# contains / min / max
# ---------------------------------------------------------------------------


class TestContains:
    def test_contains(self, ints):
        assert ints.contains(3)
        assert not ints.contains(7)

    def test_in_operator(self, ints):
        assert 3 in ints
        assert 7 not in ints

    def test_contains_with_comparer(self, words):
        def same_initial(item, needle):
            return item[0] == needle[0]

        assert words.contains("crab", same_initial)
        assert not words.contains("zebra", same_initial)

    def test_contains_is_type_strict(self):
        ints = IntCollection([1, 2])
        assert not ints.contains(True)
        assert not ints.contains(1.0)
        assert True not in ints

    def test_contains_compares_nested_types(self):
        collection = Collection([[1, 2], {"a": 1}])
        assert collection.contains([1, 2])
        assert collection.contains({"a": 1})
        assert not collection.contains([1, 2.0])
        assert not collection.contains({"a": True})


class TestMinMax:
    def test_min_max(self):
        collection = IntCollection([4, 1, 9, 3])
        assert collection.min() == 1
        assert collection.max() == 9

    def test_min_max_with_selector(self, words):
        assert words.min(len) == 5
        assert words.max(len) == 7

    def test_min_on_empty(self, empty_ints):
        with pytest.raises(EmptyCollectionError):
            empty_ints.min()

    def test_max_on_empty(self, empty_ints):
        with pytest.raises(EmptyCollectionError):
            empty_ints.max(lambda x: -x)


# ---------------------------------------------------------------------------
# random
# ---------------------------------------------------------------------------


class TestRandom:
    def test_random_default_draws_one(self, ints, rng):
        drawn = ints.random(rng=rng)
        assert len(drawn) == 1
        assert drawn[0] in ints.to_list()

    def test_random_draws_distinct_items(self, rng):
        collection = IntCollection(list(range(20)))
        drawn = collection.random(10, rng=rng)
        assert len(drawn) == 10
        assert len(set(drawn)) == 10
        assert set(drawn) <= set(range(20))

    def test_random_all_items(self, ints, rng):
        drawn = ints.random(6, rng=rng)
        assert sorted(drawn) == [1, 2, 3, 4, 5, 6]

    def test_random_preserve_order(self, rng):
        collection = IntCollection(list(range(50)))
        drawn = collection.random(15, preserve_order=True, rng=rng)
        assert drawn == sorted(drawn)

    def test_random_does_not_mutate(self, ints, rng):
        ints.random(3, rng=rng)
        assert ints.to_list() == [1, 2, 3, 4, 5, 6]

    def test_random_is_reproducible_with_seed(self, ints):
        assert ints.random(3, rng=Random(7)) == ints.random(3, rng=Random(7))

    def test_random_uses_shared_generator(self, ints):
        drawn = ints.random(2)
        assert len(drawn) == 2

    def test_random_on_empty(self, empty_ints):
        with pytest.raises(EmptyCollectionError):
            empty_ints.random()

    @pytest.mark.parametrize("count", [0, -1, 7])
    def test_random_count_out_of_range(self, ints, count):
        with pytest.raises(InvalidArgumentError):
            ints.random(count)
