# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typed_collections import Collection, IntCollection, MixedCollection


class TestMixedCollection:
    def test_accepts_anything(self):
        items = [1, "a", None, [1], {"k": 1}, object]
        assert MixedCollection(items).to_list() == items

    def test_kind_is_object(self):
        assert MixedCollection.get_item_kind() == (object,)
        assert MixedCollection.get_validator() is None

    def test_is_a_collection(self):
        assert issubclass(MixedCollection, Collection)

    def test_narrow_to_typed_variant(self):
        mixed = IntCollection([3, 1, 2]).select(lambda x: x * 2)
        assert isinstance(mixed, MixedCollection)
        ints = mixed.to_collection(IntCollection).sort()
        assert ints.to_list() == [2, 4, 6]

    def test_none_items_are_found(self):
        mixed = MixedCollection([None, 1, None])
        assert mixed.contains(None)
        assert mixed.remove(None).to_list() == [1, None]
