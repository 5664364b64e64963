from gc import collect
from weakref import ref

import pytest

from extended_collections import (
    Absent,
    InvalidHandlerError,
    NormalizationHooks,
    WeakKeyMap,
)


class Key:
    def __init__(self, name: str) -> None:
        self.name = name


class Alias:
    def __init__(self, key: Key) -> None:
        self.key = key


def _unalias(key):
    return key.key if isinstance(key, Alias) else key


def describe_weak_key_map():
    def describe_basic_operations():
        def can_set_and_get_values():
            key1, key2 = Key("a"), Key("b")
            m = WeakKeyMap[Key, int]()
            assert m.set(key1, 1).set(key2, 2) is m
            assert m.get(key1) == 1
            assert m.get(key2) == 2
            assert m.get(Key("c")) is Absent
            assert m.get(Key("c"), 0) == 0

        def can_be_created_from_pairs():
            key1, key2 = Key("a"), Key("b")
            m = WeakKeyMap([(key1, 1), (key2, 2)])
            assert m.has(key1)
            assert m.has(key2)
            assert key1 in m
            assert Key("a") not in m

        def can_be_created_from_a_mapping():
            key = Key("a")
            m = WeakKeyMap({key: 1})
            assert m[key] == 1

        def supports_subscription():
            key = Key("a")
            m = WeakKeyMap[Key, int]()
            m[key] = 1
            assert m[key] == 1
            del m[key]
            with pytest.raises(KeyError):
                m[key]

        def deletes_keys():
            key1, key2 = Key("a"), Key("b")
            m = WeakKeyMap([(key1, 1)])
            assert m.delete(key1) is True
            assert m.delete(key1) is False
            assert m.delete(key2) is False
            assert not m.has(key1)

        def deletes_all_given_keys():
            key1, key2, key3 = Key("a"), Key("b"), Key("c")
            m = WeakKeyMap([(key1, 1), (key2, 2), (key3, 3)])
            assert m.delete_all(key1, key2) is True
            assert m.delete_all(key3, key1) is False
            assert not m.has(key3)

        def deletes_all_keys_if_none_is_given():
            key1, key2 = Key("a"), Key("b")
            m = WeakKeyMap([(key1, 1), (key2, 2)])
            assert m.delete_all() is True
            assert not m.has(key1)
            assert not m.has(key2)

        def is_not_iterable_and_has_no_size():
            m = WeakKeyMap[Key, int]()
            with pytest.raises(TypeError):
                iter(m)  # type: ignore
            with pytest.raises(TypeError):
                len(m)  # type: ignore
            assert not hasattr(m, "map")
            assert not hasattr(m, "to_list")

        def rejects_storing_keys_that_cannot_be_weakly_referenced():
            m = WeakKeyMap[object, int]()
            with pytest.raises(TypeError):
                m.set("key", 1)
            with pytest.raises(TypeError):
                m.set({"a": 1}, 1)
            with pytest.raises(TypeError):
                m[1] = 1
            with pytest.raises(TypeError):
                m.emplace(1, insert=lambda key, map_: 1)

        def does_not_find_keys_that_cannot_be_weakly_referenced():
            m = WeakKeyMap([(Key("a"), 1)])
            assert m.get(1) is Absent
            assert m.get("key", 0) == 0
            assert m.has(1) is False
            assert 1 not in m
            assert m.delete(1) is False
            assert m.delete_all(1, "key") is False
            with pytest.raises(KeyError):
                m[1]
            with pytest.raises(KeyError):
                del m[1]

        def rejects_entries_that_are_not_iterable():
            with pytest.raises(TypeError):
                WeakKeyMap(0)  # type: ignore

        def has_a_representation():
            assert repr(WeakKeyMap()).startswith("<WeakKeyMap at 0x")

    def describe_emplace():
        def inserts_and_updates_values():
            key = Key("a")
            m = WeakKeyMap[Key, int]()
            assert m.emplace(key, insert=lambda key, map_: 1) == 1
            assert m.emplace(key, update=lambda value, key, map_: value + 1) == 2
            assert m.get(key) == 2

        def passes_the_key_and_the_map():
            key = Key("a")
            m = WeakKeyMap[Key, str]()
            m.emplace(key, insert=lambda key, map_: key.name + str(map_ is m))
            assert m.get(key) == "aTrue"

        def fails_without_handler():
            key = Key("a")
            m = WeakKeyMap([(key, 1)])
            with pytest.raises(InvalidHandlerError):
                m.emplace(key)
            with pytest.raises(InvalidHandlerError):
                m.emplace(Key("b"), update=lambda *_args: 1)

    def describe_hooks():
        def normalizes_keys_and_values():
            key = Key("a")
            m = WeakKeyMap(
                [(key, "1")], NormalizationHooks(coerce_key=_unalias, coerce_value=int)
            )
            assert m.get(Alias(key)) == 1
            assert m.has(Alias(key))
            m.set(Alias(key), "2")
            assert m.get(key) == 2
            assert m.delete(Alias(key)) is True
            assert not m.has(key)

        def leaves_the_map_unchanged_when_a_hook_fails():
            key = Key("a")
            m = WeakKeyMap([(key, 1)], NormalizationHooks(coerce_value=int))
            with pytest.raises(ValueError):
                m.set(key, "one")
            assert m.get(key) == 1

    def describe_weak_references():
        def does_not_keep_keys_alive():
            key = Key("a")
            key_ref = ref(key)
            m = WeakKeyMap([(key, "value")])
            assert m.has(key)
            del key
            collect()
            assert key_ref() is None

        def keeps_values_alive_while_the_key_is_alive():
            key, value = Key("a"), Key("value")
            value_ref = ref(value)
            m = WeakKeyMap([(key, value)])
            del value
            collect()
            assert value_ref() is not None
            assert m.get(key) is value_ref()

    def describe_builders():
        def creates_maps_from_iterables():
            keys = [Key("a"), Key("b")]
            m = WeakKeyMap.from_iterable(keys, lambda key, index: (key, index))
            assert m.get(keys[0]) == 0
            assert m.get(keys[1]) == 1
            m = WeakKeyMap.from_iterable([(keys[0], "x")])
            assert m.get(keys[0]) == "x"

        def creates_maps_from_arguments():
            key = Key("a")
            m = WeakKeyMap.of((key, 1))
            assert isinstance(m, WeakKeyMap)
            assert m.get(key) == 1
