from extended_collections.pyutils import RefKey, ref_key


def describe_ref_key():
    def returns_hashable_values_unchanged():
        assert ref_key(1) == 1
        assert ref_key("a") == "a"
        assert ref_key((1, 2)) == (1, 2)
        assert ref_key(None) is None

    def wraps_unhashable_values():
        value = [1, 2]
        key = ref_key(value)
        assert isinstance(key, RefKey)
        assert key.value is value

    def keys_wrapped_values_by_identity():
        value = [1, 2]
        equal_value = [1, 2]
        assert ref_key(value) == ref_key(value)
        assert hash(ref_key(value)) == hash(ref_key(value))
        assert ref_key(value) != ref_key(equal_value)
        assert ref_key(value) != value

    def can_be_used_as_dict_key():
        value = {"a": 1}
        d = {ref_key(value): "found"}
        assert d[ref_key(value)] == "found"
        assert ref_key({"a": 1}) not in d

    def has_repr():
        assert repr(RefKey([1])) == "RefKey([1])"

    def wraps_hashable_looking_values_that_cannot_be_hashed():
        value = ([1], 2)
        key = ref_key(value)
        assert isinstance(key, RefKey)
        assert key.value is value
