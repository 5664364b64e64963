import pytest

from extended_collections import (
    EmplaceHandler,
    InvalidHandlerError,
    OrderedMap,
)


def describe_emplace_handler():
    def has_no_functions_by_default():
        handler = EmplaceHandler()
        assert handler.insert is None
        assert handler.update is None

    def check_fails_without_functions():
        with pytest.raises(InvalidHandlerError) as exc_info:
            EmplaceHandler().check("key")
        assert str(exc_info.value) == (
            "Cannot emplace 'key':"
            " At least one of 'insert' or 'update' must be provided."
        )

    def check_passes_with_any_function():
        EmplaceHandler(insert=lambda key, map_: 1).check("key")
        EmplaceHandler(update=lambda value, key, map_: 1).check("key")

    def resolve_updates_present_keys():
        handler = EmplaceHandler(
            insert=lambda key, map_: "inserted",
            update=lambda value, key, map_: f"{value} updated by {key}",
        )
        assert handler.resolve(True, "old", "k", None) == "old updated by k"

    def resolve_inserts_missing_keys():
        handler = EmplaceHandler(
            insert=lambda key, map_: f"inserted {key}",
            update=lambda value, key, map_: "updated",
        )
        assert handler.resolve(False, None, "k", None) == "inserted k"

    def resolve_inserts_present_keys_without_update():
        handler = EmplaceHandler(insert=lambda key, map_: "inserted")
        assert handler.resolve(True, "old", "k", None) == "inserted"

    def resolve_updates_present_keys_holding_none():
        handler = EmplaceHandler(update=lambda value, key, map_: [value])
        assert handler.resolve(True, None, "k", None) == [None]

    def resolve_fails_for_missing_keys_without_insert():
        handler = EmplaceHandler(update=lambda value, key, map_: "updated")
        with pytest.raises(InvalidHandlerError, match="no 'insert' function"):
            handler.resolve(False, None, "k", None)


def describe_ordered_map_emplace():
    @pytest.fixture
    def colors():
        return OrderedMap([("black", "#fffff")])

    def updates_present_and_inserts_missing_keys(colors):
        assert colors.emplace("black", update=lambda *_args: "#000000") == "#000000"
        assert colors.emplace("white", insert=lambda *_args: "#ffffff") == "#ffffff"
        assert colors.to_key_list() == ["black", "white"]
        assert colors.get("black") == "#000000"
        assert colors.get("white") == "#ffffff"

    def passes_value_key_and_map_to_update(colors):
        calls = []

        def _update(value, key, map_):
            calls.append((value, key, map_))
            return value.upper()

        colors.emplace("black", insert=lambda *_args: "unused", update=_update)
        assert calls == [("#fffff", "black", colors)]
        assert calls[0][2] is colors
        assert colors.get("black") == "#FFFFF"

    def passes_key_and_map_to_insert(colors):
        calls = []

        def _insert(key, map_):
            calls.append((key, map_))
            return len(map_)

        assert colors.emplace("red", insert=_insert, update=lambda *_args: 0) == 1
        assert calls == [("red", colors)]

    def does_not_move_updated_keys(colors):
        colors.set("white", "#ffffff")
        colors.emplace("black", update=lambda *_args: "#000000")
        assert colors.to_key_list() == ["black", "white"]

    def fails_without_any_handler_for_present_and_missing_keys(colors):
        with pytest.raises(InvalidHandlerError):
            colors.emplace("black")
        with pytest.raises(InvalidHandlerError):
            colors.emplace("white")
        assert colors.to_list() == ["#fffff"]

    def fails_with_update_only_for_missing_keys(colors):
        with pytest.raises(InvalidHandlerError):
            colors.emplace("white", update=lambda *_args: "#ffffff")
        assert not colors.has("white")

    def leaves_the_map_unchanged_when_a_handler_fails(colors):
        def _update(*_args):
            raise RuntimeError("Cannot update")

        with pytest.raises(RuntimeError, match="^Cannot update$"):
            colors.emplace("black", update=_update)
        assert colors.get("black") == "#fffff"

    def can_be_used_for_counting():
        counts = OrderedMap()
        for word in "the cat saw the dog and the bird".split():
            counts.emplace(
                word,
                insert=lambda *_args: 1,
                update=lambda count, *_args: count + 1,
            )
        assert counts.get("the") == 3
        assert counts.to_key_list() == ["the", "cat", "saw", "dog", "and", "bird"]
