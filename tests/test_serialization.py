import json

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dict_tools.indifferent import IndifferentDict
from dict_tools.serialization import dumps, json_default, to_plain
from dict_tools.symbol import Symbol


_JSON_SCALARS = st.none() | st.booleans() | st.integers(min_value=-10_000, max_value=10_000) | st.text(max_size=30)
_JSON_VALUES = st.recursive(
    _JSON_SCALARS,
    lambda children: st.lists(children, max_size=4) | st.dictionaries(st.text(max_size=12), children, max_size=4),
    max_leaves=15,
)


def test_serializes_as_object_when_used_as_list_member() -> None:
    store = {Symbol("a"): 1}
    wrapper = IndifferentDict(store)

    dumped = dumps([store, wrapper])
    loaded = json.loads(dumped)

    assert loaded[1] == loaded[0]
    assert dumped == dumps([store, store])


def test_wrapper_nested_in_plain_structure_serializes_like_its_store() -> None:
    store = {"b": [1, {"c": None}]}
    document = {"outer": IndifferentDict(store), "plain": store}

    assert dumps(document) == dumps({"outer": store, "plain": store})


def test_to_plain_returns_json_ready_structure() -> None:
    wrapper = IndifferentDict({Symbol("a"): (1, IndifferentDict({Symbol("b"): Symbol("c")}))})

    assert to_plain(wrapper) == {"a": [1, {"b": "c"}]}


def test_to_plain_does_not_modify_store() -> None:
    store = {Symbol("a"): {Symbol("b"): 1}}

    _ = to_plain(IndifferentDict(store))

    assert store == {Symbol("a"): {Symbol("b"): 1}}


def test_json_default_hook_unwraps_wrappers() -> None:
    store = {"a": [1, 2]}
    document = [IndifferentDict(store), {"inner": IndifferentDict({"x": "y"})}]

    assert json.dumps(document, default=json_default) == json.dumps([store, {"inner": {"x": "y"}}])


def test_json_default_hook_rejects_unknown_objects() -> None:
    with pytest.raises(TypeError, match="Object of type object is not JSON serializable"):
        _ = json.dumps({"a": object()}, default=json_default)


def test_dumps_passes_keyword_arguments_through() -> None:
    assert dumps(IndifferentDict({"b": 1, "a": 2}), sort_keys=True) == '{"a": 2, "b": 1}'


@given(value=st.dictionaries(st.text(max_size=12), _JSON_VALUES, max_size=5))
def test_wrapped_and_plain_serialize_identically(value: dict[str, object]) -> None:
    assert dumps(IndifferentDict(value)) == dumps(value) == json.dumps(value)
    assert dumps([value, IndifferentDict(value)]) == json.dumps([value, value])
