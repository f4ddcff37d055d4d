# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import json

import pytest

from docdelta import (
    Object, Array, String, Number, Bool, Null, VOID, to_node, read_node,
    )
from docdelta.nodes import is_void


values = [
    {},
    {"a": 1},
    {"a": {"b": [1, 2, {"c": None}]}},
    [],
    [1, "two", 3.5, True, None],
    "",
    "text",
    0,
    -12.25,
    True,
    False,
    None,
]


def test_to_node_variants():
    assert isinstance(to_node({}), Object)
    assert isinstance(to_node([]), Array)
    assert isinstance(to_node("x"), String)
    assert isinstance(to_node(1), Number)
    assert isinstance(to_node(1.5), Number)
    assert isinstance(to_node(True), Bool)
    assert isinstance(to_node(None), Null)
    assert to_node((1, 2)) == to_node([1, 2])


def test_to_node_passes_nodes_through():
    n = to_node({"a": 1})
    assert to_node(n) is n


def test_to_node_sets_id_keys_everywhere():
    n = to_node({"a": {"b": [{"c": 1}]}}, id_keys=["c"])
    assert n.id_keys == ["c"]
    assert n.properties["a"].id_keys == ["c"]
    assert n.properties["a"].properties["b"].items[0].id_keys == ["c"]


def test_to_node_rejects_invalid_input():
    with pytest.raises(TypeError):
        to_node({1: "a"})
    with pytest.raises(TypeError):
        to_node(object())
    with pytest.raises(ValueError):
        read_node("{not json")


def test_to_python_roundtrip():
    for v in values:
        assert to_node(v).to_python() == v


def test_serialize_is_valid_canonical_json():
    for v in values:
        s = to_node(v).serialize()
        assert json.loads(s) == v
    assert to_node({"b": 1, "a": [1, {"d": 2, "c": 3}]}).serialize() == '{"a":[1,{"c":3,"d":2}],"b":1}'
    assert to_node("ø").serialize() == '"ø"'


def test_equals_same_variant():
    for v in values:
        assert to_node(v).equals(to_node(copy.deepcopy(v)))
        assert to_node(v) == to_node(v)
    assert not to_node({"a": 1}).equals(to_node({"a": 2}))
    assert not to_node({"a": 1}).equals(to_node({"b": 1}))
    assert not to_node({"a": 1}).equals(to_node({"a": 1, "b": 1}))
    assert not to_node([1, 2]).equals(to_node([2, 1]))
    assert not to_node("a").equals(to_node("b"))


def test_equals_mismatched_variants_is_false():
    nodes = [to_node(v) for v in ({}, [], "", 0, False, None)] + [VOID]
    for i, a in enumerate(nodes):
        for j, b in enumerate(nodes):
            assert a.equals(b) == (i == j)


def test_number_equality_follows_json():
    assert Number(1) == Number(1.0)
    assert Number(1).content_hash() == Number(1.0).content_hash()
    assert Number(0).content_hash() == Number(-0.0).content_hash()
    assert Number(2.5).content_hash() != Number(2).content_hash()
    assert Number(1) != Bool(True)
    assert Number(0) != Bool(False)
    assert Number(0) != Null()


def test_key_order_does_not_matter_for_equality():
    a = to_node({"x": 1, "y": 2})
    b = to_node({"y": 2, "x": 1})
    assert a == b
    assert a.serialize() == b.serialize()


def test_nodes_are_not_hashable():
    with pytest.raises(TypeError):
        hash(to_node({}))


def test_void():
    assert is_void(VOID)
    assert VOID.equals(VOID)
    assert not VOID.equals(Null())
    assert VOID.serialize() == ""
    assert repr(VOID) == "Void()"
    with pytest.raises(TypeError):
        VOID.to_python()
    assert VOID.content_hash() != to_node({}).content_hash()
    assert VOID.content_hash() != Null().content_hash()


def test_repr():
    assert repr(to_node({"a": [1]})) == 'Object({"a":[1]})'
    assert repr(to_node("s")) == 'String("s")'


def test_non_object_identity_defaults():
    for v in ([1, 2], "s", 3, True, None):
        n = to_node(v)
        assert n.identity() == n.content_hash()
        assert n.identity_path_element() == {}


def test_large_integers_compare_exactly():
    a, b = Number(2**53 + 1), Number(2**53)
    assert a != b
    assert a.content_hash() != b.content_hash()
    assert Number(2**53) == Number(float(2**53))
    assert Number(2**53).content_hash() == Number(float(2**53)).content_hash()


def test_integers_beyond_float_range():
    huge = read_node('{"n": 1' + '0' * 400 + '}')
    same = read_node('{"n": 1' + '0' * 400 + '}')
    assert huge == same
    assert huge.content_hash() == same.content_hash()
    assert huge != read_node('{"n": 2}')
