# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import random

from docdelta import diff, patch, to_node, parse_diff, render_diff, VOID

from .utils import check_symmetric_diff_and_patch


KEYS = ["a", "b", "c", "id", "name", ""]


def random_value(rng, depth=0):
    kinds = ["null", "bool", "int", "float", "str"]
    if depth < 4:
        kinds += ["object", "object", "array"]
    kind = rng.choice(kinds)
    if kind == "null":
        return None
    if kind == "bool":
        return rng.random() < 0.5
    if kind == "int":
        return rng.randint(-3, 3)
    if kind == "float":
        return rng.choice([0.5, -1.25, 2.0])
    if kind == "str":
        return rng.choice(["", "x", "y", "é", "1"])
    if kind == "array":
        return [random_value(rng, depth + 1) for _ in range(rng.randint(0, 3))]
    return {k: random_value(rng, depth + 1)
            for k in rng.sample(KEYS, rng.randint(0, len(KEYS)))}


def mutate(rng, value):
    "Return a changed deep copy of an object, keeping most of it."
    value = copy.deepcopy(value)
    for key in list(value):
        r = rng.random()
        if r < 0.2:
            del value[key]
        elif r < 0.4:
            value[key] = random_value(rng, 2)
        elif r < 0.6 and isinstance(value[key], dict):
            value[key] = mutate(rng, value[key])
    if rng.random() < 0.3:
        value[rng.choice(KEYS)] = random_value(rng, 3)
    return value


def test_random_objects_roundtrip(slow):
    rng = random.Random(1234)
    for _ in range(300):
        a = random_value(rng)
        if not isinstance(a, dict):
            a = {"root": a}
        b = mutate(rng, a)
        check_symmetric_diff_and_patch(a, b)

        # Reflexivity and hash consistency
        assert diff(a, copy.deepcopy(a)) == []
        na, nb = to_node(a), to_node(b)
        if na.equals(nb):
            assert na.content_hash() == nb.content_hash()

        # The textual format replays the same way
        d = parse_diff(render_diff(diff(a, b)))
        assert patch(to_node(a), d) == nb


def test_random_documents_any_root(slow):
    rng = random.Random(42)
    for _ in range(300):
        check_symmetric_diff_and_patch(random_value(rng), random_value(rng))


def test_known_tricky_pairs():
    pairs = [
        ([], 0),
        # an empty document against an empty object
        ({}, VOID),
        ({}, " "),
        ([{}, []], [{}, [{}, []]]),
        ({"": None}, {"": {}}),
        ({"a": [1]}, {"a": [1.0]}),
    ]
    for a, b in pairs:
        check_symmetric_diff_and_patch(a, b)
