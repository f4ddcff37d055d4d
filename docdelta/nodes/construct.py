# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from .base import JsonNode
from .scalars import Null, Bool, Number, String
from .arrays import Array
from .objects import Object


__all__ = ["to_node", "read_node"]


def to_node(value, id_keys=()):
    """Build a node tree from a plain json value.

    Every object in the tree gets the same `id_keys`.
    Values that already are nodes are returned as is.
    """
    if isinstance(value, JsonNode):
        return value
    if value is None:
        return Null()
    # bool before number, as bool is a subclass of int
    if isinstance(value, bool):
        return Bool(value)
    if isinstance(value, (int, float)):
        return Number(value)
    if isinstance(value, str):
        return String(value)
    if isinstance(value, dict):
        properties = {}
        for k, v in value.items():
            if not isinstance(k, str):
                raise TypeError("Object keys must be strings, got %r." % (k,))
            properties[k] = to_node(v, id_keys)
        return Object(properties, id_keys)
    if isinstance(value, (list, tuple)):
        return Array(to_node(v, id_keys) for v in value)
    raise TypeError("Cannot convert %s to a json node." % type(value).__name__)


def read_node(text, id_keys=()):
    "Parse json text into a node tree."
    return to_node(json.loads(text), id_keys)
