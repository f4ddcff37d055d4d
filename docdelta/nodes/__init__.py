# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .base import JsonNode, Void, VOID, is_void
from .scalars import Null, Bool, Number, String
from .arrays import Array
from .objects import Object
from .construct import to_node, read_node

__all__ = [
    "JsonNode", "Void", "VOID", "is_void",
    "Null", "Bool", "Number", "String", "Array", "Object",
    "to_node", "read_node",
    ]
