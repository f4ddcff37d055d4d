# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ._version import __version__

from .nodes import (
    JsonNode, Object, Array, String, Number, Bool, Null, Void, VOID,
    to_node, read_node,
    )
from .diff_format import DiffElement, diff_element, render_diff, parse_diff
from .diffing import diff
from .patching import patch
from .log import PatchError, PathTypeMismatch, NonSetDiffEntry, PatchConflict


__all__ = [
    "__version__",
    "JsonNode", "Object", "Array", "String", "Number", "Bool", "Null", "Void", "VOID",
    "to_node", "read_node",
    "DiffElement", "diff_element", "render_diff", "parse_diff",
    "diff", "patch",
    "PatchError", "PathTypeMismatch", "NonSetDiffEntry", "PatchConflict",
    ]
