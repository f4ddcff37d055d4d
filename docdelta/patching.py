# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .log import debug
from .nodes import to_node


__all__ = ["patch", "patch_element"]


def patch_element(node, e):
    "Apply a single diff element to node, returning the new root."
    return node.patch([], list(e.path), e.old_values, e.new_values)


def patch(obj, diff, id_keys=()):
    """Apply a diff to a document, returning the patched document.

    obj may be a node tree or a plain json value. Node trees are
    modified in place where possible; deepcopy obj first to keep it.
    The root returned can be a different node than obj, e.g. when the
    whole document is replaced.

    Raises a PatchError subclass on the first element that does not
    apply, leaving obj in an undefined, partially patched state.
    """
    node = to_node(obj, id_keys)
    for e in diff:
        debug("Patching %s", e.path)
        node = patch_element(node, e)
    return node
