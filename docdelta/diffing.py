# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from .diff_format import validate_diff
from .nodes import to_node


__all__ = ["diff"]


def diff(a, b, path=None, id_keys=()):
    """Compute the diff of two json-like documents.

    a and b may be node trees or plain json values, which are
    converted with `to_node` using the given id_keys.
    Returns a list of DiffElement rooted at path.
    """
    a = to_node(a, id_keys)
    b = to_node(b, id_keys)
    d = a.diff(b, list(path or []))

    # We can turn this off for performance after the library has been well tested:
    validate_diff(d)

    return d
