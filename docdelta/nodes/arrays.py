# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import diff_element
from ..hashing import hash_bytes
from ..log import PathTypeMismatch
from .base import (
    JsonNode, VOID, check_arity, format_path, is_void, node_list, patch_terminal,
    )


__all__ = ["Array"]


class Array(JsonNode):
    """A json array, diffed by position.

    Arrays of equal length are diffed item by item, anything else
    is replaced as a whole. Matching items by identity is left to
    a collection differ built on `identity()`.
    """

    def __init__(self, items=()):
        self.items = list(items)

    def to_python(self):
        return [item.to_python() for item in self.items]

    def equals(self, other):
        if not isinstance(other, Array) or len(other.items) != len(self.items):
            return False
        return all(a.equals(b) for a, b in zip(self.items, other.items))

    def content_hash(self, hasher=hash_bytes):
        codes = [item.content_hash(hasher) for item in self.items]
        return hasher(b"[" + b"".join(codes) + b"]")

    def diff(self, other, path=None):
        path = [] if path is None else path
        if not isinstance(other, Array) or len(other.items) != len(self.items):
            return [diff_element(path, node_list(self), node_list(other))]
        d = []
        for i, (a, b) in enumerate(zip(self.items, other.items)):
            d.extend(a.diff(b, path + [i]))
        return d

    def patch(self, path_behind, path_ahead, old_values, new_values):
        check_arity(path_behind, path_ahead, old_values, new_values)
        if not path_ahead:
            return patch_terminal(self, path_behind, old_values, new_values)

        index = path_ahead[0]
        if isinstance(index, bool) or not isinstance(index, int):
            raise PathTypeMismatch(
                "Found %s at %s. Expected JSON array index, got %r." % (
                    self.serialize(), format_path(path_behind), index),
                path_behind, [self])
        n = len(self.items)
        if not 0 <= index <= n:
            raise PathTypeMismatch(
                "Index %d out of range for array of length %d at %s." % (
                    index, n, format_path(path_behind)),
                path_behind, [self])

        # One past the end appends
        current = self.items[index] if index < n else VOID
        patched = current.patch(
            path_behind + [index], path_ahead[1:], old_values, new_values)
        if is_void(patched):
            if index < n:
                del self.items[index]
        elif index == n:
            self.items.append(patched)
        else:
            self.items[index] = patched
        return self
