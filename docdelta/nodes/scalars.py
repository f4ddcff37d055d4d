# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import diff_element
from ..hashing import hash_bytes, hash_text
from ..log import PathTypeMismatch
from .base import JsonNode, check_arity, format_path, node_list, patch_terminal


__all__ = ["Null", "Bool", "Number", "String"]


class _Scalar(JsonNode):
    "Leaf values: compared as a whole, replaced as a whole."

    def __init__(self, value):
        self.value = value

    def to_python(self):
        return self.value

    def equals(self, other):
        return type(other) is type(self) and other.value == self.value

    def content_hash(self, hasher=hash_bytes):
        return hash_text(self.serialize(), hasher)

    def diff(self, other, path=None):
        path = [] if path is None else path
        if self.equals(other):
            return []
        return [diff_element(path, node_list(self), node_list(other))]

    def patch(self, path_behind, path_ahead, old_values, new_values):
        check_arity(path_behind, path_ahead, old_values, new_values)
        if path_ahead:
            raise PathTypeMismatch(
                "Found %s at %s. Expected JSON object or array." % (
                    self.serialize(), format_path(path_behind)),
                path_behind, [self])
        return patch_terminal(self, path_behind, old_values, new_values)


class Null(_Scalar):

    def __init__(self, value=None):
        super(Null, self).__init__(None)


class Bool(_Scalar):

    def __init__(self, value):
        super(Bool, self).__init__(bool(value))


class Number(_Scalar):
    """A json number.

    Json has a single number type, so 1 and 1.0 are equal
    and hash the same. Integers are compared exactly, whatever
    their size.
    """

    def equals(self, other):
        return isinstance(other, Number) and other.value == self.value

    def content_hash(self, hasher=hash_bytes):
        return hash_text(_number_text(self.value), hasher)


def _number_text(value):
    "Text shared by all equal numbers: integral values as exact ints."
    if isinstance(value, float) and not value.is_integer():
        return repr(value)
    return repr(int(value))


class String(_Scalar):
    pass
