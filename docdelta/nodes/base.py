# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json

from ..diff_format import diff_element
from ..hashing import hash_bytes
from ..log import NonSetDiffEntry, PatchConflict, PathTypeMismatch


__all__ = [
    "JsonNode", "Void", "VOID", "is_void", "node_list", "single_value",
    "check_arity", "patch_terminal", "format_path",
    ]


class JsonNode(object):
    """Common interface of all values in a document tree.

    Every variant implements the same set of operations, and operations
    between different variants are always defined: `equals` is False and
    `diff` is a replacement of the whole value.

    Nodes are treated as immutable, except that `patch` on an object or
    array modifies that container in place and returns it. Use
    `copy.deepcopy` before patching to keep the original.
    """

    def to_python(self):
        "Return the plain json value (dict, list, str, number, bool, None)."
        raise NotImplementedError

    def serialize(self):
        "Return compact json text with sorted keys."
        return json.dumps(self.to_python(), sort_keys=True,
                          separators=(",", ":"), ensure_ascii=False)

    def equals(self, other):
        raise NotImplementedError

    def content_hash(self, hasher=hash_bytes):
        raise NotImplementedError

    def identity(self, hasher=hash_bytes):
        "Hash used to recognize the same element across two versions."
        return self.content_hash(hasher)

    def identity_path_element(self):
        """Path element referencing this node by identity.

        Without identity keys this is the empty mapping,
        meaning "matched by full content".
        """
        return {}

    def diff(self, other, path=None):
        raise NotImplementedError

    def patch(self, path_behind, path_ahead, old_values, new_values):
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, JsonNode):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self):
        return "%s(%s)" % (type(self).__name__, self.serialize())


class Void(JsonNode):
    """Sentinel for an absent value.

    Not json null: Void only shows up while patching,
    as the value of a key or index that does not exist.
    """

    def to_python(self):
        raise TypeError("Void has no json value")

    def serialize(self):
        return ""

    def equals(self, other):
        return isinstance(other, Void)

    def content_hash(self, hasher=hash_bytes):
        return hasher(b"void")

    def diff(self, other, path=None):
        path = [] if path is None else path
        if is_void(other):
            return []
        return [diff_element(path, [], node_list(other))]

    def patch(self, path_behind, path_ahead, old_values, new_values):
        check_arity(path_behind, path_ahead, old_values, new_values)
        if path_ahead:
            raise PathTypeMismatch(
                "Found nothing at %s. Expected JSON object or array." % format_path(path_behind),
                path_behind, [])
        return patch_terminal(self, path_behind, old_values, new_values)

    def __repr__(self):
        return "Void()"


VOID = Void()


def is_void(node):
    return isinstance(node, Void)


def node_list(*nodes):
    "Make a value list for a diff element, leaving out Void."
    return [n for n in nodes if not is_void(n)]


def single_value(values):
    return values[0] if values else VOID


def format_path(path):
    return json.dumps(list(path), sort_keys=True, separators=(",", ":"))


def check_arity(path_behind, path_ahead, old_values, new_values):
    """Reject multi-valued diff elements at a terminal path.

    Several old/new values only make sense for identity matched
    collections, never at a plain key or index.
    """
    if not path_ahead and (len(old_values) > 1 or len(new_values) > 1):
        raise NonSetDiffEntry(
            "Invalid diff at %s: %d old and %d new values for a single value path." % (
                format_path(path_behind), len(old_values), len(new_values)),
            path_behind, list(old_values) + list(new_values))


def patch_terminal(node, path_behind, old_values, new_values):
    """Swap node for the new value, if it is what the diff expects.

    Returns the replacement, which is Void when the value is deleted.
    """
    expected = single_value(old_values)
    replacement = single_value(new_values)
    if not node.equals(expected):
        raise PatchConflict(
            "Found %s at %s. Expected %s." % (
                node.serialize() or "nothing", format_path(path_behind),
                expected.serialize() or "nothing"),
            path_behind, [expected, node])
    return replacement
