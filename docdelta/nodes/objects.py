# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import diff_element
from ..hashing import hash_bytes, hash_text, combine_hashes
from ..log import PathTypeMismatch
from .base import (
    JsonNode, VOID, check_arity, format_path, is_void, node_list, patch_terminal,
    )


__all__ = ["Object"]


class Object(JsonNode):
    """A json object.

    `id_keys` names the properties making up the business identity
    of the object, e.g. ["id"] for records which keep their id while
    other fields change. It is supplied from outside (config, command
    line) and does not take part in equality.
    """

    def __init__(self, properties=None, id_keys=()):
        self.properties = dict(properties or {})
        self.id_keys = list(id_keys)

    def to_python(self):
        return {k: v.to_python() for k, v in self.properties.items()}

    def equals(self, other):
        if not isinstance(other, Object):
            return False
        if len(self.properties) != len(other.properties):
            return False
        for key, value in self.properties.items():
            if key not in other.properties:
                return False
            if not value.equals(other.properties[key]):
                return False
        return True

    def content_hash(self, hasher=hash_bytes):
        # Sorting keys makes the hash independent of insertion order
        a = bytearray()
        for key in sorted(self.properties):
            a += hash_text(key, hasher)
            a += self.properties[key].content_hash(hasher)
        return hasher(bytes(a))

    def identity(self, hasher=hash_bytes):
        """Hash of the id_keys properties, in configured order.

        Falls back to the content hash when no id_keys are
        configured, or none of them are present.
        """
        if not self.id_keys:
            return self.content_hash(hasher)
        codes = [self.properties[key].content_hash(hasher)
                 for key in self.id_keys if key in self.properties]
        if not codes:
            return self.content_hash(hasher)
        return combine_hashes(codes, hasher)

    def identity_path_element(self):
        return {key: self.properties[key].to_python()
                for key in self.id_keys if key in self.properties}

    def diff(self, other, path=None):
        path = [] if path is None else path
        if not isinstance(other, Object):
            return [diff_element(path, [self], node_list(other))]

        a, b = self.properties, other.properties
        d = []
        # Sorting keys in loops to get a deterministic diff result
        for key in sorted(a):
            if key in b:
                d.extend(a[key].diff(b[key], path + [key]))
            else:
                d.append(diff_element(path + [key], [a[key]], []))
        for key in sorted(b):
            if key not in a:
                d.append(diff_element(path + [key], [], [b[key]]))
        return d

    def patch(self, path_behind, path_ahead, old_values, new_values):
        check_arity(path_behind, path_ahead, old_values, new_values)
        if not path_ahead:
            return patch_terminal(self, path_behind, old_values, new_values)

        key = path_ahead[0]
        if not isinstance(key, str):
            raise PathTypeMismatch(
                "Found %s at %s. Expected JSON object key, got %r." % (
                    self.serialize(), format_path(path_behind), key),
                path_behind, [self])

        # A missing key starts out as Void, allowing inserts
        current = self.properties.get(key, VOID)
        patched = current.patch(
            path_behind + [key], path_ahead[1:], old_values, new_values)
        if is_void(patched):
            self.properties.pop(key, None)
        else:
            self.properties[key] = patched
        return self
