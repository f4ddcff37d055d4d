# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import os

from jsonschema import Draft4Validator as Validator
from jsonschema.exceptions import ValidationError

from .log import DiffFormatError


# Line prefixes of the textual diff format
PATH_PREFIX = "@ "
REMOVE_PREFIX = "- "
ADD_PREFIX = "+ "

SCHEMA_PATH = os.path.join(os.path.dirname(__file__), "diff_format.schema.json")


class DiffElement(dict):
    """A single change: the values at a path before and after.

    Minimal class providing attribute access to the keys
    `path`, `old_values` and `new_values`.
    """
    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value


def diff_element(path, old_values, new_values):
    "Create a diff element, copying the path so callers may keep extending theirs."
    return DiffElement(path=list(path), old_values=list(old_values),
                       new_values=list(new_values))


path_element_types = (str, int, dict)


def validate_diff(diff):
    """Check whether a diff (list of diff elements) is well formed.

    Raises a DiffFormatError if not well formed.
    """
    if not isinstance(diff, list):
        raise DiffFormatError("Diff must be a list.")
    for e in diff:
        validate_diff_element(e)


def validate_diff_element(e):
    from .nodes import JsonNode, is_void

    if not isinstance(e, DiffElement):
        raise DiffFormatError("Diff element '{}' is not a diff type.".format(e))
    for name in ("path", "old_values", "new_values"):
        if not isinstance(e.get(name), list):
            raise DiffFormatError(
                "Diff element field '{}' must be a list, not '{}'.".format(name, e.get(name)))
    for p in e.path:
        if isinstance(p, bool) or not isinstance(p, path_element_types):
            raise DiffFormatError(
                "Invalid path element '{}' of type '{}'. "
                "Expecting str, int or mapping.".format(p, type(p).__name__))
    for v in e.old_values + e.new_values:
        if not isinstance(v, JsonNode) or is_void(v):
            raise DiffFormatError("Diff value '{}' is not a json node.".format(v))


def is_valid_diff(diff):
    """Checks whether a diff (list of diff elements) is well formed.

    Returns a boolean indicating the well-formedness of the diff.
    """
    try:
        validate_diff(diff)
    except DiffFormatError:
        return False
    return True


def render_diff(diff):
    """Render a diff in the textual format:

        @ ["path","to","key"]
        - old value
        + new value

    Each value is compact json on a single line.
    """
    lines = []
    for e in diff:
        lines.append(PATH_PREFIX + format_path_text(e.path))
        lines.extend(REMOVE_PREFIX + v.serialize() for v in e.old_values)
        lines.extend(ADD_PREFIX + v.serialize() for v in e.new_values)
    return "".join(line + "\n" for line in lines)


def format_path_text(path):
    return json.dumps(path, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def parse_diff(text, id_keys=()):
    "Parse the textual format written by render_diff."
    from .nodes import read_node

    diff = []
    # Only "\n" ends a line, values may hold other line separators
    for lineno, line in enumerate(text.split("\n"), 1):
        if not line.strip():
            continue
        prefix, payload = line[:2], line[2:]
        try:
            if prefix == PATH_PREFIX:
                path = json.loads(payload)
                if not isinstance(path, list):
                    raise DiffFormatError("Line {}: path must be a json array.".format(lineno))
                diff.append(diff_element(path, [], []))
            elif prefix in (REMOVE_PREFIX, ADD_PREFIX):
                if not diff:
                    raise DiffFormatError(
                        "Line {}: value before the first path header.".format(lineno))
                value = read_node(payload, id_keys)
                if prefix == REMOVE_PREFIX:
                    if diff[-1].new_values:
                        raise DiffFormatError(
                            "Line {}: removed value after an added value.".format(lineno))
                    diff[-1].old_values.append(value)
                else:
                    diff[-1].new_values.append(value)
            else:
                raise DiffFormatError("Line {}: invalid line {!r}.".format(lineno, line))
        except ValueError as e:
            if isinstance(e, DiffFormatError):
                raise
            raise DiffFormatError("Line {}: invalid json: {}".format(lineno, e))
    validate_diff(diff)
    return diff


_validator = None

def get_diff_validator():
    global _validator
    if _validator is None:
        with io.open(SCHEMA_PATH, encoding="utf8") as f:
            _validator = Validator(json.load(f))
    return _validator


def diff_to_json(diff):
    "Convert a diff to plain json data, as described by diff_format.schema.json."
    return [
        {
            "path": list(e.path),
            "old": [v.to_python() for v in e.old_values],
            "new": [v.to_python() for v in e.new_values],
        }
        for e in diff
    ]


def diff_from_json(data, id_keys=()):
    "Validate plain json data against the diff schema and build a diff."
    from .nodes import to_node

    try:
        get_diff_validator().validate(data)
    except ValidationError as e:
        raise DiffFormatError("Invalid json diff: {}".format(e.message))
    return [
        diff_element(
            entry["path"],
            [to_node(v, id_keys) for v in entry["old"]],
            [to_node(v, id_keys) for v in entry["new"]])
        for entry in data
    ]
