# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args, add_identity_args,
    add_format_args,
    )
from .diff_format import diff_from_json, parse_diff
from .log import DiffFormatError, PatchError, error, info
from .patching import patch
from .utils import (
    ConsoleWriter, find_missing_file, read_document, write_document, setup_std_streams,
    )


_description = "Apply a diff from docdiff to a JSON document."


def read_diff(filename, fmt, id_keys=()):
    "Read a diff file in the given format ('text' or 'json')."
    with io.open(filename, encoding="utf8") as diff_file:
        text = diff_file.read()
    if fmt != 'json':
        return parse_diff(text, id_keys)
    try:
        data = json.loads(text)
    except ValueError as e:
        raise DiffFormatError("Invalid json diff: {}".format(e))
    return diff_from_json(data, id_keys)


def main_patch(args):
    missing = find_missing_file([args.base, args.diff])
    if missing:
        print("Missing file {}".format(missing))
        return 1

    try:
        before = read_document(args.base, args.id_keys)
        d = read_diff(args.diff, args.format, args.id_keys)
    except ValueError as e:
        error("Could not read input: %s", e)
        return 1

    try:
        after = patch(before, d)
    except PatchError as e:
        error("Patch failed: %s", e)
        return 1
    info("Applied %d diff elements to %s", len(d), args.base)

    write_document(after, args.output or ConsoleWriter())
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the docpatch command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_identity_args(parser)
    add_format_args(parser)
    add_filename_args(parser, ["base", "diff"])
    parser.add_argument(
        '-o', '--output',
        default=None,
        help="write the patched document to this file instead of "
             "printing it.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser('docpatch').parse_args(args)
    return main_patch(arguments)


if __name__ == "__main__":
    sys.exit(main())
