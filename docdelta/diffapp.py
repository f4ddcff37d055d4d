# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import sys

from .args import (
    ConfigBackedParser, add_generic_args, add_filename_args, add_identity_args,
    add_format_args, add_prettyprint_args, prettyprint_config_from_args,
    )
from .diff_format import diff_to_json, render_diff
from .diffing import diff
from .log import error, info
from .prettyprint import pretty_print_document_diff
from .utils import ConsoleWriter, find_missing_file, read_document, setup_std_streams


_description = "Compute the difference between two JSON documents."


def format_diff(d, fmt):
    "Serialize a diff in the 'text' or 'json' format."
    if fmt == 'json':
        return json.dumps(diff_to_json(d), indent=2, separators=(",", ": ")) + "\n"
    return render_diff(d)


def main_diff(args):
    """Main handler of diff CLI"""
    missing = find_missing_file([args.base, args.remote])
    if missing:
        print("Missing file {}".format(missing))
        return 1

    try:
        a = read_document(args.base, args.id_keys)
        b = read_document(args.remote, args.id_keys)
    except ValueError as e:
        error("Could not read documents: %s", e)
        return 1

    d = diff(a, b)
    info("Found %d differences", len(d))

    if args.out:
        with io.open(args.out, "w", encoding="utf8") as df:
            df.write(format_diff(d, args.format))
    elif args.format == 'json':
        ConsoleWriter().write(format_diff(d, 'json'))
    else:
        config = prettyprint_config_from_args(args, out=ConsoleWriter())
        pretty_print_document_diff(args.base, args.remote, d, config)

    # Differences are not an error
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the docdiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_identity_args(parser)
    add_format_args(parser)
    add_prettyprint_args(parser)
    add_filename_args(parser, ["base", "remote"])
    parser.add_argument(
        '--out',
        default=None,
        help="write the diff to this file instead of printing it. "
             "The file gets the plain format, without colors or header.")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser('docdiff').parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
