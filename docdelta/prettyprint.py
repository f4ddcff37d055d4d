# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import datetime
import os
import sys

import colorama

from .diff_format import (
    PATH_PREFIX, REMOVE_PREFIX, ADD_PREFIX, format_path_text,
    )


# Escapes written before removed values, added values and paths
Palette = namedtuple('Palette', 'REMOVE ADD INFO RESET')

palettes = {
    True: Palette(colorama.Fore.RED, colorama.Fore.GREEN,
                  colorama.Fore.BLUE + colorama.Style.BRIGHT,
                  colorama.Style.RESET_ALL),
    False: Palette('', '', '', ''),
}


class PrettyPrintConfig:
    """Where diffs are printed, and whether they are colored."""

    def __init__(self, out=sys.stdout, use_color=True):
        self.out = out
        self.use_color = use_color

    @property
    def palette(self):
        return palettes[bool(self.use_color)]

    def __getattr__(self, name):
        # REMOVE, ADD, INFO and RESET come from the palette
        if name in Palette._fields:
            return getattr(self.palette, name)
        raise AttributeError(name)


DefaultConfig = PrettyPrintConfig()


def file_timestamp(filename):
    "Modification time of a file for diff headers."
    try:
        mtime = os.path.getmtime(filename)
    except OSError:
        return "(no timestamp)"
    return datetime.datetime.fromtimestamp(mtime).isoformat(" ")


def pretty_print_line(color, prefix, text, config):
    config.out.write("%s%s%s%s\n" % (color, prefix, text, config.RESET))


def pretty_print_diff_element(e, config=DefaultConfig):
    pretty_print_line(config.INFO, PATH_PREFIX, format_path_text(e.path), config)
    for v in e.old_values:
        pretty_print_line(config.REMOVE, REMOVE_PREFIX, v.serialize(), config)
    for v in e.new_values:
        pretty_print_line(config.ADD, ADD_PREFIX, v.serialize(), config)


def pretty_print_diff(di, config=DefaultConfig):
    """Pretty-print a diff in the textual format.

    Without colors the output is exactly what `render_diff` gives,
    and can be read back with `parse_diff`.
    """
    for e in di:
        pretty_print_diff_element(e, config)


document_diff_header = """\
docdiff {afn} {bfn}
--- {afn}{atime}
+++ {bfn}{btime}
"""

def pretty_print_document_diff(afn, bfn, di, config=DefaultConfig):
    """Pretty-print a document diff with a header naming both files

    Parameters
    ----------

    afn: str
        Filename of a, the base document
    bfn: str
        Filename of b, the updated document
    di: diff
        The diff describing the transformation from a to b
    config: PrettyPrintConfig
        Config object determining how and where output is printed
    """
    if di:
        atime = "  " + file_timestamp(afn)
        btime = "  " + file_timestamp(bfn)
        config.out.write(document_diff_header.format(
            afn=afn, bfn=bfn, atime=atime, btime=btime))
        pretty_print_diff(di, config)


def pretty_print_dict(d, prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          nested: value

    """
    for k in sorted(d):
        v = d[k]
        if isinstance(v, dict):
            config.out.write("%s%s:\n" % (prefix, k))
            pretty_print_dict(v, prefix + "  ", config)
        else:
            config.out.write("%s%s: %s\n" % (prefix, k, v))
