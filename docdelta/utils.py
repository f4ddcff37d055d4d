# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import codecs
import io
import json
import locale
import os
import sys

from .nodes import VOID, is_void, read_node

# Filename standing for an absent document
EXPLICIT_MISSING_FILE = "nul" if os.name == "nt" else "/dev/null"


def read_document(f, id_keys=()):
    """Read and return a json document as a node tree.

    Parameters:
        f:  A filename or file-like object. EXPLICIT_MISSING_FILE
            reads as the absent document, VOID.
        id_keys: identity keys given to every object in the document.
    """
    if f == EXPLICIT_MISSING_FILE:
        return VOID
    if isinstance(f, str):
        with io.open(f, encoding='utf-8') as fo:
            text = fo.read()
    else:
        text = f.read()
    return read_node(text, id_keys)


def write_document(node, f):
    """Write a node tree as indented json to a filename or file-like object.

    An absent (Void) document is written as an empty file.
    """
    if is_void(node):
        text = ""
    else:
        text = json.dumps(node.to_python(), indent=2, sort_keys=True,
                          separators=(",", ": "), ensure_ascii=False) + "\n"
    if isinstance(f, str):
        with io.open(f, "w", encoding="utf-8") as fo:
            fo.write(text)
    else:
        f.write(text)


def split_id_keys(value):
    "Split a comma separated list of identity keys, dropping blanks."
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [k.strip() for k in value.split(",") if k.strip()]


def _escaping_std_streams():
    """Rewrap the real sys.stdout/err so unencodable text is escaped.

    Captured or redirected streams, and runs with PYTHONIOENCODING set,
    are left as they are.
    """
    if os.getenv('PYTHONIOENCODING'):
        return
    fallback = locale.getpreferredencoding() or 'UTF-8'
    for name in ('stdout', 'stderr'):
        stream = getattr(sys, name)
        if stream is not getattr(sys, '__%s__' % name):
            continue
        handler = getattr(stream, 'errors', None) or 'strict'
        if handler != 'strict' and not handler.startswith('surrogate'):
            continue
        writer = codecs.getwriter(getattr(stream, 'encoding', None) or fallback)
        setattr(sys, name, writer(stream.buffer, errors='backslashreplace'))


def setup_std_streams():
    """Prepare the standard streams for printing documents and diffs.

    Documents may hold text the terminal cannot encode; it is escaped
    instead of failing the command. On Windows colorama translates the
    ANSI colors of the pretty printer.
    """
    _escaping_std_streams()
    # colorama wraps the streams, so it goes last
    if sys.platform.startswith('win'):
        import colorama
        colorama.init()


def find_missing_file(filenames):
    """Return the first of `filenames` that does not exist, or None.

    EXPLICIT_MISSING_FILE always counts as present.
    """
    for fn in filenames:
        if fn != EXPLICIT_MISSING_FILE and not os.path.exists(fn):
            return fn
    return None


class ConsoleWriter:
    """File-like object printing to stdout.

    Goes through print() so pytest's capsys sees the output even
    after setup_std_streams has replaced sys.stdout.
    """

    def write(self, text):
        print(text, end="")
