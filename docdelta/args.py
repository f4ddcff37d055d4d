# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .log import init_logging, set_docdelta_log_level
from .utils import split_id_keys


LOG_LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


class ConfigBackedParser(argparse.ArgumentParser):
    """Argument parser taking its defaults from docdelta_config.json.

    The config section is chosen by the program name, so the parser of
    `docdiff` reads the DocDiff configuration. Programs without a
    configuration just use the defaults given to add_argument.
    """

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split()[0]
        if entrypoint in entrypoint_configurables:
            self.set_defaults(**get_defaults_for_argparse(entrypoint))
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    """Set the docdelta log level from a level name.

    Logging is initialized with the default level when the option is
    added, since the action only runs when the option is given.
    """

    def __init__(self, option_strings, dest, default=None, **kwargs):
        level = logging.getLevelName(default or 'INFO')
        init_logging(level=level)
        set_docdelta_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        set_docdelta_log_level(logging.getLevelName(values), True)


class ConfigHelpAction(argparse.Action):
    "Print the effective config of the running program and exit."

    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        section = entrypoint_configurables[parser.prog].__name__
        options = build_config(parser.prog, True)
        pretty_print_dict(
            {section: {k: json.dumps(v) for k, v in options.items()}},
            config=PrettyPrintConfig(out=sys.stderr))
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all docdelta commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        action=ConfigHelpAction,
        help="print the config options of this command with their "
             "effective values, then exit.")
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=LOG_LEVELS,
        action=LogLevelAction,
        help="set the log level by name.")


def add_identity_args(parser):
    """Adds the option naming the identity keys of objects.
    """
    parser.add_argument(
        '-k', '--id-keys',
        type=split_id_keys,
        default=[],
        help="comma separated object keys making up the identity of "
             "an object, e.g. 'id' or 'kind,name'.")


def add_format_args(parser):
    """Adds the option choosing between the textual and the json diff format.
    """
    parser.add_argument(
        '-f', '--format',
        default='text',
        choices=('text', 'json'),
        help="diff format: 'text' (@/-/+ lines) or 'json' "
             "(a list of {path, old, new} objects).")


def add_prettyprint_args(parser):
    "Adds the options of the terminal diff printer."
    colors = parser.add_mutually_exclusive_group()
    colors.add_argument(
        '--color',
        dest='color',
        action="store_true",
        default=True,
        help="color the diff with ANSI escapes, even when the config "
             "turns colors off.")
    colors.add_argument(
        '--no-color',
        dest='color',
        action="store_false",
        default=True,
        help="print the diff without ANSI color escapes.")


filename_help = {
    "base": "the original document.",
    "remote": "the changed document.",
    "diff": "the diff to apply, as written by docdiff.",
}


def add_filename_args(parser, names):
    "Add positional file arguments, named from `filename_help`."
    for name in names:
        parser.add_argument(name, help=filename_help[name])


def prettyprint_config_from_args(arguments, **kwargs):
    "Printer config honouring --no-color."
    from .prettyprint import PrettyPrintConfig
    kwargs.setdefault('use_color', getattr(arguments, 'color', True))
    return PrettyPrintConfig(**kwargs)
