# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import importlib
import json
import sys

from ._version import __version__


# Subcommand name -> module holding its main()
COMMANDS = {
    "diff": "docdelta.diffapp",
    "patch": "docdelta.patchapp",
}

USAGE = """\
Usage: docdelta [-h | --version | --config | COMMAND [ARGS...]]

COMMAND is one of: {commands}

Examples: docdelta diff old.json new.json
          docdelta diff --id-keys id --out changes.diff old.json new.json
          docdelta patch old.json changes.diff -o new.json
""".format(commands=", ".join(sorted(COMMANDS)))


def print_config_options(out=sys.stderr):
    "Print the effective config of every command."
    from .config import build_config, entrypoint_configurables
    from .prettyprint import pretty_print_dict, PrettyPrintConfig

    print('All available config options, and their current values:\n', file=out)
    for entrypoint, cls in sorted(entrypoint_configurables.items()):
        options = build_config(entrypoint, True)
        pretty_print_dict(
            {cls.__name__: {k: json.dumps(v) for k, v in options.items()}},
            config=PrettyPrintConfig(out=out))
        print('', file=out)


def main_dispatch(args=None):
    if args is None:
        args = sys.argv[1:]
    if not args:
        sys.exit("No command given.\n\n" + USAGE)

    cmd, rest = args[0], args[1:]
    if cmd in COMMANDS:
        app = importlib.import_module(COMMANDS[cmd])
        return app.main(rest)
    if cmd == '--version':
        sys.exit(__version__)
    if cmd in ('-h', '--help'):
        sys.exit(USAGE)
    if cmd == '--config':
        print_config_options()
        sys.exit(1)
    sys.exit("Unrecognized command '%s'\n\n%s" % (cmd, USAGE))


if __name__ == "__main__":
    # python -m docdelta
    sys.exit(main_dispatch())
