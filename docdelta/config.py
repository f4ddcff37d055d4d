# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, Bool, List, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


CONFIG_BASENAME = 'docdelta_config'


class DocdeltaConfigurable(HasTraits):
    """Base of the classes whose traits can be set in docdelta_config.json.

    Each class in the hierarchy is a section of the config file, named
    after the class, holding the traits that class declares.
    """

    def configured_traits(self, cls):
        "Current values of the config traits declared directly on `cls`."
        return {name: getattr(self, name)
                for name in cls.class_own_traits(config=True)}


_config_cache = {}
def config_instance(cls):
    try:
        return _config_cache[cls]
    except KeyError:
        return _config_cache.setdefault(cls, cls())


def config_search_path():
    "Directories searched for config files, highest priority first."
    return [os.getcwd()] + jupyter_config_path()


def load_disk_config(path, include_none=False):
    """Merge the docdelta_config.json files found on `path`.

    Files earlier on the path win over later ones.
    """
    merged = {}
    for directory in reversed(path):
        loader = JSONFileConfigLoader(CONFIG_BASENAME + '.json', path=directory)
        try:
            found = loader.load_config()
        except ConfigFileNotFound:
            continue
        recursive_update(merged, found, include_none)
    return merged


def recursive_update(target, new, include_none):
    """Merge the dict `new` into `target`, descending into nested dicts.

    Unless `include_none` is set, a None value removes the key, and
    nested dicts left empty are removed as well.
    """
    for key, value in new.items():
        if isinstance(value, dict):
            sub = target.setdefault(key, {})
            recursive_update(sub, value, include_none)
            if not sub and not include_none:
                del target[key]
        elif value is None and not include_none:
            target.pop(key, None)
        else:
            target[key] = value


def build_config(entrypoint, include_none=False):
    """Build the effective config for an entrypoint.

    Trait defaults of the entrypoint's configurable class and its bases
    are overridden by any `docdelta_config.json` found in the current
    directory or on the jupyter config path, keyed by class name.
    Sections of subclasses override those of their bases.
    """
    try:
        configurable = entrypoint_configurables[entrypoint]
    except KeyError:
        raise ValueError('No config is defined for entrypoint %r, expected one of %r.' % (
            entrypoint, sorted(entrypoint_configurables)))

    disk_config = load_disk_config(config_search_path(), include_none)

    config = {}
    for cls in reversed(configurable.mro()):
        if not issubclass(cls, DocdeltaConfigurable):
            continue
        defaults = config_instance(cls).configured_traits(cls)
        recursive_update(config, defaults, include_none)
        recursive_update(config, disk_config.get(cls.__name__, {}), include_none)
    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(DocdeltaConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Identity(Global):

    id_keys = List(
        Unicode(),
        default_value=[],
        help="object keys making up the identity of an object, "
             "in order of significance.",
    ).tag(config=True)


class _Formatted(_Identity):

    format = Enum(
        ('text', 'json'),
        'text',
        help="diff format to read or write.",
    ).tag(config=True)


class Diff(_Formatted):

    color = Bool(
        True,
        help="whether to color the diff printed to the terminal.",
    ).tag(config=True)


class Patch(_Formatted):
    pass


class DocDiff(Diff):
    pass


class DocPatch(Patch):
    pass


entrypoint_configurables = {
    'docdiff': DocDiff,
    'docpatch': DocPatch,
}
