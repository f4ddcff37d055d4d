# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io
import json
import logging
import os

from jsonschema import Draft4Validator
from pytest import fixture, skip

from docdelta.config import _config_cache
from docdelta.diff_format import SCHEMA_PATH
from docdelta.log import logger


here = os.path.dirname(os.path.abspath(__file__))


@fixture
def slow(request):
    """Mark a test as slow, these are skipped with --quick."""
    if request.config.getoption('--quick', default=False):
        skip('--quick given, not running slow test')


@fixture(scope='session')
def filespath():
    return os.path.join(here, "files")


@fixture
def reset_log():
    # LogLevelAction installs root handlers and sets the docdelta level
    root = logging.getLogger()
    handlers, level = root.handlers[:], logger.level
    root.handlers[:] = []
    yield
    root.handlers[:] = handlers
    logger.setLevel(level)


@fixture
def reset_config():
    # Configurable instances are cached between parser runs
    _config_cache.clear()
    yield
    _config_cache.clear()


@fixture(scope='session')
def json_schema_diff():
    with io.open(SCHEMA_PATH, encoding="utf8") as f:
        return json.load(f)


@fixture
def diff_validator(json_schema_diff):
    return Draft4Validator(json_schema_diff)
