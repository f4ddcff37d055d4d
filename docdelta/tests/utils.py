# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from contextlib import contextmanager

import pytest

from docdelta import patch, diff, to_node
from docdelta.diff_format import is_valid_diff


def check_diff_and_patch(a, b, id_keys=()):
    "Check that patch(a, diff(a,b)) reproduces b."
    d = diff(a, b, id_keys=id_keys)
    assert is_valid_diff(d)
    # Fresh trees, as patch modifies its input
    assert patch(to_node(a, id_keys), d) == to_node(b, id_keys)


def check_symmetric_diff_and_patch(a, b, id_keys=()):
    "Check that patch(a, diff(a,b)) reproduces b and vice versa."
    check_diff_and_patch(a, b, id_keys)
    check_diff_and_patch(b, a, id_keys)


def paths(d):
    return [e.path for e in d]


@contextmanager
def assert_clean_exit():
    """Assert that SystemExit is called with code=0"""
    with pytest.raises(SystemExit) as e:
        yield
    assert e.value.code == 0
