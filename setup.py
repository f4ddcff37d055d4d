#!/usr/bin/env python
# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.
from setuptools import setup, find_packages
import pathlib
import re

HERE = pathlib.Path(__file__).parent.absolute()

DOCDELTA_PATH = HERE / "docdelta"


def get_version(path):
    with open(path) as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)


VERSION = get_version(DOCDELTA_PATH / '_version.py')


if __name__ == '__main__':
    setup(
      name="docdelta",
      version=VERSION,
      description="Structural diff and patch of JSON documents",
      license="BSD-3-Clause",
      python_requires=">=3.8",
      packages=find_packages(include=["docdelta", "docdelta.*"]),
      package_data={
          "docdelta": ["diff_format.schema.json"],
          "docdelta.tests": ["files/*.json", "files/*.diff"],
      },
      install_requires=[
          "colorama",
          "jsonschema",
          "jupyter_core",
          "traitlets>=5",
      ],
      extras_require={
          "test": [
              "pytest>=6.0",
          ],
      },
      entry_points={
          "console_scripts": [
              "docdelta = docdelta.__main__:main_dispatch",
              "docdiff = docdelta.diffapp:main",
              "docpatch = docdelta.patchapp:main",
          ],
      },
    )
