# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class DiffFormatError(ValueError):
    pass


class PatchError(ValueError):
    """Base class for failures while applying a diff element.

    `path` is the part of the diff path consumed when the failure
    happened, `values` holds the offending node(s).
    """

    def __init__(self, message, path, values):
        super(PatchError, self).__init__(message)
        self.path = list(path)
        self.values = list(values)


class PathTypeMismatch(PatchError):
    pass


class NonSetDiffEntry(PatchError):
    pass


class PatchConflict(PatchError):
    pass


def init_logging(level=logging.INFO):
    """Sets up logging for docdelta entry points.

    Call this in all entry points (if __name__ == "__main__").
    Sets the log level for all docdelta loggers to `level`,
    unless `level` is given as `None`.
    """
    format = '[%(levelname)1.1s %(module)s:%(lineno)d] %(message)s'
    logging.basicConfig(format=format, level=level)
    logging.captureWarnings(True)


def set_docdelta_log_level(level, set_main=True):
    """Set a log level for docdelta loggers"""
    logger.setLevel(level)
    if set_main:
        _baseLogger = logging.getLogger()
        _baseLogger.setLevel(level)


logger = logging.getLogger('docdelta')

debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
exception = logger.exception
critical = logger.critical
