# Copyright (c) 2013-2026 NASK. All rights reserved.

import logging


TOPLEVEL_BEGOOD_LOGGER_NAME = 'begood'


def get_logger(name):
    """
    Get the logger of the given (dotted, module-like) name.

    Each *begood* module that logs obtains its module-level logger
    with `LOGGER = get_logger(__name__)`; all such loggers are
    descendants of the top-level *begood* logger (see:
    `install_null_handler()`).

    >>> get_logger('begood.decoders') is logging.getLogger('begood.decoders')
    True
    """
    return logging.getLogger(name)


def install_null_handler(logger_name=TOPLEVEL_BEGOOD_LOGGER_NAME):
    """
    Make the given library logger silent unless the application
    configures logging (called in `begood/__init__.py`).
    """
    logger = logging.getLogger(logger_name)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger
