# -*- coding: utf-8 -*-

import logging

from rich.logging import RichHandler

logger = logging.getLogger("dynamodb_cross_account")

_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def get_log_level(name: str) -> int:
    try:
        return _LEVELS[name.lower()]
    except KeyError:
        raise ValueError(f"invalid log level {name!r}, choose from {list(_LEVELS)}")


def setup_logger(level: str = "info") -> logging.Logger:
    """
    Attach a rich console handler to the package logger. Calling it again
    only changes the level, so a warm Lambda container doesn't stack handlers.
    """
    logger.setLevel(get_log_level(level))
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            show_path=False,
            log_time_format="%y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    logging.getLogger("botocore").setLevel(logging.WARNING)
    return logger
