"""Logging setup shared by every Oriento module."""

import logging
import sys
from typing import Optional, Union

from oriento.utils.config import log_level

_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Return a logger writing to stdout with the service's standard format.

    Parameters
    ----------
    name : str
        Typically ``__name__`` of the calling module.
    level : int | str | None
        Explicit level. When omitted, the ``LOG_LEVEL`` setting applies
        (environment variable or ``logging.level`` in config.yaml).

    Returns
    -------
    logging.Logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(level if level is not None else log_level())
    return logger
