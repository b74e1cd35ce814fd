"""Logging setup for todolist.

curses owns the terminal while the editor runs, so nothing is ever logged to
stderr. Records go to a file when one is given and are dropped otherwise.
"""

import logging
from typing import Optional, Union

_root_logger = logging.getLogger("todolist")

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Union[str, int] = "WARNING", file: Optional[str] = None) -> None:
    """Configure the package logger.

    Args:
        level: Log level name (DEBUG, INFO, ...) or int
        file: Optional file path to append log records to

    Raises OSError if the log file cannot be opened; the previous
    configuration is left in place.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    if file:
        handler: logging.Handler = logging.FileHandler(file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        handler.setLevel(level)
    else:
        handler = logging.NullHandler()

    _root_logger.setLevel(level)
    for old in list(_root_logger.handlers):
        _root_logger.removeHandler(old)
        old.close()
    _root_logger.propagate = False
    _root_logger.addHandler(handler)
