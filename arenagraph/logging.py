"""Logger setup shared by every arenagraph module.

Modules call ``get_logger(__name__)`` and never attach handlers themselves.
Records from ``arenagraph.*`` loggers flow to one handler installed on the
``"arenagraph"`` logger, which also propagates to the Python root logger so
pytest's ``caplog`` and host applications still see them.

Only the flow solver logs, and only at DEBUG: one record when a solve starts
and one with the augmentation count when it finishes. Traversals are silent.

Example:
    >>> from arenagraph.logging import debug_logging
    >>> with debug_logging():
    ...     pass  # solver calls here emit DEBUG records
"""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

ROOT_LOGGER_NAME = "arenagraph"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler owned by this module; None until setup_root_logger() installs one
_package_handler: Optional[logging.Handler] = None


def _package_logger() -> logging.Logger:
    return logging.getLogger(ROOT_LOGGER_NAME)


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the package handler on the ``"arenagraph"`` logger.

    Runs once on import with the defaults. Later calls change nothing until
    :func:`reset_logging` removes the installed handler, which is how tests
    swap in a capturing handler or a custom format.

    Args:
        level: Level for the package logger.
        format_string: Formatter pattern; ``DEFAULT_FORMAT`` when omitted.
        handler: Handler to install; a stderr ``StreamHandler`` when omitted.
    """
    global _package_handler

    if _package_handler is not None:
        return

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    package = _package_logger()
    package.handlers.clear()
    package.addHandler(handler)
    package.setLevel(level)
    package.propagate = True

    _package_handler = handler


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name`` that defers its level to the package logger."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the package logger and its handlers.

    Child loggers carry ``NOTSET``, so they pick the new level up at once,
    including loggers created afterwards.
    """
    setup_root_logger()
    package = _package_logger()
    package.setLevel(level)
    for handler in package.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


@contextmanager
def debug_logging() -> Iterator[logging.Logger]:
    """Run a block with DEBUG enabled, then restore the previous level.

    Yields:
        The package logger.
    """
    setup_root_logger()
    package = _package_logger()
    previous = package.level
    set_global_log_level(logging.DEBUG)
    try:
        yield package
    finally:
        set_global_log_level(previous)


def reset_logging() -> None:
    """Remove the installed handler and clear the package level."""
    global _package_handler
    _package_handler = None

    package = _package_logger()
    package.handlers.clear()
    package.setLevel(logging.NOTSET)


setup_root_logger()
