"""
Debug tracing and logging configuration.

Tracing is opt-in through the ``DEBUG`` environment variable (or the CLI's
``--debug`` option). ``DEBUG=true`` traces every function; any other value is
read as a list of function names, e.g. ``DEBUG=is_empty,lc``.
"""

import logging
import os
import re
from typing import Optional

from rich.logging import RichHandler

from .output import err_console

LOGGER_NAME = "adaptive"

_filter_override: Optional[str] = None


def set_debug_filter(value: Optional[str]):
    """Override the DEBUG environment variable for this process.

    Passing None restores the environment variable as the source.
    """
    global _filter_override
    _filter_override = value


def get_debug_filter() -> str:
    """Return the active trace filter."""
    if _filter_override is not None:
        return _filter_override
    return os.environ.get("DEBUG", "")


def is_traced(tag: str, debug_filter: Optional[str] = None) -> bool:
    """Check whether traces for ``tag`` are selected by the filter.

    Args:
        tag: Function name the trace belongs to
        debug_filter: Filter to test against (default: the active filter)

    Returns:
        True if the trace should be emitted
    """
    value = get_debug_filter() if debug_filter is None else debug_filter
    value = value.strip().lower()
    if not value:
        return False
    if value == "true":
        return True
    names = [name for name in re.split(r"[^a-z0-9_]+", value) if name]
    return tag.lower() in names


def setup_logging(level: Optional[int] = None, quiet: bool = False) -> logging.Logger:
    """Set up the package logger.

    Args:
        level: Logging level (default: DEBUG if a trace filter is set, else WARNING)
        quiet: If True, attach no console handler

    Returns:
        Configured logger
    """
    if level is None:
        level = logging.DEBUG if get_debug_filter() else logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    if quiet:
        logger.addHandler(logging.NullHandler())
    else:
        handler = RichHandler(
            console=err_console.rich,
            show_time=False,
            show_path=False,
            markup=False,
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger under the package namespace, configuring it on first use."""
    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    parent = logging.getLogger(LOGGER_NAME)
    if not parent.handlers:
        setup_logging()

    return logging.getLogger(name)


def debug(tag: str, message: str):
    """Emit a trace for ``tag`` when the debug filter selects it."""
    if not is_traced(tag):
        return

    logger = get_logger()
    if not logger.isEnabledFor(logging.DEBUG):
        logger.setLevel(logging.DEBUG)
        for handler in logger.handlers:
            handler.setLevel(logging.DEBUG)
    logger.debug("%s() → %s", tag, message)
