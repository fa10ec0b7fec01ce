"""Logging setup for the findr command line."""

import logging

from rich.logging import RichHandler

from findr.utils.formatting import err_console


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the ``findr`` package logger.

    Installs a single RichHandler on stderr. Calling this again
    replaces the handler instead of stacking another one.

    Args:
        verbose: Log traversal details at DEBUG level when True.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("findr")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(RichHandler(console=err_console, show_time=False))
    return logger
