"""Logging setup for the appconfigr command line.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed here, once, by the CLI.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
PACKAGE_LOGGER = "appconfigr"


class _StderrHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Stream handler that always writes to the current ``sys.stderr``."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)

    @property
    def stream(self):  # type: ignore[no-untyped-def]
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:  # type: ignore[no-untyped-def]
        pass


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the package logger for command line use.

    Safe to call more than once; the handler is only installed the first time.

    Args:
        verbose: Log debug output (file resolution, resolver fallbacks)
        quiet: Only log errors. Ignored when verbose is set.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name``."""
    return logging.getLogger(name)
