from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "cipherlab"

# Library code stays silent unless the application configures logging.
logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a Rich handler (stderr) to the package logger.
    Safe to call repeatedly: previous handlers are replaced, never stacked.
    """
    lvl = getattr(logging, str(level).upper(), None)
    if not isinstance(lvl, int):
        lvl = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(lvl)
    logger.propagate = False
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        level=lvl,
        show_path=False,
        show_time=True,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    return logger
