# === FILE: contact_scout/logger.py ===
"""Logging setup for ContactScout.

All modules log through the one project logger (``"ContactScout"``)::

    from contact_scout.logger import logger
    logger.info("Crawl started")

Log records go to *stderr*, so the JSON report printed by the CLI on stdout
stays machine-readable.  :func:`configure` swaps the handlers at runtime; the
CLI calls it once with the options given on the command line.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Optional, Union

LOGGER_NAME: Final[str] = "ContactScout"
DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_MAX_LOG_BYTES: Final[int] = 2 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 2

Level = Union[int, str]


def _build_handlers(log_file: Optional[Union[str, Path]], fmt: str) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(path, maxBytes=_MAX_LOG_BYTES, backupCount=_LOG_BACKUPS, encoding="utf-8")
        )
    formatter = logging.Formatter(fmt)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    level: Level = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Replace the project logger's handlers and set its level.

    ``log_file`` adds a size-rotated file next to the stderr output.
    """
    root = logging.getLogger(LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in _build_handlers(log_file, log_format):
        root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    return root


logger: logging.Logger = configure()

__all__ = ["logger", "configure", "LOGGER_NAME", "DEFAULT_FORMAT"]
