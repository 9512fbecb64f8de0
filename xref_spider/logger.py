# === FILE: xref_spider/logger.py ===
"""Logging setup for **XrefSpider**.

All records go through the ``XrefSpider`` logger; each spider logs through a
child of it (``XrefSpider.aws``, ``XrefSpider.unity``) so a crawl's output says
which site a line belongs to::

    from xref_spider.logger import get_logger
    log = get_logger("unity")
    log.info("Crawling %s", url)

Console output goes to stderr because ``xref-spider crawl -`` writes the xref
map itself to stdout.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "XrefSpider"

# rotation of the optional log file
MAX_LOG_BYTES: Final[int] = 5 * 1024 * 1024
LOG_BACKUPS: Final[int] = 3

LevelT = Union[int, str]


def _handlers(log_file: Optional[Union[str, Path]], fmt: str) -> list[logging.Handler]:
    formatter = logging.Formatter(fmt)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(str(log_file), maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8")
        )
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure(
    *,
    level: LevelT = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_FORMAT,
    replace_handlers: bool = True,
) -> logging.Logger:
    """(Re)configure the ``XrefSpider`` logger.

    Parameters
    ----------
    level
        Numeric or textual level, e.g. ``"DEBUG"`` to see unrecognized pages.
    log_file
        Optional log file, rotated at :data:`MAX_LOG_BYTES`.
    log_format
        Format string shared by every handler.
    replace_handlers
        Close and drop the current handlers first.
    """
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    if replace_handlers:
        for old in list(root.handlers):
            root.removeHandler(old)
            old.close()
    for handler in _handlers(log_file, log_format):
        root.addHandler(handler)
    root.propagate = False
    return root


def init_logging(
    level: LevelT = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Entry point used by the CLI."""
    return configure(level=level, log_file=log_file, log_format=log_format)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """The project logger, or its child *name*."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}" if name else LOGGER_NAME)


logger: logging.Logger = init_logging()

__all__ = ["logger", "configure", "init_logging", "get_logger", "LOGGER_NAME", "DEFAULT_FORMAT"]
