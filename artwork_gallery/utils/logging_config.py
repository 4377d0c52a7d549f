"""Logging setup for the gallery: one rotating log file plus console output."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from artwork_gallery.config import LOG_DIR

LOGGER_NAME = "artwork_gallery"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(log_dir: Optional[Path] = None, console_level: int = logging.INFO) -> logging.Logger:
    """Attach file and console handlers to the ``artwork_gallery`` logger.

    Page loads, stale discards and selection edits are logged at DEBUG and
    only reach the file; fetch failures and count changes also reach the
    console. Safe to call again on a Streamlit rerun.
    """
    log_dir = log_dir or LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = RotatingFileHandler(
        log_dir / f"{LOGGER_NAME}.log", maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the ``artwork_gallery.<name>`` logger used by a module."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
