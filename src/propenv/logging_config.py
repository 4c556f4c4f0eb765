"""Logging configuration for the propenv package."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging() -> None:
    """Set up logging configuration based on environment variables.

    Env vars:
        PROPENV_LOG_LEVEL: Log level (e.g., DEBUG, INFO, WARNING) (default: disabled)
        PROPENV_LOG_FILE: Log file path (default: stderr only)

    Calling it again only adjusts the level; handlers are attached once.
    """
    log_level_str = os.getenv("PROPENV_LOG_LEVEL")

    if not log_level_str:
        return  # logging disabled unless explicitly set

    log_level = logging.getLevelName(log_level_str.upper())
    if not isinstance(log_level, int):
        print(f"Invalid log level: {log_level_str}. Logging will be disabled.", file=sys.stderr)
        return

    logger = logging.getLogger("propenv")
    logger.setLevel(log_level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        rich_handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_level=True,
            show_path=True,
            rich_tracebacks=True,
        )
        logger.addHandler(rich_handler)

    log_file_str = os.getenv("PROPENV_LOG_FILE")
    if log_file_str:
        log_file = Path(log_file_str)
        if log_file.is_dir():
            raise ValueError(f"Log file path {log_file} is a directory, not a file.")

        target = os.path.abspath(log_file)
        if any(isinstance(h, logging.FileHandler) and h.baseFilename == target for h in logger.handlers):
            return

        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger that stays silent unless ``setup_logging`` configured one."""
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
