"""Logging setup for the ``erdkit`` logger namespace."""

import logging
import sys
from pathlib import Path
from typing import Optional
from .settings import get_settings

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_string: str = DEFAULT_FORMAT,
) -> None:
    """
    Attach console (stderr) and optional file handlers to the erdkit logger.

    Args:
        level: Logging level name; defaults to Settings.log_level
        log_file: Extra log file; defaults to Settings.log_file
        format_string: Format used by every handler
    """
    settings = get_settings()
    log_level = getattr(logging, (level or settings.log_level).upper())
    log_file = log_file or settings.log_file

    # stderr keeps rendered output on stdout clean
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logger = logging.getLogger("erdkit")
    logger.setLevel(log_level)
    logger.handlers.clear()
    formatter = logging.Formatter(format_string)
    for handler in handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the erdkit namespace (pass ``__name__``)."""
    if name.startswith("erdkit"):
        return logging.getLogger(name)
    return logging.getLogger(f"erdkit.{name}")
