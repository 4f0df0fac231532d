"""Logging setup for the HTTP service."""

from __future__ import annotations
import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach one stream handler to the package logger; safe to call twice."""
    logger = logging.getLogger("wallframe")
    logger.setLevel(level)
    if not any(getattr(h, "_wallframe", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._wallframe = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
