"""Logging setup shared by embedding applications and scripts."""
import logging

from kochbuch.utilities.config import DEBUG, LOG_FORMAT, LOG_LEVEL

logger = logging.getLogger("kochbuch")


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger (idempotent)."""
    chosen = "DEBUG" if DEBUG and level is None else (level or LOG_LEVEL)
    logger.setLevel(getattr(logging, chosen.upper(), logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
