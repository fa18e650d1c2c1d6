"""Structured logger setup shared across the Lambda."""

import logging
import os

from pythonjsonlogger import jsonlogger


def _level_from_environment() -> int:
    """Read LOG_LEVEL; unknown names fall back to INFO."""
    name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Configure a JSON logger once and reuse it.

    Records go to stderr and carry the full source path and line number so
    errors can be traced back from CloudWatch without a stack dump.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter(
        "%(levelname)s %(name)s %(message)s %(asctime)s %(pathname)s %(lineno)d"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(_level_from_environment())
    logger.propagate = False
    return logger
