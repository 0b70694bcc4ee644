"""Logger configuration for lambpy.

The package logger carries a ``NullHandler``: nothing is emitted unless the
application configures logging or calls :func:`setup_logger`.
"""

import logging
import os
import sys

__all__ = ["get_logger", "setup_logger"]

ROOT_NAME = "lambpy"

logging.getLogger(ROOT_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the child logger ``lambpy.<name>``."""
    if name == ROOT_NAME or name.startswith(ROOT_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_NAME}.{name}")


def setup_logger(
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stdout handler to the package logger and return it.

    Args:
        level: Log level name; defaults to ``$LAMBPY_LOG_LEVEL``, then WARNING
        format_string: Custom format string

    Returns:
        The configured ``lambpy`` logger
    """
    level = level or os.getenv("LAMBPY_LOG_LEVEL", "WARNING")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(ROOT_NAME)

    # Only configure if not already configured
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))

    return logger
