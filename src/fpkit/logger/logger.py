"""Package-wide logger for fpkit.

Every module logs through the ``fpkit`` logger defined here. Library code only
emits DEBUG records (curry construction, skipped arity checks); raise the
level with ``FPKIT_LOG_LEVEL=DEBUG`` to see them.
"""

import logging
import sys

from fpkit.core.config import settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "fpkit",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stdout handler to the named logger and return it.

    A logger that already has handlers is returned as is, so importing modules
    repeatedly never stacks handlers.

    Args:
        name: Logger name; children of ``fpkit`` share its prefix.
        level: Level name. Defaults to ``settings.LOG_LEVEL``.
        format_string: ``logging.Formatter`` format for the handler.

    Returns:
        The configured logger.
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    # records stop here instead of reaching the root handlers
    logger.propagate = False

    return logger


logger = setup_logger()
