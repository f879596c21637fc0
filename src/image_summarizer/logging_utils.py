"""
Centralized logging for the image summarizer.

Every pipeline stage logs through the shared ``logger`` defined here.
Progress and errors go to stderr, which keeps stdout free for the final
confirmation line printed by the CLI.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(
        name: str = __name__,
        level: int = logging.INFO,
        formatter: logging.Formatter | None = None,
        handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Configure a named logger once and return it.

    Repeated calls for the same name only update the level, so modules
    can call this freely without stacking handlers.

    Args:
        name: Logger name, typically set to __name__.
        level: Logging level (e.g., logging.INFO, logging.DEBUG).
        formatter: Optional custom formatter.
        handler: Optional custom handler; defaults to a stderr stream.

    Returns:
        A configured logger instance.

    """
    logger_instance = logging.getLogger(name)
    logger_instance.setLevel(level)
    if logger_instance.handlers:
        return logger_instance

    handler = handler or logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter or logging.Formatter(LOG_FORMAT))
    logger_instance.addHandler(handler)
    logger_instance.propagate = False
    return logger_instance


def set_verbosity(*, verbose: bool) -> None:
    """Switch the shared logger between INFO and DEBUG output."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


# Shared logger used across modules
logger = setup_logger("image_summarizer")
