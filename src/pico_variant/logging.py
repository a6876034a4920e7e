"""Logging utilities for pico-variant.

All pico-variant loggers live under the ``pico_variant`` namespace.  Use
``get_logger()`` to obtain a namespaced logger and ``configure_logging()``
to set the level and handler for the whole library.  Nothing is configured
on import; embedding platforms decide where selection logs go.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "pico_variant"

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
"""str: Default log format used by ``configure_logging``."""


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the pico_variant namespace.

    Args:
        name: Logger name. Prefixed with 'pico_variant' when missing.

    Returns:
        The namespaced Logger instance.
    """
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int = logging.INFO, handler: Optional[logging.Handler] = None) -> None:
    """Configure logging for the pico_variant library.

    Calling it more than once only updates the level; a second handler is
    never attached.

    Args:
        level: Logging level (default: INFO)
        handler: Custom handler. If None, uses StreamHandler to stderr.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    if not root_logger.handlers:
        if handler is None:
            handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root_logger.addHandler(handler)
