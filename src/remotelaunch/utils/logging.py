"""Logging setup utilities for remotelaunch.

Configures the operational log for the whole application based on the
logging configuration settings.
"""

from __future__ import annotations

import logging
import sys

from remotelaunch.config.settings import LoggingConfig


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Configure logging for the remotelaunch application.

    Sets up the ``remotelaunch`` logger with the specified level, format,
    and optional file handler.

    Args:
        config: Logging configuration. If None, uses defaults
                (INFO level, stderr output).
    """
    if config is None:
        config = LoggingConfig()

    root_logger = logging.getLogger("remotelaunch")
    root_logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))

    # Replace handlers from any earlier call
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(config.format)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler (optional)
    if config.file:
        file_handler = logging.FileHandler(config.file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging initialized at %s level", config.level)
