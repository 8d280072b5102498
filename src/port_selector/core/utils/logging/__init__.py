"""Logging utilities for port_selector package."""

import logging
import sys

# Package logger; modules log through children of it
logger = logging.getLogger("port_selector")


def setup_port_selector_logging(level: int = logging.INFO) -> None:
    """
    Setup logging with a clean format for the port_selector package.

    Args:
        level: Logging level (default: INFO)
    """
    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    # Keep stdout free for the selected port
    logging_handler = logging.StreamHandler(sys.stderr)
    logging_formatter = logging.Formatter("[port-selector] [%(levelname)s] %(message)s")

    logging_handler.setFormatter(logging_formatter)
    logger.addHandler(logging_handler)
    logger.setLevel(level)
    logger.propagate = False  # Don't propagate to root logger


__all__ = [
    "logger",
    "setup_port_selector_logging",
]
