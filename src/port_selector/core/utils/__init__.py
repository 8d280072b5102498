from .logging import logger, setup_port_selector_logging

__all__ = [
    "logger",
    "setup_port_selector_logging",
]
