"""Core modules for port selection."""

from .probe import probe_bind
from .selector import (
    is_free,
    is_free_on_protocol,
    is_free_tcp,
    is_free_udp,
    random_free_port,
    random_free_port_on_protocol,
    random_free_tcp_port,
    random_free_udp_port,
    select_free_port,
    select_from_given_port,
)
from .utils.logging import setup_port_selector_logging

__all__ = [
    "is_free",
    "is_free_on_protocol",
    "is_free_tcp",
    "is_free_udp",
    "probe_bind",
    "random_free_port",
    "random_free_port_on_protocol",
    "random_free_tcp_port",
    "random_free_udp_port",
    "select_free_port",
    "select_from_given_port",
    "setup_port_selector_logging",
]
