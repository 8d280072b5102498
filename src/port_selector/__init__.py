"""Port Selector - find ports that are unused on TCP, UDP, IPv4 and IPv6.

Example usage:
    # CLI
    port-selector random
    port-selector select --range 50000 60000 --tcp-only

    # Python API
    from port_selector import SearchConfig, is_free, select_free_port
    port = select_free_port(SearchConfig(range_low=50000, range_high=60000))
"""

from port_selector.core import (
    is_free,
    is_free_on_protocol,
    is_free_tcp,
    is_free_udp,
    probe_bind,
    random_free_port,
    random_free_port_on_protocol,
    random_free_tcp_port,
    random_free_udp_port,
    select_free_port,
    select_from_given_port,
)
from port_selector.core.utils import logger, setup_port_selector_logging
from port_selector.types import MAX_PORT, MIN_PORT, AddressFamily, Port, Protocol, SearchConfig

__version__ = "0.1.0"

__all__ = [
    "MAX_PORT",
    "MIN_PORT",
    "AddressFamily",
    "Port",
    "Protocol",
    "SearchConfig",
    "is_free",
    "is_free_on_protocol",
    "is_free_tcp",
    "is_free_udp",
    "logger",
    "probe_bind",
    "random_free_port",
    "random_free_port_on_protocol",
    "random_free_tcp_port",
    "random_free_udp_port",
    "select_free_port",
    "select_from_given_port",
    "setup_port_selector_logging",
]
