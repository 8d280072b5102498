"""Type definitions for port selection."""

from .port import MAX_PORT, MIN_PORT, AddressFamily, Port, Protocol, SearchConfig

__all__ = [
    "MAX_PORT",
    "MIN_PORT",
    "AddressFamily",
    "Port",
    "Protocol",
    "SearchConfig",
]
