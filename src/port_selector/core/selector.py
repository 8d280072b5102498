"""Free-port checks and selection policies built on the bind probe.

A port is free on a protocol only when the wildcard bind succeeds on both
IPv6 and IPv4, and free overall only when that holds for TCP and UDP.
Every check binds and releases real sockets, so a result is only valid at
the moment it is computed: another process may claim the port before the
caller binds it.
"""

from __future__ import annotations

import logging
import random

from port_selector.core.probe import probe_bind
from port_selector.types.port import MAX_PORT, AddressFamily, Protocol, SearchConfig

logger = logging.getLogger(__name__)

# IPv6 first: on dual-stack hosts its wildcard also covers IPv4
_PROBE_FAMILIES = (AddressFamily.IPV6, AddressFamily.IPV4)


def is_free_on_protocol(protocol: Protocol, port: int) -> bool:
    """Check whether ``port`` is unused on ``protocol`` for both address families.

    Port 0 and values outside the 16-bit range are never free.
    """
    if not 0 < port <= MAX_PORT:
        return False
    return all(probe_bind(protocol, family, port) is not None for family in _PROBE_FAMILIES)


def is_free(port: int) -> bool:
    """Check whether ``port`` is unused on both TCP and UDP."""
    return is_free_on_protocol(Protocol.STREAM, port) and is_free_on_protocol(Protocol.DATAGRAM, port)


def is_free_tcp(port: int) -> bool:
    """Check whether ``port`` is unused on TCP."""
    return is_free_on_protocol(Protocol.STREAM, port)


def is_free_udp(port: int) -> bool:
    """Check whether ``port`` is unused on UDP."""
    return is_free_on_protocol(Protocol.DATAGRAM, port)


def random_free_port_on_protocol(protocol: Protocol) -> int | None:
    """Let the OS assign an ephemeral port on ``protocol``.

    Binds port 0 on the IPv6 wildcard, falling back to IPv4 when IPv6 is
    unavailable. The returned port is not verified against the other family.

    Returns:
        The OS-assigned port, or None if neither family could be bound.
    """
    for family in _PROBE_FAMILIES:
        port = probe_bind(protocol, family, 0)
        if port is not None:
            return port
    return None


def random_free_tcp_port() -> int | None:
    """Let the OS assign an ephemeral TCP port."""
    return random_free_port_on_protocol(Protocol.STREAM)


def random_free_udp_port() -> int | None:
    """Let the OS assign an ephemeral UDP port."""
    return random_free_port_on_protocol(Protocol.DATAGRAM)


def random_free_port() -> int | None:
    """Get an OS-assigned port that is free on both TCP and UDP.

    Asks the OS for a TCP port and keeps it only if the same number is also
    free on UDP for both address families; otherwise asks again.

    This loop has no retry limit and no backoff. It blocks until the OS hands
    out a suitable port, so callers that need a bound must run it under their
    own timeout.

    Returns:
        A port for which ``is_free`` held when it was checked.
    """
    while True:
        port = random_free_port_on_protocol(Protocol.STREAM)
        if port is not None and is_free_on_protocol(Protocol.DATAGRAM, port):
            return port
        logger.debug(f"Discarding OS-assigned port {port}: not free on UDP")


def select_from_given_port(start_port: int) -> int | None:
    """Return the first port at or above ``start_port`` that is free on TCP and UDP.

    Ports are tested one by one in increasing order. The scan never wraps
    around: once it passes 65535 without finding a free port it gives up.
    Scanning a crowded region can take a long time; the scan itself imposes
    no time limit.

    Args:
        start_port: First port to test.

    Returns:
        The smallest free port >= start_port, or None if none is left below 65536.
    """
    for port in range(max(start_port, 0), MAX_PORT + 1):
        if is_free(port):
            return port
    logger.debug(f"No free port between {start_port} and {MAX_PORT}")
    return None


def select_free_port(config: SearchConfig | None = None) -> int | None:
    """Pick a random port matching ``config``.

    Draws up to ``config.max_attempts`` independent uniform candidates from
    ``[config.range_low, config.range_high)`` and returns the first one that is
    free on every protocol the config checks. Repeated calls with the same
    config may return different ports.

    Args:
        config: Search constraints. Defaults to ``SearchConfig()``.

    Returns:
        A matching port, or None when no protocol is checked or every draw was in use.
    """
    if config is None:
        config = SearchConfig()

    protocols = config.protocols
    if not protocols:
        logger.debug("Neither TCP nor UDP requested, no port can match")
        return None

    for _ in range(config.max_attempts):
        port = random.randrange(config.range_low, config.range_high)
        if all(is_free_on_protocol(protocol, port) for protocol in protocols):
            return port

    # Give up
    logger.debug(
        f"No free port found in [{config.range_low}, {config.range_high}) after {config.max_attempts} attempts"
    )
    return None


__all__ = [
    "is_free",
    "is_free_on_protocol",
    "is_free_tcp",
    "is_free_udp",
    "random_free_port",
    "random_free_port_on_protocol",
    "random_free_tcp_port",
    "random_free_udp_port",
    "select_free_port",
    "select_from_given_port",
]
