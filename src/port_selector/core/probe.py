"""Transient bind-and-release probe used to test port occupancy.

A probe binds a socket on the wildcard address of one address family,
reads back the bound port and closes the socket before returning. It is
the single primitive the selection policies are built on.
"""

from __future__ import annotations

import logging
import os
import socket

from port_selector.types.port import AddressFamily, Protocol

logger = logging.getLogger(__name__)

# SO_REUSEADDR on Windows lets a second socket steal a live port
_REUSE_STREAM_ADDR = os.name != "nt"


def probe_bind(protocol: Protocol, family: AddressFamily, port: int) -> int | None:
    """Try to bind ``port`` on the wildcard address and release it immediately.

    Stream probes behave like a regular listener: they set SO_REUSEADDR
    (POSIX only) and listen, so a port left in TIME_WAIT still counts as free
    while a live listener does not.

    Args:
        protocol: Transport protocol to probe.
        family: Address family whose wildcard address is bound.
        port: Port to bind, or 0 to let the OS pick an ephemeral port.

    Returns:
        The bound port on success, None on any failure (port in use,
        permission denied, unsupported family, invalid port).
    """
    try:
        with socket.socket(family.socket_family, protocol.socket_type) as sock:
            if protocol is Protocol.STREAM and _REUSE_STREAM_ADDR:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((family.wildcard_address, port))
            if protocol is Protocol.STREAM:
                sock.listen(1)
            return sock.getsockname()[1]
    except (OSError, OverflowError) as e:
        logger.debug(f"Probe failed for {protocol}/{family} port {port}: {e}")
        return None


__all__ = ["probe_bind"]
