"""Port-related type definitions for port selection."""

from __future__ import annotations

import socket
from enum import StrEnum
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from port_selector._internal.config import PortSelectorSettings

MIN_PORT = 0
MAX_PORT = 65535

Port = Annotated[int, Field(ge=MIN_PORT, le=MAX_PORT)]
"""A 16-bit port number. 0 asks the OS for an ephemeral port and is never returned as an answer."""


class Protocol(StrEnum):
    """Transport protocol a port is checked on."""

    STREAM = "tcp"
    DATAGRAM = "udp"

    @property
    def socket_type(self) -> socket.SocketKind:
        """Socket type used to probe this protocol."""
        if self is Protocol.STREAM:
            return socket.SOCK_STREAM
        return socket.SOCK_DGRAM


class AddressFamily(StrEnum):
    """IP address family a port is probed on."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"

    @property
    def socket_family(self) -> socket.AddressFamily:
        """Socket family constant for this address family."""
        if self is AddressFamily.IPV4:
            return socket.AF_INET
        return socket.AF_INET6

    @property
    def wildcard_address(self) -> str:
        """The "any interface" bind address for this family."""
        if self is AddressFamily.IPV4:
            return "0.0.0.0"
        return "::"


class SearchConfig(BaseModel):
    """Constraints for a randomized free-port search.

    Attributes:
        check_stream: Require the port to be free on TCP.
        check_datagram: Require the port to be free on UDP.
        range_low: Lowest port that may be drawn (inclusive).
        range_high: Upper bound of the draw (exclusive).
        max_attempts: Number of random draws before giving up.
    """

    model_config = ConfigDict(frozen=True)

    check_stream: bool = Field(default=True, description="Require the port to be free on TCP")
    check_datagram: bool = Field(default=True, description="Require the port to be free on UDP")
    range_low: Port = Field(default=MIN_PORT, description="Lowest port that may be drawn (inclusive)")
    range_high: Port = Field(default=MAX_PORT, description="Upper bound of the draw (exclusive)")
    max_attempts: int = Field(default=100, ge=0, description="Number of random draws before giving up")

    @model_validator(mode="after")
    def validate_range(self) -> SearchConfig:
        """Ensure the half-open range [range_low, range_high) is not empty."""
        if self.range_low >= self.range_high:
            raise ValueError(f"range_low ({self.range_low}) must be lower than range_high ({self.range_high})")
        return self

    @property
    def protocols(self) -> tuple[Protocol, ...]:
        """Protocols a candidate must be free on, in probing order."""
        protocols: list[Protocol] = []
        if self.check_stream:
            protocols.append(Protocol.STREAM)
        if self.check_datagram:
            protocols.append(Protocol.DATAGRAM)
        return tuple(protocols)

    @classmethod
    def from_settings(cls, settings: PortSelectorSettings | None = None, **overrides) -> SearchConfig:
        """Build a search config from settings, letting keyword arguments win.

        Args:
            settings: Settings to read defaults from. Defaults to the cached environment settings.
            **overrides: Field values that take precedence over settings.

        Returns:
            A validated SearchConfig.
        """
        if settings is None:
            from port_selector._internal.config import get_settings

            settings = get_settings()

        values = {
            "range_low": settings.range_low,
            "range_high": settings.range_high,
            "max_attempts": settings.max_attempts,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls.model_validate(values)


__all__ = [
    "MAX_PORT",
    "MIN_PORT",
    "AddressFamily",
    "Port",
    "Protocol",
    "SearchConfig",
]
