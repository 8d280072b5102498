"""Pytest configuration for all tests."""

import logging
from collections.abc import Generator

import pytest
from helpers.take_up import PortTaker

from port_selector import AddressFamily, Protocol, logger, probe_bind
from port_selector._internal.config import get_settings


def _ipv6_available() -> bool:
    return probe_bind(Protocol.STREAM, AddressFamily.IPV6, 0) is not None


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "dual_stack: marks tests that need IPv4 and IPv6 sockets")


def pytest_collection_modifyitems(config, items):
    """Skip dual-stack tests on hosts without IPv6 sockets."""
    if _ipv6_available():
        return
    skip_dual_stack = pytest.mark.skip(reason="IPv6 sockets are not available on this host")
    for item in items:
        if "dual_stack" in item.keywords:
            item.add_marker(skip_dual_stack)


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None]:
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None]:
    """Drop handlers installed by a test so they never outlive its captured streams."""
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def occupy() -> Generator[PortTaker]:
    """Occupy ports for the duration of a test.

    Yields:
        PortTaker whose ports are all released at teardown.
    """
    taker = PortTaker()
    yield taker
    taker.stop_all()
