"""Internal utilities for port_selector package."""

from __future__ import annotations

from .config import PortSelectorSettings, get_settings

__all__ = ["PortSelectorSettings", "get_settings"]
