"""Data models."""

from .config import ConnectionConfig, DisplayConfig, Settings
from .container import (
    Container,
    NetworkInterface,
    ProxmoxResponse,
    RawContainer,
    first_usable_address,
)
from .node import HostStatus, RawNodeStatus, RawNodeVersion, UsageStat

__all__ = [
    "ConnectionConfig",
    "Container",
    "DisplayConfig",
    "HostStatus",
    "NetworkInterface",
    "ProxmoxResponse",
    "RawContainer",
    "RawNodeStatus",
    "RawNodeVersion",
    "Settings",
    "UsageStat",
    "first_usable_address",
]
