"""Type definitions for the LIFX control CLI.

This module provides TypedDict definitions for the structures stored in the
user config file.
"""

from typing import NamedTuple, TypedDict


class GatewayEntry(TypedDict):
    """Gateway bulb address as stored in config."""
    ip: str
    mac: str


class LifxConfig(TypedDict, total=False):
    """User configuration file contents."""
    gateway: GatewayEntry
    devices: dict[str, str]
    directory: str
    transport: str
    poll_interval: float


class ResolvedTargets(NamedTuple):
    """Result of target resolution.

    Returned by resolve_targets() instead of a bare tuple so callers can
    name the parts.
    """
    devices: list
    command_args: list[str]
