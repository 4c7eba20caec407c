"""Exception hierarchy for LIFX control.

The core raises these; the click layer decides how to present them.
"""


class LifxControlError(Exception):
    """Base class for all expected failures."""


class ConfigError(LifxControlError):
    """Config file or a configured import path could not be used."""


class ResolutionError(LifxControlError):
    """Target devices could not be determined."""


class DeviceNotFoundError(ResolutionError):
    """No device with the requested name is reachable through the gateway."""

    def __init__(self, name: str):
        super().__init__(f"Bulb not found: {name}")
        self.name = name


class GatewayUnreachableError(LifxControlError):
    """No gateway bulb responded to discovery."""


class ConnectionReleasedError(LifxControlError):
    """A gateway was used after its connection was released."""
