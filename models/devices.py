"""Addressable LIFX devices.

A GatewayDevice owns the physical connection (a Transport) that every
command travels over. PeripheralDevice instances have no connection of
their own and forward each message through their gateway.
"""

from typing import Callable, Protocol

from core.errors import ConnectionReleasedError
from models.address import Ipv4Address, MacAddress
from models.colors import HSBK

MAX_LEVEL = 65535


class Transport(Protocol):
    """Physical connection to a gateway bulb."""

    def send(self, target: MacAddress, message: dict) -> None: ...

    def close(self) -> None: ...


TransportFactory = Callable[['GatewayDevice'], Transport]


def power_message(on: bool, duration_ms: int = 0) -> dict:
    return {'type': 'SetPower', 'level': MAX_LEVEL if on else 0, 'duration': duration_ms}


def color_message(color: HSBK, duration_ms: int = 0) -> dict:
    return {
        'type': 'SetColor',
        'hue': color.hue,
        'saturation': color.saturation,
        'brightness': color.brightness,
        'kelvin': color.kelvin,
        'duration': duration_ms,
    }


class GatewayDevice:
    """The bulb that relays commands to every other bulb on the network."""

    def __init__(self, ip_address: Ipv4Address, mac_address: MacAddress,
                 transport_factory: TransportFactory, name: str | None = None):
        self.ip_address = ip_address
        self.mac_address = mac_address
        self.name = name
        self._transport_factory = transport_factory
        self._transport: Transport | None = None
        self._released = False

    @property
    def label(self) -> str:
        return self.name or str(self.mac_address)

    @property
    def connected(self) -> bool:
        return self._transport is not None and not self._released

    def connect(self) -> Transport:
        """Open the transport on first use and return it.

        Raises:
            ConnectionReleasedError: If disconnect() was already called
        """
        if self._released:
            raise ConnectionReleasedError(f"Connection to gateway {self.ip_address} was already released")
        if self._transport is None:
            self._transport = self._transport_factory(self)
        return self._transport

    def disconnect(self):
        """Release the connection. Safe to call when nothing was opened."""
        if self._released:
            return
        self._released = True
        if self._transport is not None:
            self._transport.close()

    def send(self, target: MacAddress, message: dict):
        self.connect().send(target, message)

    def set_power(self, on: bool, duration_ms: int = 0):
        self.send(self.mac_address, power_message(on, duration_ms))

    def set_color(self, color: HSBK, duration_ms: int = 0):
        self.send(self.mac_address, color_message(color, duration_ms))

    def __repr__(self) -> str:
        return f"GatewayDevice(ip={self.ip_address}, mac={self.mac_address})"


class PeripheralDevice:
    """A bulb addressed through a gateway."""

    def __init__(self, mac_address: MacAddress, gateway: GatewayDevice, name: str | None = None):
        self.mac_address = mac_address
        self.gateway = gateway
        self.name = name

    @property
    def label(self) -> str:
        return self.name or str(self.mac_address)

    def set_power(self, on: bool, duration_ms: int = 0):
        self.gateway.send(self.mac_address, power_message(on, duration_ms))

    def set_color(self, color: HSBK, duration_ms: int = 0):
        self.gateway.send(self.mac_address, color_message(color, duration_ms))

    def __eq__(self, other):
        if not isinstance(other, PeripheralDevice):
            return NotImplemented
        return self.mac_address == other.mac_address and self.gateway is other.gateway

    def __hash__(self):
        return hash(self.mac_address)

    def __repr__(self) -> str:
        return f"PeripheralDevice(mac={self.mac_address}, name={self.name!r})"


Device = GatewayDevice | PeripheralDevice
