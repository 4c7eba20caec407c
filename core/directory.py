"""Device discovery.

DeviceDirectory is the seam to LAN discovery. The shipped
InventoryDirectory answers discovery from the devices recorded in the user
config file; a real network implementation can be plugged in through the
'directory' config key.
"""

from typing import Protocol

import click

from core.transport import load_object
from models.address import is_valid_ipv4, is_valid_mac, parse_ipv4, parse_mac
from models.devices import Device, GatewayDevice, PeripheralDevice, TransportFactory
from models.types import LifxConfig


class DeviceDirectory(Protocol):
    """Discovery capability consumed by the dispatcher and resolver."""

    def discover_gateway(self) -> GatewayDevice | None: ...

    def discover_all_devices(self, gateway: GatewayDevice) -> list[Device]: ...

    def discover_by_name(self, gateway: GatewayDevice, name: str) -> Device | None: ...


class InventoryDirectory:
    """Directory backed by the 'gateway' and 'devices' config entries.

    Name lookup is case-insensitive.
    """

    def __init__(self, config: LifxConfig, transport_factory: TransportFactory):
        self.config = config
        self.transport_factory = transport_factory

    def discover_gateway(self) -> GatewayDevice | None:
        entry = self.config.get('gateway')
        if not entry:
            return None

        ip = entry.get('ip', '')
        mac = entry.get('mac', '')
        if not (is_valid_ipv4(ip) and is_valid_mac(mac)):
            click.echo(f"Warning: Ignoring invalid gateway entry {ip!r} {mac!r}", err=True)
            return None
        return GatewayDevice(parse_ipv4(ip), parse_mac(mac), self.transport_factory)

    def known_devices(self) -> dict[str, str]:
        """Inventory entries with a valid MAC address, keyed by name."""
        valid = {}
        for name, mac in self.config.get('devices', {}).items():
            if is_valid_mac(mac):
                valid[name] = mac
            else:
                click.echo(f"Warning: Skipping '{name}' with invalid MAC address {mac!r}", err=True)
        return valid

    def _device_for(self, gateway: GatewayDevice, name: str, mac: str) -> Device:
        mac_address = parse_mac(mac)
        if mac_address == gateway.mac_address:
            return gateway
        return PeripheralDevice(mac_address, gateway, name=name)

    def discover_all_devices(self, gateway: GatewayDevice) -> list[Device]:
        return [self._device_for(gateway, name, mac) for name, mac in self.known_devices().items()]

    def discover_by_name(self, gateway: GatewayDevice, name: str) -> Device | None:
        for entry, mac in self.known_devices().items():
            if entry.lower() == name.lower():
                return self._device_for(gateway, entry, mac)
        return None


def load_directory(config: LifxConfig, transport_factory: TransportFactory) -> DeviceDirectory:
    """Build the configured directory, defaulting to InventoryDirectory.

    The 'directory' config key names a factory called with
    (config, transport_factory).
    """
    path = config.get('directory')
    if not path:
        return InventoryDirectory(config, transport_factory)
    return load_object(path)(config, transport_factory)
