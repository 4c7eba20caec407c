"""Tests for the inventory-backed directory in core/directory.py"""

import pytest

from conftest import GATEWAY_IP, GATEWAY_MAC, RecordingTransport
from core.directory import InventoryDirectory, load_directory
from core.errors import ConfigError
from models.address import parse_ipv4, parse_mac
from models.devices import GatewayDevice, PeripheralDevice


def make_config(**extra):
    config = {
        'gateway': {'ip': GATEWAY_IP, 'mac': GATEWAY_MAC},
        'devices': {
            'Kitchen': 'AA:BB:CC:DD:EE:01',
            'Desk Lamp': 'aa-bb-cc-dd-ee-02',
        },
    }
    config.update(extra)
    return config


class StubDirectory:
    """Importable directory factory used by load_directory tests."""

    def __init__(self, config, transport_factory):
        self.config = config
        self.transport_factory = transport_factory


class TestDiscoverGateway:
    """Gateway comes from the 'gateway' entry."""

    def test_from_config(self):
        directory = InventoryDirectory(make_config(), RecordingTransport)
        gateway = directory.discover_gateway()
        assert isinstance(gateway, GatewayDevice)
        assert gateway.ip_address == parse_ipv4(GATEWAY_IP)
        assert gateway.mac_address == parse_mac(GATEWAY_MAC)

    def test_missing(self):
        directory = InventoryDirectory({'devices': {}}, RecordingTransport)
        assert directory.discover_gateway() is None

    def test_invalid_entry_warns(self, capsys):
        config = make_config(gateway={'ip': '999.1.1.1', 'mac': GATEWAY_MAC})
        directory = InventoryDirectory(config, RecordingTransport)
        assert directory.discover_gateway() is None
        assert 'Ignoring invalid gateway' in capsys.readouterr().err


class TestDiscoverDevices:
    """Bulbs come from the 'devices' entry."""

    def test_all_devices(self):
        directory = InventoryDirectory(make_config(), RecordingTransport)
        gateway = directory.discover_gateway()
        devices = directory.discover_all_devices(gateway)
        assert [d.name for d in devices] == ['Kitchen', 'Desk Lamp']
        assert all(isinstance(d, PeripheralDevice) and d.gateway is gateway for d in devices)

    def test_gateway_entry_returns_gateway_itself(self):
        config = make_config()
        config['devices']['Hall'] = GATEWAY_MAC
        directory = InventoryDirectory(config, RecordingTransport)
        gateway = directory.discover_gateway()
        devices = directory.discover_all_devices(gateway)
        assert gateway in devices
        assert gateway.name is None

    def test_gateway_found_by_inventory_name(self):
        """Name lookup matches the inventory entry without renaming the gateway."""
        config = make_config()
        config['devices']['Hall'] = GATEWAY_MAC
        directory = InventoryDirectory(config, RecordingTransport)
        gateway = directory.discover_gateway()
        assert directory.discover_by_name(gateway, 'hall') is gateway
        assert gateway.name is None
        assert gateway.label == str(gateway.mac_address)

    def test_invalid_mac_skipped(self, capsys):
        config = make_config(devices={'Broken': 'zz', 'Kitchen': 'AA:BB:CC:DD:EE:01'})
        directory = InventoryDirectory(config, RecordingTransport)
        devices = directory.discover_all_devices(directory.discover_gateway())
        assert [d.name for d in devices] == ['Kitchen']
        assert "Skipping 'Broken'" in capsys.readouterr().err

    def test_by_name_case_insensitive(self):
        directory = InventoryDirectory(make_config(), RecordingTransport)
        gateway = directory.discover_gateway()
        device = directory.discover_by_name(gateway, 'desk lamp')
        assert device.mac_address == parse_mac('AA:BB:CC:DD:EE:02')

    def test_by_name_missing(self):
        directory = InventoryDirectory(make_config(), RecordingTransport)
        assert directory.discover_by_name(directory.discover_gateway(), 'Attic') is None


class TestLoadDirectory:
    """Selecting the directory implementation from config."""

    def test_default_is_inventory(self):
        directory = load_directory(make_config(), RecordingTransport)
        assert isinstance(directory, InventoryDirectory)

    def test_import_path(self):
        config = make_config(directory='test_directory:StubDirectory')
        directory = load_directory(config, RecordingTransport)
        assert isinstance(directory, StubDirectory)
        assert directory.transport_factory is RecordingTransport

    def test_bad_import_path(self):
        with pytest.raises(ConfigError):
            load_directory(make_config(directory='no_such_module_xyz:Thing'), RecordingTransport)
