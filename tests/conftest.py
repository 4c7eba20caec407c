"""Pytest configuration and fixtures for LIFX control tests."""

import pytest
from pathlib import Path

from models.address import parse_ipv4, parse_mac
from models.devices import GatewayDevice

GATEWAY_IP = '192.168.1.50'
GATEWAY_MAC = 'D0:73:D5:00:00:01'


class RecordingTransport:
    """Transport that records messages and counts closes."""

    instances = []

    def __init__(self, gateway):
        self.gateway = gateway
        self.sent = []
        self.close_count = 0
        RecordingTransport.instances.append(self)

    def send(self, target, message):
        self.sent.append((str(target), message))

    def close(self):
        self.close_count += 1


class CountingGateway(GatewayDevice):
    """Gateway that counts disconnect() calls."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.disconnect_count = 0

    def disconnect(self):
        self.disconnect_count += 1
        super().disconnect()


class FakeDirectory:
    """In-memory directory recording every call."""

    def __init__(self, gateway=None, devices=None, error=None):
        self.gateway = gateway
        self.devices = devices if devices is not None else []
        self.error = error
        self.calls = []

    def discover_gateway(self):
        self.calls.append(('discover_gateway',))
        return self.gateway

    def discover_all_devices(self, gateway):
        self.calls.append(('discover_all_devices', gateway))
        if self.error:
            raise self.error
        return list(self.devices)

    def discover_by_name(self, gateway, name):
        self.calls.append(('discover_by_name', gateway, name))
        if self.error:
            raise self.error
        for device in self.devices:
            if device.name and device.name.lower() == name.lower():
                return device
        return None


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point LIFX_CONTROL_CONFIG at a temporary file (not created)."""
    path = tmp_path / 'lifx' / 'config.json'
    monkeypatch.setenv('LIFX_CONTROL_CONFIG', str(path))
    return path


@pytest.fixture
def gateway():
    """A counting gateway backed by a RecordingTransport."""
    return CountingGateway(parse_ipv4(GATEWAY_IP), parse_mac(GATEWAY_MAC), RecordingTransport)
