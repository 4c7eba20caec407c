"""Gateway transports and import-path loading.

The LIFX wire protocol lives outside this project. A transport is any
object with send(target, message) and close(); the config key 'transport'
names a factory as 'package.module:attribute'. Without one, EchoTransport
prints what would be sent.
"""

import importlib

import click

from core.errors import ConfigError
from models.address import MacAddress
from models.types import LifxConfig


class EchoTransport:
    """Writes each outgoing message to stderr instead of the network."""

    def __init__(self, gateway):
        self.gateway = gateway
        self.sent: list[tuple[MacAddress, dict]] = []
        self.closed = False

    def send(self, target: MacAddress, message: dict):
        self.sent.append((target, message))
        fields = ' '.join(f"{k}={v}" for k, v in message.items() if k != 'type')
        click.echo(f"[gateway {self.gateway.ip_address}] -> {target} {message['type']} {fields}".rstrip(), err=True)

    def close(self):
        self.closed = True


def load_object(path: str):
    """Import 'package.module:attribute' and return the attribute.

    Raises:
        ConfigError: If the path is malformed or can't be imported
    """
    module_name, sep, attr = path.partition(':')
    if not sep or not module_name or not attr:
        raise ConfigError(f"Import path must look like 'module:attribute', got {path!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import {module_name}: {e}") from e

    obj = module
    for part in attr.split('.'):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ConfigError(f"{module_name} has no attribute {attr}") from None
    return obj


def load_transport_factory(config: LifxConfig):
    """Return the configured transport factory, or EchoTransport."""
    path = config.get('transport')
    if not path:
        return EchoTransport
    return load_object(path)
