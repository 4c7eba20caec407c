"""Target resolution.

Maps the first argument after the command name (and any gateway override)
to the devices a command acts on:

    all        every device the directory finds through the gateway
    gateway    the gateway bulb itself
    <mac>      a peripheral bulb with that MAC (no lookup)
    <name>     the device the directory finds under that name
"""

from typing import TYPE_CHECKING

from core.errors import DeviceNotFoundError, ResolutionError
from models.address import is_valid_mac, parse_mac
from models.devices import GatewayDevice, PeripheralDevice
from models.types import ResolvedTargets

if TYPE_CHECKING:
    from core.directory import DeviceDirectory

ALL_KEYWORD = 'all'
GATEWAY_KEYWORD = 'gateway'


def resolve_targets(gateway: GatewayDevice, tokens: list[str],
                    directory: 'DeviceDirectory') -> ResolvedTargets:
    """Resolve the target specifier in tokens[0].

    Args:
        gateway: Gateway the devices are reached through
        tokens: Target specifier followed by command-specific arguments
        directory: Discovery used for 'all' and name lookups

    Returns:
        ResolvedTargets with the devices and tokens[1:] unchanged

    Raises:
        DeviceNotFoundError: If a name lookup finds nothing
        ResolutionError: If there is no target or enumeration fails
    """
    if not tokens:
        raise ResolutionError("No target given (expected 'all', 'gateway', a MAC address or a bulb name)")

    target = tokens[0]
    command_args = list(tokens[1:])

    if target.lower() == ALL_KEYWORD:
        try:
            devices = list(directory.discover_all_devices(gateway))
        except OSError as e:
            raise ResolutionError(f"Failed to discover bulbs: {e}") from e
        return ResolvedTargets(devices, command_args)

    if target.lower() == GATEWAY_KEYWORD:
        return ResolvedTargets([gateway], command_args)

    if is_valid_mac(target):
        return ResolvedTargets([PeripheralDevice(parse_mac(target), gateway)], command_args)

    try:
        device = directory.discover_by_name(gateway, target)
    except OSError as e:
        raise ResolutionError(f"Failed to look up bulb '{target}': {e}") from e
    if device is None:
        raise DeviceNotFoundError(target)
    return ResolvedTargets([device], command_args)
