"""Bulb command dispatch.

CommandDispatcher takes the raw argument list of a bulb command,

    COMMAND [-gw IPV4 MAC] TARGET [ARGS...]

establishes the gateway (from the override or by discovery), resolves the
target, runs the command's per-device operation and always releases the
gateway connection afterwards.
"""

from typing import Callable, TextIO

import click

from core.config import DEFAULT_POLL_INTERVAL
from core.errors import GatewayUnreachableError
from core.interrupt import InterruptController
from core.resolver import resolve_targets
from models.address import is_valid_ipv4, is_valid_mac, parse_ipv4, parse_mac
from models.devices import Device, GatewayDevice, TransportFactory

GATEWAY_OPTION = '-gw'

# operation(devices, command_args, out, interrupts) -> success
BulbOperation = Callable[[list[Device], list[str], TextIO, InterruptController], bool]


def parse_gateway_override(args: list[str], transport_factory: TransportFactory) -> tuple[GatewayDevice | None, list[str]]:
    """Split '-gw IPV4 MAC' off args[1:4] if present and valid.

    Invalid addresses are not an error; the override is ignored and the
    tokens are left in place.

    Returns:
        (gateway or None, remaining args)
    """
    if len(args) >= 4 and args[1] == GATEWAY_OPTION and is_valid_ipv4(args[2]) and is_valid_mac(args[3]):
        gateway = GatewayDevice(parse_ipv4(args[2]), parse_mac(args[3]), transport_factory)
        return gateway, [args[0]] + list(args[4:])
    return None, list(args)


class CommandDispatcher:
    """Runs bulb operations against resolved targets."""

    def __init__(self, directory, transport_factory: TransportFactory,
                 poll_interval: float = DEFAULT_POLL_INTERVAL):
        self.directory = directory
        self.transport_factory = transport_factory
        self.poll_interval = poll_interval

    def execute(self, args: list[str], operation: BulbOperation, out: TextIO | None = None) -> bool:
        """Run operation for the command line in args.

        Args:
            args: Command name followed by its raw tokens
            operation: Per-device operation of the command
            out: Sink for user-facing text (default: stdout)

        Returns:
            False if args are too short, otherwise the operation's result

        Raises:
            GatewayUnreachableError: If no gateway could be discovered
            ResolutionError: If the target can't be resolved
        """
        if out is None:
            out = click.get_text_stream('stdout')
        if len(args) < 2:
            return False

        gateway, args = parse_gateway_override(args, self.transport_factory)
        if len(args) < 2:
            return False

        if gateway is None:
            gateway = self.directory.discover_gateway()
        if gateway is None:
            click.echo("Could not discover a gateway bulb!", file=out)
            raise GatewayUnreachableError("Could not discover a gateway bulb")

        interrupts = InterruptController(poll_interval=self.poll_interval)
        try:
            targets = resolve_targets(gateway, args[1:], self.directory)
            return operation(targets.devices, targets.command_args, out, interrupts)
        finally:
            interrupts.shutdown()
            gateway.disconnect()
