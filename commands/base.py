"""
Shared plumbing for bulb commands.

Every bulb command takes raw tokens ([-gw IP MAC] TARGET [ARGS...]) and
hands them to the CommandDispatcher together with its per-device
operation. This module turns the dispatcher's results and errors into
CLI output and exit codes.
"""

import inspect

import click

from core.config import get_poll_interval, load_config
from core.directory import InventoryDirectory, load_directory
from core.dispatcher import BulbOperation, CommandDispatcher
from core.errors import DeviceNotFoundError, GatewayUnreachableError, LifxControlError
from core.transport import load_transport_factory
from models.utils import find_similar_strings

BULB_COMMAND_SETTINGS = {'ignore_unknown_options': True}


def build_dispatcher(config: dict) -> CommandDispatcher:
    """Create a dispatcher from config (directory, transport, poll interval)."""
    transport_factory = load_transport_factory(config)
    directory = load_directory(config, transport_factory)
    return CommandDispatcher(directory, transport_factory, poll_interval=get_poll_interval(config))


def _suggest_names(dispatcher: CommandDispatcher, name: str):
    if not isinstance(dispatcher.directory, InventoryDirectory):
        return
    suggestions = find_similar_strings(name, list(dispatcher.directory.known_devices()), limit=3)
    if suggestions:
        click.secho("Did you mean one of these?", fg='yellow', err=True)
        for suggestion in suggestions:
            click.secho(f"  • {suggestion}", fg='green', err=True)


def run_bulb_command(ctx: click.Context, tokens: tuple[str, ...], operation: BulbOperation):
    """Dispatch a bulb command and exit with a matching status.

    Exit codes:
        0  success, or no gateway could be found
        1  bad arguments, unknown bulb, or operation failure
    """
    try:
        dispatcher = build_dispatcher(load_config())
    except LifxControlError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        ok = dispatcher.execute([ctx.info_name, *tokens], operation)
    except GatewayUnreachableError:
        click.echo("Run 'set-gateway <ip> <mac>' or pass -gw <ip> <mac>.", err=True)
        ctx.exit(0)
    except DeviceNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        _suggest_names(dispatcher, e.name)
        ctx.exit(1)
    except LifxControlError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    if not ok:
        click.echo(ctx.get_usage(), err=True)
        ctx.exit(1)


def bulb_command(name: str):
    """Decorator turning an operation into a click bulb command.

    The decorated function is the per-device operation; its docstring
    becomes the command help.
    """
    def decorator(operation: BulbOperation) -> click.Command:
        @click.command(name=name, help=inspect.cleandoc(operation.__doc__ or ""), context_settings=BULB_COMMAND_SETTINGS)
        @click.argument('tokens', nargs=-1, type=click.UNPROCESSED, metavar='[-gw IP MAC] TARGET [ARGS]...')
        @click.pass_context
        def command(ctx, tokens):
            run_bulb_command(ctx, tokens, operation)

        command.operation = operation
        return command

    return decorator
