"""
Setup and help commands for the LIFX control CLI.

Contains custom Click group class for coloured help output and typo suggestions.
"""

from dataclasses import dataclass

import click
from core.config import get_config_file, load_config
from core.errors import ConfigError
from core.transport import load_transport_factory
from core.directory import load_directory
from models.utils import find_similar_strings, pluralise


@dataclass(frozen=True)
class CommandSection:
    """Represents a section in the help command."""
    name: str
    commands: list[tuple[str, str]]


class ColouredGroup(click.Group):
    """Custom Group class that adds colour to help output and suggests similar commands."""

    def resolve_command(self, ctx, args):
        """Resolve command with suggestions for typos."""
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            if 'No such command' in str(e):
                cmd_name = args[0] if args else ''
                suggestions = self._get_suggestions(ctx, cmd_name)

                if suggestions:
                    error_msg = f"No such command '{cmd_name}'.\n\n"
                    error_msg += click.style("Did you mean one of these?\n", fg='yellow')
                    for suggestion in suggestions:
                        error_msg += click.style(f"  • {suggestion}\n", fg='green')
                    raise click.UsageError(error_msg, ctx=ctx)
            raise

    def _get_suggestions(self, ctx, cmd_name, max_suggestions=3):
        """Get command suggestions based on similarity."""
        if not cmd_name:
            return []
        visible = [name for name in self.list_commands(ctx) if not self.get_command(ctx, name).hidden]
        return find_similar_strings(cmd_name, visible, limit=max_suggestions)

    def format_usage(self, ctx, formatter):
        """Format the usage line with colour."""
        formatter.write_paragraph()
        formatter.write_text(
            click.style('Usage: ', fg='cyan', bold=True) +
            click.style(f'{ctx.command_path} [OPTIONS] COMMAND [ARGS]...', fg='white')
        )

    def format_commands(self, ctx, formatter):
        """Format commands with colour."""
        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands.append((subcommand, cmd.get_short_help_str(limit=500)))

        if commands:
            formatter.write_paragraph()
            formatter.write_text(click.style('Commands:', fg='yellow', bold=True))

            max_len = max(max(len(name) for name, _ in commands), 12)
            with formatter.indentation():
                for subcommand, help_text in commands:
                    formatter.write_text(
                        click.style(subcommand.ljust(max_len), fg='green') + '  ' +
                        click.style(help_text, fg='white', dim=True)
                    )


COMMAND_SECTIONS = [
    CommandSection(
        name="BULB CONTROL",
        commands=[
            ("power <target> on|off", "Switch bulbs on or off"),
            ("color <target> <colour>", "Set colour (name, #rrggbb or H S B)"),
        ]
    ),
    CommandSection(
        name="EFFECTS",
        commands=[
            ("blink <target> [times]", "Blink bulbs a number of times"),
            ("rainbow <target>", "Cycle colours until ENTER is pressed"),
            ("rainbow <target> <seconds>", "Cycle colours for a fixed time"),
        ]
    ),
    CommandSection(
        name="INVENTORY",
        commands=[
            ("devices", "List the gateway and named bulbs"),
            ("register <name> <mac>", "Give a bulb a name"),
            ("forget <name>", "Remove a named bulb"),
            ("set-gateway <ip> <mac>", "Record the gateway bulb"),
            ("setup", "Show configuration status"),
        ]
    ),
]

TARGETS = [
    ("all", "Every bulb reachable through the gateway"),
    ("gateway", "The gateway bulb itself"),
    ("<mac>", "One bulb by MAC address (AA:BB:CC:DD:EE:FF)"),
    ("<name>", "One bulb by name (case-insensitive)"),
    ("-gw <ip> <mac> <target>", "Use this gateway instead of discovery"),
]


def _print_rows(rows, colour):
    for left, desc in rows:
        click.echo("  ", nl=False)
        click.secho(left, fg=colour, nl=False)
        click.echo(" " * (30 - len(left)) + "  " + desc)
    click.echo()


@click.command(name='help')
def help_command():
    """Display help and common commands."""
    click.secho("\nLIFX Control - Quick Reference", fg='cyan', bold=True)
    click.echo()

    for section in COMMAND_SECTIONS:
        click.secho(section.name, fg='yellow', bold=True)
        _print_rows(section.commands, 'green')

    click.secho("TARGETS", fg='yellow', bold=True)
    _print_rows(TARGETS, 'cyan')

    click.secho("For detailed help on any command:", fg='cyan')
    click.echo(f"  lifx-control {click.style('<command> -h', fg='white', bold=True)}")
    click.echo()


@click.command()
@click.pass_context
def setup_command(ctx):
    """Show configuration file, gateway and inventory status."""
    config_file = get_config_file()
    click.secho("\nConfiguration", fg='cyan', bold=True)
    click.echo(f"  File: {config_file}" + ("" if config_file.exists() else " (not created yet)"))

    try:
        config = load_config()
        directory = load_directory(config, load_transport_factory(config))
    except ConfigError as e:
        click.secho(f"✗ {e}", fg='red')
        ctx.exit(1)

    click.echo(f"  Directory: {config.get('directory', 'inventory (config file)')}")
    click.echo(f"  Transport: {config.get('transport', 'echo (prints messages)')}")

    gateway = directory.discover_gateway()
    if gateway:
        click.secho(f"✓ Gateway {gateway.ip_address} ({gateway.mac_address})", fg='green')
    else:
        click.secho("✗ No gateway configured", fg='red')
        click.echo("  Run 'set-gateway <ip> <mac>' or pass -gw <ip> <mac> to bulb commands.")

    click.echo(f"  Inventory: {pluralise(len(config.get('devices', {})), 'named bulb')}")
    click.echo()
