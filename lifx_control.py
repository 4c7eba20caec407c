#!/usr/bin/env python3
"""
LIFX Control CLI
Switch LIFX bulbs on and off, set colours and run effects over the LAN.
"""

import click

# Import commands from command modules
from commands.setup import ColouredGroup, help_command, setup_command
from commands.control import power_command, color_command
from commands.effects import blink_command, rainbow_command
from commands.inventory import (
    devices_command,
    register_command,
    forget_command,
    set_gateway_command
)


@click.group(
    cls=ColouredGroup,
    context_settings={
        'help_option_names': ['-h', '--help'],
        'max_content_width': 999  # Very wide to prevent wrapping on wide terminals
    }
)
@click.version_option(version='0.1.0', prog_name='LIFX Control')
def cli():
    """LIFX Control CLI - Control LIFX bulbs through a gateway bulb.

Bulb commands take a target after the command name:
'all', 'gateway', a MAC address, or a registered bulb name.
Prefix the target with '-gw <ip> <mac>' to skip gateway discovery.

Use 'help' for a quick reference of all commands.
Use 'COMMAND -h' or 'COMMAND --help' for detailed help on a specific command."""
    pass


# Register setup and help commands
cli.add_command(help_command)
cli.add_command(setup_command, name='setup')

# Register bulb control commands
cli.add_command(power_command, name='power')
cli.add_command(color_command, name='color')

# Register effect commands
cli.add_command(blink_command, name='blink')
cli.add_command(rainbow_command, name='rainbow')

# Register inventory commands
cli.add_command(devices_command, name='devices')
cli.add_command(register_command, name='register')
cli.add_command(forget_command, name='forget')
cli.add_command(set_gateway_command, name='set-gateway')


if __name__ == '__main__':
    cli()
