"""
Control commands for direct manipulation of bulbs.

Includes power and colour control.
"""

import click

from commands.base import bulb_command
from models.colors import parse_color


@bulb_command('power')
def power_command(devices, args, out, interrupts) -> bool:
    """Turn bulbs ON or OFF.

    \b
    Examples:
      lifx-control power all on
      lifx-control power Kitchen off
      lifx-control power -gw 192.168.1.50 D0:73:D5:00:00:01 gateway on
    """
    if len(args) != 1 or args[0].lower() not in ('on', 'off'):
        click.echo("Error: Specify 'on' or 'off'.", file=out)
        return False

    on = args[0].lower() == 'on'
    if not devices:
        click.echo("No bulbs found.", file=out)
        return True

    status = "ON" if on else "OFF"
    for device in devices:
        device.set_power(on)
        click.echo(f"✓ {device.label} turned {status}", file=out)
    return True


@bulb_command('color')
def color_command(devices, args, out, interrupts) -> bool:
    """Set the colour of bulbs.

    The colour is a name (red, orange, yellow, green, cyan, blue, purple,
    pink, white, warm), a hex value, or HUE SATURATION BRIGHTNESS
    (0-360, 0-100, 0-100).

    \b
    Examples:
      lifx-control color all blue
      lifx-control color Kitchen '#ff5500'
      lifx-control color gateway 120 100 50
    """
    try:
        color = parse_color(args)
    except ValueError as e:
        click.echo(f"Error: {e}", file=out)
        return False

    if not devices:
        click.echo("No bulbs found.", file=out)
        return True

    for device in devices:
        device.set_color(color)
        click.echo(f"✓ {device.label} colour updated", file=out)
    return True
