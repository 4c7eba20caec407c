"""
Inventory commands for the gateway and named bulbs.

These edit the 'gateway' and 'devices' entries of the user config file,
which the default directory uses for discovery.
"""

import click

from core.config import get_config_file, load_config, save_config
from core.errors import ConfigError
from models.address import is_valid_ipv4, is_valid_mac, parse_ipv4, parse_mac


def _load_or_exit(ctx):
    try:
        return load_config()
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


@click.command()
@click.pass_context
def devices_command(ctx):
    """List the gateway and all named bulbs."""
    config = _load_or_exit(ctx)
    gateway = config.get('gateway')
    devices = config.get('devices', {})

    if gateway:
        click.secho("Gateway:", fg='cyan', bold=True)
        click.echo(f"  {gateway.get('ip')}  {gateway.get('mac')}")
    else:
        click.secho("No gateway configured.", fg='yellow')

    if not devices:
        click.echo("\nNo named bulbs. Use 'register <name> <mac>' to add one.")
        return

    click.secho(f"\nBulbs ({len(devices)}):", fg='cyan', bold=True)
    width = max(len(name) for name in devices)
    for name in sorted(devices, key=str.lower):
        click.echo(f"  {name.ljust(width)}  {devices[name]}")


@click.command()
@click.argument('name')
@click.argument('mac')
@click.pass_context
def register_command(ctx, name: str, mac: str):
    """Give the bulb with MAC address a NAME.

    \b
    Examples:
      lifx-control register Kitchen D0:73:D5:00:00:02
    """
    if not is_valid_mac(mac):
        click.echo(f"Error: '{mac}' is not a valid MAC address.", err=True)
        ctx.exit(1)
    if name.lower() in ('all', 'gateway'):
        click.echo(f"Error: '{name}' is reserved as a target keyword.", err=True)
        ctx.exit(1)

    config = _load_or_exit(ctx)
    devices = config.setdefault('devices', {})
    # Replace a differently-cased entry for the same name
    for existing in [n for n in devices if n.lower() == name.lower()]:
        del devices[existing]
    devices[name] = str(parse_mac(mac))
    save_config(config)
    click.echo(f"✓ Registered {name} ({devices[name]})")


@click.command()
@click.argument('name')
@click.pass_context
def forget_command(ctx, name: str):
    """Remove a named bulb from the inventory."""
    config = _load_or_exit(ctx)
    devices = config.get('devices', {})
    matches = [n for n in devices if n.lower() == name.lower()]
    if not matches:
        click.echo(f"Error: No bulb named '{name}'.", err=True)
        ctx.exit(1)

    for match in matches:
        del devices[match]
    save_config(config)
    click.echo(f"✓ Forgot {name}")


@click.command()
@click.argument('ip')
@click.argument('mac')
@click.pass_context
def set_gateway_command(ctx, ip: str, mac: str):
    """Record the gateway bulb used when no -gw override is given.

    \b
    Examples:
      lifx-control set-gateway 192.168.1.50 D0:73:D5:00:00:01
    """
    if not is_valid_ipv4(ip):
        click.echo(f"Error: '{ip}' is not a valid IPv4 address.", err=True)
        ctx.exit(1)
    if not is_valid_mac(mac):
        click.echo(f"Error: '{mac}' is not a valid MAC address.", err=True)
        ctx.exit(1)

    config = _load_or_exit(ctx)
    config['gateway'] = {'ip': str(parse_ipv4(ip)), 'mac': str(parse_mac(mac))}
    save_config(config)
    click.echo(f"✓ Gateway set to {ip} ({config['gateway']['mac']})")
    click.echo(f"Saved to {get_config_file()}")
