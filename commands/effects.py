"""
Effect commands that keep running until stopped.

Effects loop over their steps and check the invocation's
InterruptController between steps, so ENTER or a timer ends them cleanly.
"""

import itertools
import math

import click

from commands.base import bulb_command
from models.colors import rainbow
from models.utils import pluralise

BLINK_DEFAULT_TIMES = 3
BLINK_MAX_TIMES = 1000
BLINK_HALF_PERIOD = 0.5
RAINBOW_STEPS = 12
RAINBOW_STEP_SECONDS = 1.0
RAINBOW_MAX_SECONDS = 24 * 60 * 60


def _parse_number(args, index, kind, default, limit):
    if len(args) <= index:
        return default
    try:
        value = kind(args[index])
    except ValueError:
        return None
    if not math.isfinite(value) or not 0 <= value <= limit:
        return None
    return value


@bulb_command('blink')
def blink_command(devices, args, out, interrupts) -> bool:
    """Blink bulbs off and on a number of times (default 3).

    \b
    Examples:
      lifx-control blink Kitchen
      lifx-control blink all 10
    """
    times = _parse_number(args, 0, int, BLINK_DEFAULT_TIMES, BLINK_MAX_TIMES)
    if times is None:
        click.echo(f"Error: TIMES must be a whole number from 0 to {BLINK_MAX_TIMES}.", file=out)
        return False

    for _ in range(times):
        if interrupts.is_cancelled():
            break
        for device in devices:
            device.set_power(False)
        interrupts.sleep(BLINK_HALF_PERIOD)
        for device in devices:
            device.set_power(True)
        if interrupts.sleep(BLINK_HALF_PERIOD):
            break

    click.echo(f"✓ Blinked {pluralise(len(devices), 'bulb')}", file=out)
    return True


@bulb_command('rainbow')
def rainbow_command(devices, args, out, interrupts) -> bool:
    """Cycle bulbs through the colour wheel.

    Without SECONDS the effect runs until ENTER is pressed.

    \b
    Examples:
      lifx-control rainbow all
      lifx-control rainbow Kitchen 30
    """
    seconds = _parse_number(args, 0, float, None, RAINBOW_MAX_SECONDS)
    if args and seconds is None:
        click.echo(f"Error: SECONDS must be a number from 0 to {RAINBOW_MAX_SECONDS}.", file=out)
        return False

    if seconds is None:
        click.echo("Press [ENTER] to stop", file=out)
        interrupts.start_key_listener()
    else:
        interrupts.start_timer(seconds)

    step_ms = int(RAINBOW_STEP_SECONDS * 1000)
    steps = 0
    for color in itertools.cycle(rainbow(RAINBOW_STEPS)):
        if interrupts.is_cancelled():
            break
        for device in devices:
            device.set_color(color, duration_ms=step_ms)
        steps += 1
        if interrupts.sleep(RAINBOW_STEP_SECONDS):
            break

    click.echo(f"✓ Rainbow stopped after {pluralise(steps, 'step')}", file=out)
    return True
