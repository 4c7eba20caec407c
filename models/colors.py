"""Colour values for LIFX bulbs.

LIFX describes a colour as HSBK: hue, saturation and brightness as 16-bit
values, plus a white-point temperature in kelvin.
"""

import colorsys
from typing import NamedTuple

DEFAULT_KELVIN = 3500


class HSBK(NamedTuple):
    hue: int
    saturation: int
    brightness: int
    kelvin: int = DEFAULT_KELVIN


def from_degrees(hue: float, saturation: float, brightness: float, kelvin: int = DEFAULT_KELVIN) -> HSBK:
    """Build an HSBK from hue in degrees and saturation/brightness in percent."""
    if not 0 <= hue <= 360:
        raise ValueError(f"Hue must be 0-360, got {hue}")
    if not 0 <= saturation <= 100 or not 0 <= brightness <= 100:
        raise ValueError("Saturation and brightness must be 0-100")
    return HSBK(
        hue=round(hue % 360 / 360 * 65535),
        saturation=round(saturation / 100 * 65535),
        brightness=round(brightness / 100 * 65535),
        kelvin=kelvin,
    )


NAMED_COLORS = {
    'red': from_degrees(0, 100, 100),
    'orange': from_degrees(36, 100, 100),
    'yellow': from_degrees(60, 100, 100),
    'green': from_degrees(120, 100, 100),
    'cyan': from_degrees(180, 100, 100),
    'blue': from_degrees(240, 100, 100),
    'purple': from_degrees(280, 100, 100),
    'pink': from_degrees(325, 100, 100),
    'white': HSBK(0, 0, 65535, 5500),
    'warm': HSBK(0, 0, 65535, 2700),
}


def from_hex(text: str) -> HSBK:
    """Convert '#rrggbb' to HSBK."""
    value = text.lstrip('#')
    if len(value) != 6:
        raise ValueError(f"Hex colour must look like #rrggbb, got {text!r}")
    try:
        r, g, b = (int(value[i:i + 2], 16) / 255 for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Invalid hex colour: {text!r}") from None
    h, s, v = colorsys.rgb_to_hsv(r, g, b)
    return from_degrees(h * 360, s * 100, v * 100)


def parse_color(tokens: list[str]) -> HSBK:
    """Parse a colour from command arguments.

    Accepts a colour name ("red"), a hex value ("#ff5500"), or three numbers
    "HUE SATURATION BRIGHTNESS" (0-360, 0-100, 0-100).

    Raises:
        ValueError: If the tokens do not describe a colour
    """
    if not tokens:
        raise ValueError("No colour given")
    if len(tokens) not in (1, 3):
        raise ValueError(f"Expected a colour name or HUE SATURATION BRIGHTNESS, got: {' '.join(tokens)}")

    if len(tokens) == 3:
        try:
            hue, sat, bri = (float(t) for t in tokens)
        except ValueError:
            raise ValueError(f"Invalid HSB values: {' '.join(tokens)}") from None
        return from_degrees(hue, sat, bri)

    name = tokens[0].lower()
    if name in NAMED_COLORS:
        return NAMED_COLORS[name]
    if name.startswith('#'):
        return from_hex(name)
    raise ValueError(f"Unknown colour: {tokens[0]}")


def rainbow(steps: int, brightness: int = 65535) -> list[HSBK]:
    """Evenly spaced fully saturated hues."""
    return [HSBK(round(i * 65535 / steps), 65535, brightness, DEFAULT_KELVIN) for i in range(steps)]
