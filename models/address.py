"""MAC and IPv4 address parsing.

Both address types are immutable byte containers. The ``is_valid_*`` helpers
never raise; the ``parse_*`` helpers raise InvalidAddressError on bad input.
"""

import re
from dataclasses import dataclass

_MAC_PATTERN = re.compile(r'[0-9A-Fa-f]{2}([:-])[0-9A-Fa-f]{2}(?:\1[0-9A-Fa-f]{2}){4}')
_IPV4_PATTERN = re.compile(r'[0-9]{1,3}(?:\.[0-9]{1,3}){3}')


class InvalidAddressError(ValueError):
    """Raised when a MAC or IPv4 token cannot be parsed."""


@dataclass(frozen=True)
class MacAddress:
    """6-byte physical device identifier."""
    octets: bytes

    def __post_init__(self):
        if len(self.octets) != 6:
            raise InvalidAddressError(f"MAC address needs 6 bytes, got {len(self.octets)}")

    def __str__(self) -> str:
        return ':'.join(f'{b:02X}' for b in self.octets)


@dataclass(frozen=True)
class Ipv4Address:
    """4-byte network address."""
    octets: bytes

    def __post_init__(self):
        if len(self.octets) != 4:
            raise InvalidAddressError(f"IPv4 address needs 4 bytes, got {len(self.octets)}")

    def __str__(self) -> str:
        return '.'.join(str(b) for b in self.octets)


def is_valid_mac(text: str) -> bool:
    """Check for exactly 6 two-digit hex groups joined by ':' or '-'."""
    if not isinstance(text, str):
        return False
    return _MAC_PATTERN.fullmatch(text) is not None


def parse_mac(text: str) -> MacAddress:
    """Parse 'AA:BB:CC:DD:EE:FF' (or hyphen-separated) into a MacAddress.

    Raises:
        InvalidAddressError: If the text is not a valid MAC address
    """
    if not is_valid_mac(text):
        raise InvalidAddressError(f"Invalid MAC address: {text!r}")
    groups = re.split(r'[:-]', text)
    return MacAddress(bytes(int(g, 16) for g in groups))


def is_valid_ipv4(text: str) -> bool:
    """Check for exactly 4 decimal octets in [0, 255] joined by dots."""
    if not isinstance(text, str) or not _IPV4_PATTERN.fullmatch(text):
        return False
    return all(int(part) <= 255 for part in text.split('.'))


def parse_ipv4(text: str) -> Ipv4Address:
    """Parse a dotted-quad string into an Ipv4Address.

    Raises:
        InvalidAddressError: If the text is not a valid IPv4 address
    """
    if not is_valid_ipv4(text):
        raise InvalidAddressError(f"Invalid IPv4 address: {text!r}")
    return Ipv4Address(bytes(int(part) for part in text.split('.')))
