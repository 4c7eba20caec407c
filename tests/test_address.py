"""Tests for MAC and IPv4 parsing in models/address.py"""

import pytest
from models.address import (
    InvalidAddressError,
    Ipv4Address,
    MacAddress,
    is_valid_ipv4,
    is_valid_mac,
    parse_ipv4,
    parse_mac
)


class TestMacValidation:
    """Tests for is_valid_mac."""

    @pytest.mark.parametrize('text', [
        'AA:BB:CC:DD:EE:FF',
        'aa:bb:cc:dd:ee:ff',
        'AA-BB-CC-DD-EE-FF',
        '00:11:22:33:44:55',
    ])
    def test_valid(self, text):
        assert is_valid_mac(text) is True

    @pytest.mark.parametrize('text', [
        '',
        'AA:BB:CC:DD:EE',
        'AA:BB:CC:DD:EE:FF:00',
        'AA:BB:CC:DD:EE:GG',
        'AA:BB-CC:DD:EE:FF',
        'AABBCCDDEEFF',
        'A:BB:CC:DD:EE:FF',
        'AAA:BB:CC:DD:EE:FF',
        'AA.BB.CC.DD.EE.FF',
        'AA:BB:CC:DD:EE:FF\n',
        'Kitchen',
        'all',
    ])
    def test_invalid(self, text):
        assert is_valid_mac(text) is False

    def test_non_string(self):
        """Non-string input is invalid rather than an error."""
        assert is_valid_mac(None) is False


class TestParseMac:
    """Tests for parse_mac."""

    def test_colon_separated(self):
        mac = parse_mac('AA:BB:CC:DD:EE:FF')
        assert mac.octets == bytes([0xAA, 0xBB, 0xCC, 0xDD, 0xEE, 0xFF])

    def test_hyphen_and_colon_equal(self):
        """Separator and case don't affect equality."""
        assert parse_mac('aa-bb-cc-dd-ee-ff') == parse_mac('AA:BB:CC:DD:EE:FF')

    def test_str_renders_upper_colon(self):
        assert str(parse_mac('d0-73-d5-00-00-01')) == 'D0:73:D5:00:00:01'

    def test_invalid_raises(self):
        with pytest.raises(InvalidAddressError):
            parse_mac('AA:BB:CC')

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            parse_mac('not-a-mac')

    def test_trailing_newline_rejected(self):
        with pytest.raises(InvalidAddressError):
            parse_mac('D0:73:D5:00:00:01\n')

    def test_wrong_byte_count_rejected(self):
        with pytest.raises(InvalidAddressError):
            MacAddress(b'\x00\x01')

    def test_hashable(self):
        assert len({parse_mac('AA:BB:CC:DD:EE:FF'), parse_mac('aa:bb:cc:dd:ee:ff')}) == 1


class TestIpv4:
    """Tests for is_valid_ipv4 and parse_ipv4."""

    @pytest.mark.parametrize('text', ['192.168.1.50', '0.0.0.0', '255.255.255.255', '10.0.0.1'])
    def test_valid(self, text):
        assert is_valid_ipv4(text) is True

    @pytest.mark.parametrize('text', [
        '',
        '192.168.1',
        '192.168.1.50.1',
        '256.1.1.1',
        '1.1.1.-1',
        '1.1.1.a',
        '1..1.1',
        '1.1.1.1 ',
        '1234.1.1.1',
        '192.168.1.50\n',
        '\u0661\u0669\u0662.168.1.1',
        'gateway',
    ])
    def test_invalid(self, text):
        assert is_valid_ipv4(text) is False

    def test_parse(self):
        ip = parse_ipv4('192.168.1.50')
        assert ip.octets == bytes([192, 168, 1, 50])
        assert str(ip) == '192.168.1.50'

    def test_parse_invalid_raises(self):
        with pytest.raises(InvalidAddressError):
            parse_ipv4('300.1.1.1')

    def test_non_ascii_digits_rejected(self):
        """Only ASCII digits form an octet."""
        with pytest.raises(InvalidAddressError):
            parse_ipv4('\u0661\u0669\u0662.168.1.1')

    def test_wrong_byte_count_rejected(self):
        with pytest.raises(InvalidAddressError):
            Ipv4Address(b'\x01\x02\x03')
