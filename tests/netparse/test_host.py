"""Tests the host module."""

from __future__ import annotations

import argparse
from typing import Self
from unittest import TestCase

from netparse.address import IPv4Address, SocketAddress
from netparse.errors import (
    InvalidOctetError,
    InvalidPortError,
    ParseError,
    TooManyComponentsError,
    TooManySeparatorsError,
)
from netparse.host import parse_host, parse_port


class TestParseHost(TestCase):
    """Tests the parse_host function."""

    def test_address_and_port(self: Self) -> None:
        """Test an address with a port."""
        self.assertEqual(
            parse_host("1.2.3.4:5678"), SocketAddress(IPv4Address(1, 2, 3, 4), 5678)
        )

    def test_no_port(self: Self) -> None:
        """Test that the port defaults to zero."""
        result = parse_host("1.2.3.4")
        self.assertEqual(result.address, IPv4Address(1, 2, 3, 4))
        self.assertEqual(result.port, 0)

    def test_short_address(self: Self) -> None:
        """Test that the address part is padded like parse_ip does."""
        self.assertEqual(
            parse_host("127.1:80"), SocketAddress(IPv4Address(127, 0, 0, 1), 80)
        )
        self.assertEqual(
            parse_host("1.2.3:65535"), SocketAddress(IPv4Address(1, 0, 2, 3), 65535)
        )

    def test_bad_address(self: Self) -> None:
        """Test that a bad address is reported unchanged."""
        with self.assertRaises(InvalidOctetError):
            parse_host("asdf:5678")
        with self.assertRaises(TooManyComponentsError):
            parse_host("1.2.3.4.5:5678")

    def test_address_overflow(self: Self) -> None:
        """Test that an out-of-range octet is reported."""
        with self.assertRaises(InvalidOctetError):
            parse_host("365.1.2.3:5678")

    def test_bad_address_and_port(self: Self) -> None:
        """Test that the address is checked before the port."""
        with self.assertRaises(InvalidOctetError):
            parse_host("365.1.2.3:asdf")
        with self.assertRaises(InvalidOctetError):
            parse_host("365.1.2.3:88888")

    def test_port_overflow(self: Self) -> None:
        """Test that a port above 65535 is rejected."""
        with self.assertRaises(InvalidPortError):
            parse_host("1.2.3.4:88888")
        with self.assertRaises(InvalidPortError):
            parse_host("1.2.3.4:65536")

    def test_bad_port(self: Self) -> None:
        """Test that non-decimal ports are rejected."""
        for text in ("1.2.3.4:asdf", "1.2.3.4:-1", "1.2.3.4: 80", "1.2.3.4:http"):
            with self.subTest(text=text), self.assertRaises(InvalidPortError):
                parse_host(text)

    def test_too_many_colons(self: Self) -> None:
        """Test that more than one colon is rejected."""
        for text in ("1:2:3", "1.2.3.4:5:6", "::", "asdf:asdf:asdf", "::1"):
            with self.subTest(text=text), self.assertRaises(TooManySeparatorsError):
                parse_host(text)

    def test_empty(self: Self) -> None:
        """Test that an empty string is rejected."""
        with self.assertRaises(InvalidOctetError):
            parse_host("")

    def test_leading_colon(self: Self) -> None:
        """Test that a missing address is rejected at the address stage."""
        with self.assertRaises(InvalidOctetError):
            parse_host(":5678")

    def test_trailing_colon(self: Self) -> None:
        """Test that a missing port is rejected at the port stage."""
        with self.assertRaises(InvalidPortError) as cm:
            parse_host("1.2.3.4:")
        self.assertEqual(cm.exception.text, "")

    def test_canonical_form_round_trip(self: Self) -> None:
        """Test that the canonical form parses back to the same value."""
        for text in ("1.2.3.4:5678", "1.2.3.4", "9:1", "1.2.3:0", "0.0.0.0:65535"):
            with self.subTest(text=text):
                result = parse_host(text)
                self.assertEqual(parse_host(str(result)), result)

    def test_argparse_type(self: Self) -> None:
        """Test that parse_host works as an argparse type converter."""
        parser = argparse.ArgumentParser(exit_on_error=False)
        parser.add_argument("--tcp", type=parse_host)
        args = parser.parse_args(["--tcp", "10.1:8080"])
        self.assertEqual(args.tcp, SocketAddress(IPv4Address(10, 0, 0, 1), 8080))
        with self.assertRaises(argparse.ArgumentError):
            parser.parse_args(["--tcp", "10.1:80800"])


class TestParsePort(TestCase):
    """Tests the parse_port function."""

    def test_bounds(self: Self) -> None:
        """Test the smallest and largest ports."""
        self.assertEqual(parse_port("0"), 0)
        self.assertEqual(parse_port("65535"), 65535)
        self.assertEqual(parse_port("00080"), 80)

    def test_errors(self: Self) -> None:
        """Test that bad ports are ParseErrors."""
        with self.assertRaises(ParseError):
            parse_port("65536")
        with self.assertRaises(ParseError):
            parse_port("")
