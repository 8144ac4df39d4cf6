"""Immutable IPv4 address and socket address values."""

from __future__ import annotations

import ipaddress
from typing import Self


def _check_range(value: int, limit: int, what: str) -> int:
    """
    Check that an integer is in range.

    :param value: The value to check.
    :param limit: The largest permitted value.
    :param what: A description of the value, for the error message.
    :return: The value.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{what} must be an int, not {type(value).__name__}"
        raise TypeError(msg)
    if not 0 <= value <= limit:
        msg = f"{what} {value} out of range 0–{limit}"
        raise ValueError(msg)
    return value


class IPv4Address:
    """An IPv4 address made of four octets in presentation order."""

    __slots__ = {
        "_octets": """The four octets, most significant first.""",
    }

    _octets: tuple[int, int, int, int]

    def __init__(self: Self, a: int, b: int, c: int, d: int) -> None:
        """
        Construct a new IPv4Address.

        :param a: The first (most significant) octet.
        :param b: The second octet.
        :param c: The third octet.
        :param d: The fourth (least significant) octet.
        :raises ValueError: if any octet is outside 0–255.
        """
        octets = (
            _check_range(a, 255, "Octet"),
            _check_range(b, 255, "Octet"),
            _check_range(c, 255, "Octet"),
            _check_range(d, 255, "Octet"),
        )
        object.__setattr__(self, "_octets", octets)

    def __setattr__(self: Self, name: str, value: object) -> None:
        msg = "IPv4Address is immutable"
        raise AttributeError(msg)

    def __reduce__(self: Self) -> tuple[type[Self], tuple[int, int, int, int]]:
        return (type(self), self._octets)

    @property
    def octets(self: Self) -> tuple[int, int, int, int]:
        """The four octets, most significant first."""
        return self._octets

    @property
    def packed(self: Self) -> bytes:
        """The address as four bytes in network byte order."""
        return bytes(self._octets)

    def to_ipaddress(self: Self) -> ipaddress.IPv4Address:
        """
        Convert to the standard library representation.

        :return: The equivalent ipaddress.IPv4Address.
        """
        return ipaddress.IPv4Address(self.packed)

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, IPv4Address):
            return NotImplemented
        return self._octets == other._octets

    def __hash__(self: Self) -> int:
        return hash(self._octets)

    def __str__(self: Self) -> str:
        return ".".join(str(i) for i in self._octets)

    def __repr__(self: Self) -> str:
        return f"IPv4Address('{self}')"


class SocketAddress:
    """
    An IPv4 address paired with a port number.

    The port number 0 is used when no port was given, which, when binding, asks the
    operating system to pick one.
    """

    __slots__ = {
        "_address": """The IPv4 address.""",
        "_port": """The port number.""",
    }

    _address: IPv4Address
    _port: int

    def __init__(self: Self, address: IPv4Address, port: int = 0) -> None:
        """
        Construct a new SocketAddress.

        :param address: The IPv4 address.
        :param port: The port number.
        :raises ValueError: if the port is outside 0–65535.
        """
        if not isinstance(address, IPv4Address):
            msg = f"address must be an IPv4Address, not {type(address).__name__}"
            raise TypeError(msg)
        object.__setattr__(self, "_address", address)
        object.__setattr__(self, "_port", _check_range(port, 65535, "Port"))

    def __setattr__(self: Self, name: str, value: object) -> None:
        msg = "SocketAddress is immutable"
        raise AttributeError(msg)

    def __reduce__(self: Self) -> tuple[type[Self], tuple[IPv4Address, int]]:
        return (type(self), (self._address, self._port))

    @property
    def address(self: Self) -> IPv4Address:
        """The IPv4 address."""
        return self._address

    @property
    def port(self: Self) -> int:
        """The port number."""
        return self._port

    def as_tuple(self: Self) -> tuple[str, int]:
        """
        Convert to the form taken by the socket module for AF_INET sockets.

        :return: A (host, port) pair suitable for socket.bind or socket.connect.
        """
        return (str(self._address), self._port)

    def __eq__(self: Self, other: object) -> bool:
        if not isinstance(other, SocketAddress):
            return NotImplemented
        return self._address == other._address and self._port == other._port

    def __hash__(self: Self) -> int:
        return hash((self._address, self._port))

    def __str__(self: Self) -> str:
        return f"{self._address}:{self._port}"

    def __repr__(self: Self) -> str:
        return f"SocketAddress('{self}')"
