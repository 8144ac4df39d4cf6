"""Parsing of IPv4 socket address strings of the form ADDRESS or ADDRESS:PORT."""

from __future__ import annotations

import logging

from .address import SocketAddress
from .errors import InvalidPortError, TooManySeparatorsError
from .ip import parse_decimal, parse_ip


def parse_port(token: str) -> int:
    """
    Parse a port number.

    :param token: The port text.
    :return: The port number.
    :raises InvalidPortError: if the port is not a decimal integer from 0 to 65535.
    """
    value = parse_decimal(token, 65535)
    if value is None:
        msg = f"Invalid port {token!r}"
        raise InvalidPortError(msg, token)
    return value


def parse_host(text: str) -> SocketAddress:
    """
    Parse a socket address.

    The address part is parsed by parse_ip, so it may have fewer than four components.
    If the port part is omitted, the port is zero.

    :param text: The socket address.
    :return: The parsed address and port.
    :raises TooManySeparatorsError: if there is more than one colon.
    :raises InvalidOctetError: if the address part has an invalid component.
    :raises TooManyComponentsError: if the address part has more than four components.
    :raises InvalidPortError: if the port part is not a valid port number.
    """
    parts = text.split(":")
    if len(parts) > 2:
        logging.getLogger(__name__).debug("Rejected host %r", text)
        msg = f"Host {text!r} has more than one colon"
        raise TooManySeparatorsError(msg, text)
    # Errors from the address part pass through unchanged.
    address = parse_ip(parts[0])
    if len(parts) == 1:
        return SocketAddress(address)
    try:
        port = parse_port(parts[1])
    except InvalidPortError:
        logging.getLogger(__name__).debug("Rejected host %r", text)
        raise
    return SocketAddress(address, port)
