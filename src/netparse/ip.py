"""
Parsing of dotted IPv4 address strings.

The accepted syntax follows the historical inet_aton convention of allowing fewer than
four components, restricted to decimal components. Missing components are filled with
zeroes immediately after the first component, so that the last component always lands
in the last octet:

* ``d`` becomes ``0.0.0.d``
* ``a.d`` becomes ``a.0.0.d``
* ``a.c.d`` becomes ``a.0.c.d``
* ``a.b.c.d`` is unchanged
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from .address import IPv4Address
from .errors import InvalidOctetError, TooManyComponentsError

_DECIMAL = re.compile(r"\+?[0-9]+")
"""The syntax of an unsigned decimal integer token."""


def parse_decimal(token: str, limit: int) -> int | None:
    """
    Parse an unsigned decimal integer.

    Unlike int(), this does not accept surrounding whitespace, underscores, minus signs,
    or non-ASCII digits.

    :param token: The text to parse.
    :param limit: The largest permitted value.
    :return: The value, or None if the token is malformed or larger than limit.
    """
    if _DECIMAL.fullmatch(token) is None:
        return None
    # Leading zeroes are allowed in any number, but int() refuses very long strings.
    digits = token.lstrip("+").lstrip("0") or "0"
    if len(digits) > len(str(limit)):
        return None
    value = int(digits)
    return value if value <= limit else None


def parse_octet(token: str) -> int:
    """
    Parse one dotted component.

    :param token: The component text.
    :return: The octet value.
    :raises InvalidOctetError: if the component is not a decimal integer from 0 to 255.
    """
    value = parse_decimal(token, 255)
    if value is None:
        msg = f"Invalid address component {token!r}"
        raise InvalidOctetError(msg, token)
    return value


def normalize(octets: Sequence[int]) -> tuple[int, int, int, int]:
    """
    Expand one to four components into a full address.

    :param octets: The parsed components, in input order.
    :return: The four octets of the address.
    :raises TooManyComponentsError: if there are more than four components.
    :raises InvalidOctetError: if there are no components.
    """
    match octets:
        case [d]:
            return (0, 0, 0, d)
        case [a, d]:
            return (a, 0, 0, d)
        case [a, c, d]:
            return (a, 0, c, d)
        case [a, b, c, d]:
            return (a, b, c, d)
        case []:
            msg = "Address has no components"
            raise InvalidOctetError(msg, "")
    text = ".".join(str(i) for i in octets)
    msg = f"Address {text} has {len(octets)} components, at most 4 allowed"
    raise TooManyComponentsError(msg, text)


def parse_ip(text: str) -> IPv4Address:
    """
    Parse an IPv4 address.

    :param text: The address in dotted form, with one to four decimal components.
    :return: The address.
    :raises InvalidOctetError: if any component is not a decimal integer from 0 to 255.
    :raises TooManyComponentsError: if there are more than four components.
    """
    octets: list[int] = []
    for token in text.split("."):
        try:
            octets.append(parse_octet(token))
        except InvalidOctetError:
            logging.getLogger(__name__).debug("Rejected address %r", text)
            raise
    if len(octets) > 4:
        logging.getLogger(__name__).debug("Rejected address %r", text)
        msg = f"Address {text!r} has {len(octets)} components, at most 4 allowed"
        raise TooManyComponentsError(msg, text)
    return IPv4Address(*normalize(octets))
