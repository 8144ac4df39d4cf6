"""
Parsing of IPv4 addresses and socket addresses in the legacy inet_aton style.

parse_ip accepts one to four dot-separated decimal components and fills in the missing
ones with zeroes after the first component, as inet_aton does. parse_host additionally
accepts an optional colon-separated port number, which defaults to zero.

Both functions raise a subclass of ParseError, itself a ValueError, on invalid input,
so they can be used directly as argparse type converters.

Please see the individual modules for more details.
"""

from .address import IPv4Address, SocketAddress
from .errors import (
    InvalidOctetError,
    InvalidPortError,
    ParseError,
    TooManyComponentsError,
    TooManySeparatorsError,
)
from .host import parse_host, parse_port
from .ip import normalize, parse_ip, parse_octet

__all__ = [
    "IPv4Address",
    "InvalidOctetError",
    "InvalidPortError",
    "ParseError",
    "SocketAddress",
    "TooManyComponentsError",
    "TooManySeparatorsError",
    "normalize",
    "parse_host",
    "parse_ip",
    "parse_octet",
    "parse_port",
]
