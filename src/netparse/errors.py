"""Exceptions raised when address text cannot be parsed."""

from typing import Self


class ParseError(ValueError):
    """
    Raised if a string is not a valid address.

    This is a ValueError so that the parsing functions can be used directly as argparse
    type converters. Catching this class is enough for callers that only care whether
    parsing succeeded; the subclasses identify which part of the input was wrong.
    """

    __slots__ = {
        "text": """The offending input text.""",
    }

    text: str

    def __init__(self: Self, msg: str, text: str) -> None:
        """
        Construct a new ParseError.

        :param msg: The human-readable message.
        :param text: The offending input text.
        """
        super().__init__(msg)
        self.text = text

    def __reduce__(self: Self) -> tuple[type[Self], tuple[str, str]]:
        return (type(self), (str(self), self.text))


class InvalidOctetError(ParseError):
    """Raised if a dotted component is not a decimal integer between 0 and 255."""

    __slots__ = ()


class TooManyComponentsError(ParseError):
    """Raised if an address has more than four dotted components."""

    __slots__ = ()


class InvalidPortError(ParseError):
    """Raised if a port is not a decimal integer between 0 and 65535."""

    __slots__ = ()


class TooManySeparatorsError(ParseError):
    """Raised if a host string contains more than one colon."""

    __slots__ = ()
