"""The application entry point."""

import argparse
import json
import logging
import logging.config
import pathlib
from collections.abc import Callable, Iterable, Sequence

from .address import IPv4Address, SocketAddress
from .errors import ParseError
from .host import parse_host
from .ip import parse_ip


def run(
    texts: Iterable[str], parser: Callable[[str], IPv4Address | SocketAddress]
) -> int:
    """
    Parse each address and print its canonical form.

    :param texts: The strings to parse.
    :param parser: The parsing function to apply to each string.
    :return: The number of strings that failed to parse.
    """
    failures = 0
    for text in texts:
        try:
            result = parser(text)
        except ParseError as exp:
            logging.getLogger(__name__).error(
                "%s: %s (%s)", text, exp, type(exp).__name__
            )
            failures += 1
        else:
            print(result)  # noqa: T201
    return failures


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the application.

    :param argv: The command-line arguments, or None to use sys.argv.
    :return: The process exit status.
    """
    try:
        # Parse command-line parameters.
        parser = argparse.ArgumentParser(
            description="Parse IPv4 addresses and socket addresses in the legacy "
            "inet_aton style and print their canonical forms."
        )
        parser.add_argument(
            "--ip-only",
            "-i",
            action="store_true",
            help="parse addresses without ports",
        )
        parser.add_argument(
            "--logging",
            "-l",
            type=pathlib.Path,
            help="the JSON file containing a logging configuration dictionary per "
            "logging.config.dictConfig (default: none)",
        )
        parser.add_argument(
            "address",
            nargs="+",
            help="the address to parse",
            metavar="ADDRESS[:PORT]",
        )
        args = parser.parse_args(argv)

        # Set up logging.
        if args.logging is not None:
            with args.logging.open("rb") as logging_config_file:
                cfg = json.load(logging_config_file)
            logging.config.dictConfig(cfg)
        else:
            logging.basicConfig(level=logging.WARNING)

        # Parse the addresses.
        failures = run(args.address, parse_ip if args.ip_only else parse_host)
        if failures:
            logging.getLogger(__name__).warning(
                "%d of %d address(es) invalid", failures, len(args.address)
            )
            return 1
        return 0
    finally:
        logging.shutdown()

