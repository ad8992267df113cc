"""src/rawget/cli.py

Command-line entry point.

Usage::

    rawget HOSTNAME[:PORT][/PATH] [-h] [-v]

``-h`` writes the raw response, header block included. It does not print
help. Exit status is 1 on a usage error or a failed fetch, 0 otherwise.
"""

import argparse
import logging
import os
import sys
from typing import List, NoReturn, Optional

from rawget.client.request import Request
from rawget.exceptions import RawgetError
from rawget.utils.settings import ClientSettings

__all__ = ["main", "build_parser"]

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser. ``-h`` is taken, so help is disabled."""
    parser = _ArgumentParser(
        prog="rawget",
        usage="%(prog)s HOSTNAME[:PORT][/PATH] [-h] [-v]",
        description="Fetch a URL over HTTP/1.1 and write the response to stdout.",
        add_help=False,
    )
    parser.add_argument("url", help="host[:port][/path], http:// prefix optional")
    parser.add_argument(
        "-h",
        dest="headers",
        action="store_true",
        help="print the raw response including headers",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log debug information to stderr",
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, never to stdout."""
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )


def _silence_stdout() -> None:
    """Point stdout at devnull so the interpreter's final flush cannot fail."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


def main(argv: Optional[List[str]] = None) -> int:
    """Run the client and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        Request.get(args.url, settings=ClientSettings.from_args(args))
    except RawgetError as e:
        logger.debug("Fetch failed", exc_info=True)
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except BrokenPipeError:
        # Reader went away, e.g. `rawget example.com | head -c 10`
        _silence_stdout()
        print(f"{parser.prog}: error: output closed", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_SUCCESS
