"""src/rawget/http/url.py

URL parser for Rawget.

Accepts ``host[:port][/path]`` with an optional ``http://`` or ``https://``
prefix and splits it into hostname, port and path without touching the
caller's string.
"""

import logging
from dataclasses import dataclass

from rawget.exceptions import MalformedURLError
from rawget.utils.validators import validate_hostname, validate_port

__all__ = ["ParsedURL", "parse_url", "DEFAULT_PORT"]

logger = logging.getLogger(__name__)

DEFAULT_PORT = "80"
SCHEMES = ("http://", "https://")


@dataclass(frozen=True)
class ParsedURL:
    """
    The three pieces of a URL.

    Attributes:
        hostname: Host to connect to, never empty.
        port: Numeric port text, ``"80"`` when absent.
        path: Path without its leading slash, ``""`` when absent.
    """

    hostname: str
    port: str = DEFAULT_PORT
    path: str = ""

    @property
    def target(self) -> str:
        """Request target as it appears on the request line."""
        return f"/{self.path}"

    @property
    def authority(self) -> str:
        """``hostname:port`` as sent in the Host header."""
        return f"{self.hostname}:{self.port}"

    def resolve(self, location: str) -> "ParsedURL":
        """
        Resolve a redirect target against this URL.

        Targets starting with a single ``/`` keep the current hostname and
        port. Protocol-relative ``//host/path`` targets and anything else
        are parsed as a new URL.
        """
        if location.startswith("//"):
            return parse_url(location[2:])
        if location.startswith("/"):
            return ParsedURL(self.hostname, self.port, location[1:])
        return parse_url(location)

    def __str__(self) -> str:
        return f"{self.authority}{self.target}"


def parse_url(raw: str) -> ParsedURL:
    """
    Split raw into hostname, port and path.

    Args:
        raw: URL text such as ``example.com:8080/a/b``.

    Returns:
        A new ParsedURL.

    Raises:
        MalformedURLError: If raw is empty, has no hostname, or carries a
            port that is not a number between 1 and 65535.
    """
    if not raw:
        raise MalformedURLError("Empty URL")

    rest = raw
    for scheme in SCHEMES:
        if rest.startswith(scheme):
            rest = rest[len(scheme) :]
            if scheme == "https://":
                logger.warning("TLS is not supported, using plain TCP for %s", raw)
            break

    host_port, _, path = rest.partition("/")
    hostname, colon, port = host_port.partition(":")
    if not colon:
        port = DEFAULT_PORT

    if not validate_hostname(hostname):
        raise MalformedURLError(f"Invalid URL: could not determine host: {raw!r}")
    if not validate_port(port):
        raise MalformedURLError(f"Invalid URL: bad port {port!r}: {raw!r}")

    parsed = ParsedURL(hostname, port, path)
    logger.debug(
        "Parsed %r: hostname=%s port=%s path=%s", raw, hostname, port, path
    )
    return parsed
