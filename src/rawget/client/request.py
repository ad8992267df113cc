"""src/rawget/client/request.py

HTTP request builder and sender.
"""

import logging
import sys
from typing import BinaryIO, Optional

from rawget.client.response import ResponseStreamer
from rawget.exceptions import (
    MalformedURLError,
    RequestTooLargeError,
    TooManyRedirects,
)
from rawget.http.url import ParsedURL, parse_url
from rawget.transport.connection import Connection, connect
from rawget.utils.settings import DEFAULT_MAX_REQUEST_SIZE, ClientSettings
from rawget.utils.validators import has_control_characters

__all__ = ["Request"]

logger = logging.getLogger(__name__)


class Request:
    """
    HTTP GET request builder and sender.
    """

    @staticmethod
    def build_request(
        hostname: str,
        port: str,
        path: str,
        max_size: int = DEFAULT_MAX_REQUEST_SIZE,
    ) -> bytes:
        """
        Builds the raw HTTP request bytes.

        Args:
            hostname: Host header name.
            port: Host header port.
            path: Request path without its leading slash.
            max_size: Largest acceptable encoded request, in bytes.

        Raises:
            MalformedURLError: If a piece contains CR, LF or NUL.
            RequestTooLargeError: If the request would exceed max_size.
        """
        for name, value in (("hostname", hostname), ("port", port), ("path", path)):
            # Validate against HTTP header injection attacks
            if has_control_characters(value):
                raise MalformedURLError(f"Invalid character in {name}: {value!r}")

        request = (
            f"GET /{path} HTTP/1.1\r\n"
            f"Host: {hostname}:{port}\r\n"
            "Connection: close\r\n"
            "\r\n"
        ).encode("utf-8")

        if len(request) > max_size:
            raise RequestTooLargeError(
                f"Request of {len(request)} bytes exceeds maximum size of {max_size} bytes"
            )
        return request

    @staticmethod
    def send(connection: Connection, payload: bytes) -> int:
        """Write payload to connection in full. Returns bytes sent."""
        return connection.send_all(payload)

    @classmethod
    def perform(
        cls,
        url: ParsedURL,
        streamer: ResponseStreamer,
        settings: ClientSettings,
    ) -> Optional[str]:
        """
        Run one hop against url.

        Returns:
            The redirect target reported by the response, if any. The
            connection is closed before returning.
        """
        payload = cls.build_request(
            url.hostname, url.port, url.path, settings.max_request_size
        )
        with connect(url.hostname, url.port) as conn:
            cls.send(conn, payload)
            return streamer.stream(conn)

    @classmethod
    def get(
        cls,
        url: str,
        out: Optional[BinaryIO] = None,
        settings: Optional[ClientSettings] = None,
    ) -> int:
        """
        Fetch url and stream the response to out, following 301 redirects.

        Args:
            url: ``host[:port][/path]``, optionally with an http(s) prefix.
            out: Binary output stream, stdout by default.
            settings: Client settings, defaults when omitted.

        Returns:
            Number of hops performed.

        Raises:
            MalformedURLError: For an unusable URL or redirect target.
            ConnectError: If a connection cannot be established.
            IncompleteSendError: If a request cannot be written in full.
            RequestTooLargeError: If a request exceeds the size limit.
            TooManyRedirects: After more than settings.max_redirects hops.
        """
        current = parse_url(url)
        settings = settings or ClientSettings()
        streamer = ResponseStreamer(
            out if out is not None else sys.stdout.buffer,
            header_mode=settings.header_mode,
            chunk_size=settings.chunk_size,
        )

        for hop in range(settings.max_redirects + 1):
            logger.debug("GET %s (hop %d)", current, hop + 1)
            location = cls.perform(current, streamer, settings)
            if location is None:
                return hop + 1

            logger.debug("301 redirect from %s to %s", current, location)
            current = current.resolve(location)

        raise TooManyRedirects(f"Exceeded {settings.max_redirects} redirects.")
