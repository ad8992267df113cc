"""src/rawget/client/response.py

HTTP response streaming module.

This module copies a response from a connection to a binary output stream,
either verbatim (header mode) or with the header block sliced off, and
detects permanent redirects on the first chunk.
"""

import enum
import logging
from typing import BinaryIO, Optional

from rawget.exceptions import ReadError
from rawget.http.http11 import (
    REDIRECT_STATUS,
    find_body_offset,
    find_location,
    find_status_code,
)
from rawget.transport.connection import Connection
from rawget.utils.settings import DEFAULT_CHUNK_SIZE

__all__ = ["StreamState", "ResponseStreamer"]

logger = logging.getLogger(__name__)


class StreamState(enum.Enum):
    """Position of the streamer within the current response."""

    HEADER = "header"
    BODY = "body"


class ResponseStreamer:
    """
    Streams one response per call to :meth:`stream`.

    The header block is only looked for in the first chunk. When that chunk
    has no separator it is written whole, and a separator split across two
    chunks is never found.

    Attributes:
        out: Binary stream receiving the response bytes.
        header_mode: Write every chunk unmodified, headers included.
        chunk_size: Maximum number of bytes requested per read.
        state: Current StreamState.
        bytes_written: Bytes written to out by the last call to stream().
    """

    __slots__ = ("out", "header_mode", "chunk_size", "state", "bytes_written")

    def __init__(
        self,
        out: BinaryIO,
        header_mode: bool = False,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self.out = out
        self.header_mode = header_mode
        self.chunk_size = chunk_size
        self.state = StreamState.HEADER
        self.bytes_written = 0

    def stream(self, connection: Connection) -> Optional[str]:
        """
        Copy the response on connection to the output stream.

        Args:
            connection: Open connection whose request was already sent.

        Returns:
            The ``Location`` value when the response is a 301 redirect, in
            which case nothing is written. None once the response has been
            streamed to the end.
        """
        self.state = StreamState.HEADER
        self.bytes_written = 0
        first = True

        while True:
            try:
                chunk = connection.recv(self.chunk_size)
            except ReadError as e:
                logger.warning("Response ended early: %s", e)
                break

            if not chunk:
                break

            if first:
                first = False
                location = self._redirect_target(chunk)
                if location is not None:
                    return location

            self._write(self._payload(chunk))

        return None

    def _redirect_target(self, chunk: bytes) -> Optional[str]:
        """Return the redirect target if chunk starts a 301 response."""
        if find_status_code(chunk) != REDIRECT_STATUS:
            return None

        location = find_location(chunk)
        if location is None:
            logger.warning("301 response without a Location header")
        return location

    def _payload(self, chunk: bytes) -> bytes:
        """Return the part of chunk that should be written."""
        if self.header_mode or self.state is StreamState.BODY:
            return chunk

        self.state = StreamState.BODY
        offset = find_body_offset(chunk)
        if offset < 0:
            return chunk
        return chunk[offset:]

    def _write(self, data: bytes) -> None:
        if not data:
            return
        self.out.write(data)
        self.out.flush()
        self.bytes_written += len(data)
