"""src/rawget/transport/connection.py

TCP connection management module.

This module provides the socket primitive used by every hop: resolve and
connect, write a payload in full, and read bounded chunks. Socket errors are
wrapped into Rawget exceptions.
"""

import logging
import socket
from typing import Any, Optional

from rawget.exceptions import ConnectError, IncompleteSendError, ReadError

__all__ = ["Connection", "connect"]

logger = logging.getLogger(__name__)


class Connection:
    """
    Manages a plain TCP connection and its lifecycle.

    No timeout is applied: a peer that never answers blocks the caller.

    Attributes:
        host: The target hostname or IP address.
        port: The target port number.
        sock: The underlying socket object.
    """

    __slots__ = ("host", "port", "sock")

    def __init__(self, host: str, port: int) -> None:
        """
        Initialize connection parameters.
        """
        self.host = host
        self.port = port
        self.sock: Optional[socket.socket] = None

    def open(self) -> socket.socket:
        """
        Resolve the host and open a TCP connection.
        """
        try:
            self.sock = socket.create_connection((self.host, self.port))

        except socket.gaierror as e:
            raise ConnectError(
                f"Could not resolve {self.host}:{self.port} - {e}"
            ) from e

        except OSError as e:
            raise ConnectError(
                f"Connection error to {self.host}:{self.port} - {e}"
            ) from e

        logger.debug("Connected to %s:%s", self.host, self.port)
        return self.sock

    def close(self) -> None:
        """
        Close the connection if it is open.
        """
        if self.sock:
            try:
                self.sock.close()
            except OSError:
                pass
            self.sock = None
            logger.debug("Closed connection to %s:%s", self.host, self.port)

    def send_all(self, data: bytes) -> int:
        """
        Write data in full, looping over partial sends.

        Returns:
            Number of bytes written, always len(data).

        Raises:
            IncompleteSendError: If the socket is closed, reports an error,
                or accepts zero bytes before data is exhausted.
        """
        if not self.sock:
            raise IncompleteSendError("Connection is not open")

        view = memoryview(data)
        sent = 0
        while sent < len(data):
            try:
                n = self.sock.send(view[sent:])
            except OSError as e:
                raise IncompleteSendError(
                    f"Sent {sent} of {len(data)} bytes to {self.host}:{self.port} - {e}"
                ) from e

            if n == 0:
                raise IncompleteSendError(
                    f"Sent {sent} of {len(data)} bytes to {self.host}:{self.port}"
                )
            sent += n

        logger.debug("Sent %d bytes to %s:%s", sent, self.host, self.port)
        return sent

    def recv(self, size: int) -> bytes:
        """
        Read up to size bytes. An empty result means end-of-stream.

        Raises:
            ReadError: If the connection is closed or the read fails.
        """
        if not self.sock:
            raise ReadError("Connection is not open")

        try:
            return self.sock.recv(size)
        except OSError as e:
            raise ReadError(
                f"Network error during read from {self.host}:{self.port}: {e}"
            ) from e

    def __enter__(self) -> "Connection":
        if not self.sock:
            self.open()
        return self

    def __exit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[BaseException],
        exc_tb: Optional[Any],
    ) -> None:
        self.close()


def connect(hostname: str, port: str) -> Connection:
    """
    Open a connection to hostname on the numeric port text.

    Raises:
        ConnectError: If resolution or the TCP handshake fails.
    """
    conn = Connection(hostname, int(port))
    conn.open()
    return conn
