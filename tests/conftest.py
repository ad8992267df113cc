import io
from typing import List, Optional, Union

import pytest

from rawget.exceptions import ReadError


class FakeConnection:
    """In-memory stand-in for rawget.transport.connection.Connection."""

    def __init__(
        self,
        chunks: List[Union[bytes, Exception]],
        host: str = "example.com",
        port: int = 80,
    ) -> None:
        self.host = host
        self.port = port
        self.chunks = list(chunks)
        self.sent = b""
        self.closed = False
        self.recv_sizes: List[int] = []

    def send_all(self, data: bytes) -> int:
        self.sent += data
        return len(data)

    def recv(self, size: int) -> bytes:
        self.recv_sizes.append(size)
        if not self.chunks:
            return b""
        item = self.chunks.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeConnection":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


@pytest.fixture
def fake_connection():
    """Factory fixture building FakeConnection instances."""

    def _factory(
        *chunks: Union[bytes, Exception], host: Optional[str] = None
    ) -> FakeConnection:
        return FakeConnection(list(chunks), host=host or "example.com")

    return _factory


@pytest.fixture
def out() -> io.BytesIO:
    """Binary sink standing in for stdout."""
    return io.BytesIO()


@pytest.fixture
def read_error() -> ReadError:
    return ReadError("Network error during read: connection reset")
