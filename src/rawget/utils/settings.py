"""utils/settings.py

Client settings.
"""

from dataclasses import dataclass
from typing import Any

DEFAULT_CHUNK_SIZE = 4096
DEFAULT_MAX_REQUEST_SIZE = 16384
DEFAULT_MAX_REDIRECTS = 5


@dataclass
class ClientSettings:
    """
    Settings shared by every hop of a fetch.

    Attributes:
        chunk_size: Maximum number of bytes requested per socket read.
        max_request_size: Upper bound for the encoded request, in bytes.
        max_redirects: Number of 301 hops followed before giving up.
        header_mode: Write responses unmodified, header block included.
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    max_request_size: int = DEFAULT_MAX_REQUEST_SIZE
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    header_mode: bool = False

    def __post_init__(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
        if self.max_request_size <= 0:
            raise ValueError(
                f"max_request_size must be positive, got {self.max_request_size}"
            )
        if self.max_redirects < 0:
            raise ValueError(
                f"max_redirects cannot be negative, got {self.max_redirects}"
            )

    @classmethod
    def from_args(cls, args: Any) -> "ClientSettings":
        """Create settings from a parsed argparse namespace."""
        return cls(header_mode=bool(getattr(args, "headers", False)))
