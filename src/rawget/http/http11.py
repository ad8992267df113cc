"""src/rawget/http/http11.py

Inspection of raw HTTP/1.1 response bytes.

These helpers look at a single received chunk. They never buffer across
chunks, so a status line, ``Location`` header or header/body separator that
straddles a chunk boundary is not seen.
"""

import re
from typing import Optional

__all__ = [
    "REDIRECT_STATUS",
    "find_status_code",
    "find_location",
    "find_body_offset",
]

REDIRECT_STATUS = 301

# HTTP/1.1 301 Moved Permanently
_STATUS_LINE = re.compile(rb"HTTP/\d(?:\.\d)?[ \t]+(\d{3})(?=[ \t\r\n]|$)")
_LOCATION = re.compile(rb"^location:[ \t]*([^\r\n]*)", re.IGNORECASE | re.MULTILINE)


def find_status_code(chunk: bytes) -> Optional[int]:
    """
    Return the status code from the status line at the start of chunk.

    Returns None when chunk does not begin with an HTTP status line.
    """
    match = _STATUS_LINE.match(chunk)
    if not match:
        return None
    return int(match.group(1))


def find_location(chunk: bytes) -> Optional[str]:
    """
    Return the value of the first ``Location`` header in chunk.

    Only the header block is searched. The value runs up to the next line
    terminator and is stripped; an empty value counts as absent.
    """
    end = find_body_offset(chunk)
    header_block = chunk if end < 0 else chunk[:end]
    match = _LOCATION.search(header_block)
    if not match:
        return None
    value = match.group(1).strip().decode("iso-8859-1")
    return value or None


def find_body_offset(chunk: bytes) -> int:
    """
    Return the index of the first byte after the header/body separator.

    ``\\r\\n\\r\\n`` is tried first, then ``\\n\\n``. Returns -1 when chunk
    holds neither.
    """
    index = chunk.find(b"\r\n\r\n")
    if index >= 0:
        return index + 4

    index = chunk.find(b"\n\n")
    if index >= 0:
        return index + 2

    return -1
