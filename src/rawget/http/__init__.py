"""src/rawget/http/__init__.py

HTTP/1.1 wire helpers: URL parsing and response inspection.
"""

from .http11 import find_body_offset, find_location, find_status_code
from .url import ParsedURL, parse_url

__all__ = [
    "ParsedURL",
    "parse_url",
    "find_body_offset",
    "find_location",
    "find_status_code",
]
