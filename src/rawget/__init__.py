"""src/rawget/__init__.py

Rawget - minimal HTTP/1.1 GET client over plain TCP.

Rawget is built entirely on Python's standard library. It sends one GET
request per hop, follows ``301`` redirects, and streams the response to a
binary output stream with or without its header block.

Key Features:
    - ``host[:port][/path]`` URLs, optional ``http://`` / ``https://`` prefix
    - Bounded request size, no silent truncation
    - Chunked streaming of the response to stdout
    - Bounded 301 redirect following

Example:
    Library usage::

        import sys
        from rawget import Request

        Request.get('example.com/index.html', out=sys.stdout.buffer)

    Command line::

        $ rawget example.com:80/index.html -h
"""

import logging

from rawget.client.request import Request
from rawget.client.response import ResponseStreamer
from rawget.exceptions import RawgetError
from rawget.http.url import ParsedURL, parse_url
from rawget.utils.settings import ClientSettings
from rawget.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Request",
    "ResponseStreamer",
    "ParsedURL",
    "parse_url",
    "ClientSettings",
    "RawgetError",
    "__version__",
]
