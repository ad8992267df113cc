"""src/rawget/client/__init__.py"""

from .request import Request
from .response import ResponseStreamer, StreamState

__all__ = [
    "Request",
    "ResponseStreamer",
    "StreamState",
]
