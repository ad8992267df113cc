"""src/rawget/exceptions.py

Rawget Exceptions hierarchy.
"""


class RawgetError(Exception):
    """Base exception for all Rawget errors."""


class RequestError(RawgetError):
    """General exception for errors raised while fetching a URL."""


class MalformedURLError(RequestError):
    """The URL argument is empty or cannot be split into host, port and path."""


class RequestTooLargeError(RequestError):
    """
    The built request does not fit the maximum request size.
    Requests are never truncated.
    """


class TooManyRedirects(RequestError):
    """Too many redirects occurred."""


class NetworkError(RequestError):
    """
    Base exception for network-related errors.
    Wraps socket errors and other connection issues.
    """


class ConnectError(NetworkError):
    """Hostname resolution or TCP connection failed."""


class IncompleteSendError(NetworkError):
    """The request could not be written to the connection in full."""


class ReadError(NetworkError):
    """Receiving from the connection failed mid-stream."""
