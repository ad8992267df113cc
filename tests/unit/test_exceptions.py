"""tests/unit/test_exceptions.py"""

import pytest

from rawget.exceptions import (
    ConnectError,
    IncompleteSendError,
    MalformedURLError,
    NetworkError,
    RawgetError,
    ReadError,
    RequestError,
    RequestTooLargeError,
    TooManyRedirects,
)


def test_exception_hierarchy():
    """Verify the inheritance structure of Rawget exceptions."""
    assert issubclass(RequestError, RawgetError)
    assert issubclass(MalformedURLError, RequestError)
    assert issubclass(RequestTooLargeError, RequestError)
    assert issubclass(TooManyRedirects, RequestError)
    assert issubclass(NetworkError, RequestError)
    assert issubclass(ConnectError, NetworkError)
    assert issubclass(IncompleteSendError, NetworkError)
    assert issubclass(ReadError, NetworkError)


@pytest.mark.parametrize(
    "exception_class",
    [
        RawgetError,
        RequestError,
        MalformedURLError,
        RequestTooLargeError,
        TooManyRedirects,
        NetworkError,
        ConnectError,
        IncompleteSendError,
        ReadError,
    ],
)
def test_exceptions_accept_message(exception_class):
    """Verify that exceptions can be raised with a message."""
    message = f"Testing {exception_class.__name__}"
    with pytest.raises(exception_class) as exc_info:
        raise exception_class(message)
    assert message in str(exc_info.value)
