"""tests/unit/test_http11.py

Unit tests for rawget.http.http11 response inspection helpers.
"""

import pytest

from rawget.http.http11 import find_body_offset, find_location, find_status_code

REDIRECT = (
    b"HTTP/1.1 301 Moved Permanently\r\n"
    b"Content-Length: 0\r\n"
    b"Location: http://other.org:8080/new\r\n"
    b"\r\n"
)


class TestFindStatusCode:
    @pytest.mark.parametrize(
        "chunk, expected",
        [
            (b"HTTP/1.1 200 OK\r\n", 200),
            (b"HTTP/1.0 301 Moved Permanently\r\n", 301),
            (b"HTTP/1.1 404\r\n\r\n", 404),
            (b"HTTP/2 301\n", 301),
        ],
    )
    def test_status_line(self, chunk, expected):
        assert find_status_code(chunk) == expected

    @pytest.mark.parametrize(
        "chunk",
        [b"", b"<html>301</html>", b"HTTP/1.1 3010 Odd\r\n", b"xHTTP/1.1 301 Moved\r\n"],
    )
    def test_not_a_status_line(self, chunk):
        assert find_status_code(chunk) is None


class TestFindLocation:
    def test_location_value(self):
        assert find_location(REDIRECT) == "http://other.org:8080/new"

    def test_header_name_is_case_insensitive(self):
        chunk = b"HTTP/1.1 301 Moved\nlocation:   example.com/x  \n\n"
        assert find_location(chunk) == "example.com/x"

    def test_missing_location(self):
        assert find_location(b"HTTP/1.1 301 Moved\r\nServer: x\r\n\r\n") is None

    def test_empty_location(self):
        assert find_location(b"HTTP/1.1 301 Moved\r\nLocation:\r\n\r\n") is None

    def test_location_in_body_is_ignored(self):
        chunk = b"HTTP/1.1 301 Moved\r\n\r\nLocation: example.com\r\n"
        assert find_location(chunk) is None

    def test_location_in_partial_header_block(self):
        """Test chunk without separator is searched whole."""
        chunk = b"HTTP/1.1 301 Moved\r\nLocation: example.com/x\r\nServer: y"
        assert find_location(chunk) == "example.com/x"


class TestFindBodyOffset:
    def test_crlf_separator(self):
        chunk = b"HTTP/1.1 200 OK\r\nA: b\r\n\r\nbody"
        assert chunk[find_body_offset(chunk) :] == b"body"

    def test_lf_separator(self):
        chunk = b"HTTP/1.1 200 OK\nA: b\n\nbody"
        assert chunk[find_body_offset(chunk) :] == b"body"

    def test_crlf_preferred_over_lf(self):
        chunk = b"HTTP/1.1 200 OK\r\n\r\nline\n\nmore"
        assert chunk[find_body_offset(chunk) :] == b"line\n\nmore"

    def test_no_separator(self):
        assert find_body_offset(b"HTTP/1.1 200 OK\r\nA: b\r\n") == -1
