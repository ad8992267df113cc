"""utils/validators.py

Validation utilities for Rawget.
"""


def has_control_characters(value: str) -> bool:
    """True when value contains CR, LF or NUL."""
    return "\r" in value or "\n" in value or "\x00" in value


def validate_port(port: str) -> bool:
    """Check that port is decimal text within 1..65535."""
    if not port.isascii() or not port.isdigit():
        return False
    return 0 < int(port) < 65536


def validate_hostname(hostname: str) -> bool:
    """Reject empty hostnames and names that would break the Host header."""
    if not hostname or " " in hostname:
        return False
    return not has_control_characters(hostname)
