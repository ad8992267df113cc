"""src/rawget/transport/__init__.py

Transport layer module for Rawget.

This module provides low-level TCP connection management: opening a
connection, writing a request in full and reading the response in chunks.
"""

from .connection import Connection, connect

__all__ = ["Connection", "connect"]
