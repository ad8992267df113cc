"""src/rawget/utils/__init__.py"""

from .settings import ClientSettings
from .validators import has_control_characters, validate_hostname, validate_port

__all__ = [
    "ClientSettings",
    "has_control_characters",
    "validate_hostname",
    "validate_port",
]
