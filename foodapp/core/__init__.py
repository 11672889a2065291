"""
Core module initialization.
Exports configuration, logging utilities and request errors.
"""

from foodapp.core.config import get_settings, Settings, EnvironmentMode, setup_logging
from foodapp.core.exceptions import (
    ErrorKind,
    RequestError,
    TransportError,
    ProtocolError,
    ApplicationError,
    DeserializationError,
    SerializationError,
)

__all__ = [
    "get_settings",
    "Settings",
    "EnvironmentMode",
    "setup_logging",
    "ErrorKind",
    "RequestError",
    "TransportError",
    "ProtocolError",
    "ApplicationError",
    "DeserializationError",
    "SerializationError",
]
