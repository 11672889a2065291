"""
Request Errors

Every failure the gateway surfaces is a RequestError. The subclasses
tell callers what went wrong without parsing the message:

    - TransportError: the exchange never completed (connect, DNS, TLS)
    - ProtocolError: failure status with no usable error detail
    - ApplicationError: failure status with an `error`/`message` from the server
    - DeserializationError: body declared as JSON but not parseable
    - SerializationError: request body could not be encoded as JSON

Author: Khalil Bannouri
Version: 1.0.0
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    PROTOCOL = "protocol"
    APPLICATION = "application"
    DESERIALIZATION = "deserialization"
    SERIALIZATION = "serialization"


class RequestError(Exception):
    """
    Base error raised by the API gateway.

    Attributes:
        message: Human-readable failure text, shown to users as-is
        status_code: HTTP status when a response was received
        kind: Error classification
    """

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r})"
        )


class TransportError(RequestError):
    kind = ErrorKind.TRANSPORT


class ProtocolError(RequestError):
    kind = ErrorKind.PROTOCOL


class ApplicationError(RequestError):
    kind = ErrorKind.APPLICATION


class DeserializationError(RequestError):
    kind = ErrorKind.DESERIALIZATION


class SerializationError(RequestError):
    kind = ErrorKind.SERIALIZATION


_ERRORS_BY_KIND = {
    ErrorKind.TRANSPORT: TransportError,
    ErrorKind.PROTOCOL: ProtocolError,
    ErrorKind.APPLICATION: ApplicationError,
    ErrorKind.DESERIALIZATION: DeserializationError,
    ErrorKind.SERIALIZATION: SerializationError,
}


def error_for_kind(
    kind: ErrorKind,
    message: str,
    status_code: Optional[int] = None,
) -> RequestError:
    """Build the RequestError subclass matching an error kind."""
    return _ERRORS_BY_KIND[kind](message, status_code=status_code)
