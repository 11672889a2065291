"""
Gateway Request/Response Types

RequestSpec describes one outgoing call after headers and body are
resolved; ResponseOutcome is the classified result of one exchange.
classify_response() holds the content-type/status rules so they can be
checked without a network.

Author: Khalil Bannouri
Version: 1.0.0
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from foodapp.core.exceptions import ErrorKind, RequestError, error_for_kind
from foodapp.schemas import HttpMethod

JSON_CONTENT_TYPE = "application/json"
GENERIC_FAILURE_MESSAGE = "Request failed"


@dataclass
class RequestSpec:
    """
    Resolved description of one outgoing call.

    Attributes:
        endpoint: Path below the base URL (e.g., "/restaurants/42")
        method: HTTP method
        headers: Final headers, auth included
        body: Serialized body, or None to send no body
    """
    endpoint: str
    method: HttpMethod = HttpMethod.GET
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None

    def url(self, base_url: str) -> str:
        return f"{base_url}{self.endpoint}"


@dataclass
class ResponseOutcome:
    """
    Classified result of one exchange.

    Attributes:
        success: Whether the call produced a usable result
        payload: Parsed JSON (None for empty/non-JSON successes)
        error_message: Failure text for callers
        error_kind: Failure classification
        http_status: Status code of the response
    """
    success: bool
    payload: Any = None
    error_message: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    http_status: Optional[int] = None

    @classmethod
    def ok(cls, payload: Any, http_status: Optional[int] = None) -> "ResponseOutcome":
        return cls(success=True, payload=payload, http_status=http_status)

    @classmethod
    def failure(
        cls,
        message: str,
        kind: ErrorKind,
        http_status: Optional[int] = None,
    ) -> "ResponseOutcome":
        return cls(
            success=False,
            error_message=message,
            error_kind=kind,
            http_status=http_status,
        )

    def to_error(self) -> RequestError:
        """Build the RequestError for a failed outcome."""
        if self.success:
            raise ValueError("Successful outcome has no error")
        return error_for_kind(
            self.error_kind or ErrorKind.PROTOCOL,
            self.error_message or GENERIC_FAILURE_MESSAGE,
            status_code=self.http_status,
        )

    def unwrap(self) -> Any:
        """Return the payload, or raise the failure."""
        if not self.success:
            raise self.to_error()
        return self.payload

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "success": self.success,
            "payload": self.payload,
            "error_message": self.error_message,
            "error_kind": self.error_kind.value if self.error_kind else None,
            "http_status": self.http_status,
        }


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def is_json_content_type(content_type: Optional[str]) -> bool:
    return bool(content_type) and JSON_CONTENT_TYPE in content_type.lower()


def extract_error_message(data: Any) -> Optional[str]:
    """
    Pick the failure text from a JSON error body.

    `error` wins over `message`; empty or non-string values are skipped.
    """
    if not isinstance(data, dict):
        return None
    for key in ("error", "message"):
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def classify_response(
    status_code: int,
    content_type: Optional[str],
    content: bytes,
) -> ResponseOutcome:
    """
    Classify a response by declared content type, then status.

    Non-JSON:
        failure status → "HTTP <status>"; success → None payload
    JSON:
        body must parse; failure status → server `error`/`message`
        (or "Request failed"); success → parsed body unchanged

    Args:
        status_code: HTTP status
        content_type: Content-Type header value, if any
        content: Raw response body

    Returns:
        ResponseOutcome: Classified result
    """
    success = is_success_status(status_code)

    if not is_json_content_type(content_type):
        if not success:
            return ResponseOutcome.failure(
                f"HTTP {status_code}", ErrorKind.PROTOCOL, status_code
            )
        return ResponseOutcome.ok(None, status_code)

    try:
        data = json.loads(content)
    except ValueError as e:
        return ResponseOutcome.failure(
            f"Invalid JSON response: {e}", ErrorKind.DESERIALIZATION, status_code
        )

    if not success:
        message = extract_error_message(data)
        if message is None:
            return ResponseOutcome.failure(
                GENERIC_FAILURE_MESSAGE, ErrorKind.PROTOCOL, status_code
            )
        return ResponseOutcome.failure(message, ErrorKind.APPLICATION, status_code)

    return ResponseOutcome.ok(data, status_code)
