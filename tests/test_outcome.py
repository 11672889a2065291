"""
Unit tests for response classification without a network.
"""

import pytest

from foodapp.core.exceptions import (
    ApplicationError,
    DeserializationError,
    ErrorKind,
    ProtocolError,
    error_for_kind,
)
from foodapp.services.gateway.base import (
    ResponseOutcome,
    classify_response,
    extract_error_message,
    is_json_content_type,
)


class TestClassifyResponse:

    def test_json_success(self):
        outcome = classify_response(200, "application/json", b'{"id": 7}')
        assert outcome.success is True
        assert outcome.payload == {"id": 7}
        assert outcome.http_status == 200

    def test_json_null_success(self):
        assert classify_response(200, "application/json", b"null").unwrap() is None

    @pytest.mark.parametrize("content_type", [None, "", "text/plain", "text/html; charset=utf-8"])
    def test_non_json_success_is_empty(self, content_type):
        outcome = classify_response(200, content_type, b"<html>ok</html>")
        assert outcome.success is True
        assert outcome.payload is None

    def test_non_json_failure(self):
        outcome = classify_response(502, "text/html", b"<h1>Bad gateway</h1>")
        assert outcome.to_dict() == {
            "success": False,
            "payload": None,
            "error_message": "HTTP 502",
            "error_kind": "protocol",
            "http_status": 502,
        }

    def test_redirect_status_is_not_success(self):
        assert classify_response(302, None, b"").error_message == "HTTP 302"

    def test_empty_json_body_is_deserialization_failure(self):
        outcome = classify_response(200, "application/json", b"")
        assert outcome.error_kind == ErrorKind.DESERIALIZATION
        with pytest.raises(DeserializationError):
            outcome.unwrap()

    def test_malformed_json_on_failure_status(self):
        outcome = classify_response(500, "application/json", b"<html>")
        assert outcome.error_kind == ErrorKind.DESERIALIZATION
        assert outcome.http_status == 500

    def test_json_failure_with_error_text(self):
        with pytest.raises(ApplicationError) as exc_info:
            classify_response(400, "application/json", b'{"error": "Email exists"}').unwrap()
        assert exc_info.value.message == "Email exists"
        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize("body", [b"{}", b"[]", b'"oops"', b'{"error": ""}', b'{"error": 42}'])
    def test_json_failure_without_usable_text(self, body):
        with pytest.raises(ProtocolError, match="^Request failed$"):
            classify_response(422, "application/json", body).unwrap()

    def test_content_type_match_is_case_insensitive(self):
        assert is_json_content_type("Application/JSON; charset=utf-8") is True
        assert is_json_content_type(None) is False


class TestErrorHelpers:

    def test_error_message_priority(self):
        assert extract_error_message({"error": "a", "message": "b"}) == "a"
        assert extract_error_message({"error": None, "message": "b"}) == "b"
        assert extract_error_message({"detail": "c"}) is None
        assert extract_error_message(["error"]) is None

    def test_successful_outcome_has_no_error(self):
        with pytest.raises(ValueError):
            ResponseOutcome.ok({"id": 1}).to_error()

    def test_error_for_kind(self):
        err = error_for_kind(ErrorKind.APPLICATION, "Admin only", status_code=403)
        assert isinstance(err, ApplicationError)
        assert err.kind == ErrorKind.APPLICATION
        assert repr(err) == "ApplicationError(message='Admin only', status_code=403)"
