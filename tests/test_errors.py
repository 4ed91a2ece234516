"""Tests for odxproxy.errors module."""

from __future__ import annotations

from odxproxy.errors import (
    ClientAlreadyInitializedError,
    ClientStateError,
    ConfigError,
    ErrorKind,
    OdxHttpStatusError,
    OdxProxyError,
    OdxTimeoutError,
    OdxTransportError,
    redact,
    sanitize_error_message,
)


def test_base_error_to_dict() -> None:
    exc = OdxProxyError("test message", code="TEST_CODE")
    assert exc.to_dict() == {"error": "TEST_CODE", "message": "test message", "details": {}}
    assert str(exc) == "[TEST_CODE] test message"


def test_state_errors_share_base() -> None:
    exc = ClientAlreadyInitializedError()
    assert isinstance(exc, ClientStateError)
    assert exc.code == "ALREADY_INITIALIZED"


def test_config_error_records_path() -> None:
    exc = ConfigError("bad", path="/tmp/x.json")
    assert exc.details == {"path": "/tmp/x.json"}


def test_transport_errors_carry_kind_and_normalized_shape() -> None:
    exc = OdxHttpStatusError(404, "Not Found", {"foo": "bar"})
    assert isinstance(exc, OdxTransportError)
    assert exc.kind is ErrorKind.HTTP_STATUS
    assert exc.code == "HTTP_STATUS"
    assert exc.to_dict() == {"code": 404, "message": "Not Found", "data": {"foo": "bar"}}
    assert str(exc) == "[404] Not Found"


def test_timeout_error_message_contains_limit() -> None:
    exc = OdxTimeoutError(45000)
    assert exc.status == 408
    assert exc.data is None
    assert "45000ms" in exc.message


def test_sanitize_error_message_redacts_keys() -> None:
    msg = sanitize_error_message("failed with api_key=abc123 and Bearer tok.en")
    assert "abc123" not in msg
    assert "tok.en" not in msg
    assert "[REDACTED]" in msg


def test_redact_keeps_suffix() -> None:
    assert redact("secret-key-1234") == "***********1234"
    assert redact("abc") == "***"
    assert redact("") == ""
    assert redact(None) == ""
