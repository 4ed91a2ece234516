"""
Exception hierarchy for odxproxy.

Provides:
- A base exception with error codes and a dict form
- Client state errors (double init, use before init)
- Normalized transport errors with explicit kinds
- Safe error message formatting (no credential leak into logs)
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Kinds of transport failure surfaced by the client."""
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    NETWORK = "network"
    BAD_RESPONSE = "bad_response"


class OdxProxyError(Exception):
    """Base exception for all odxproxy errors."""

    def __init__(
        self,
        message: str,
        code: str = "ODXPROXY_ERROR",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ClientStateError(OdxProxyError):
    """Default client used out of order."""


class ClientAlreadyInitializedError(ClientStateError):
    def __init__(self) -> None:
        super().__init__("OdxProxyClient has already been initialized.", code="ALREADY_INITIALIZED")


class ClientNotInitializedError(ClientStateError):
    def __init__(self) -> None:
        super().__init__("OdxProxyClient has not been initialized.", code="NOT_INITIALIZED")


class ConfigError(OdxProxyError):
    """Configuration file could not be read or validated."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)


class OdxTransportError(OdxProxyError):
    """
    Normalized transport failure.

    `status` is the numeric code of the normalized error shape (HTTP status,
    408 for timeouts, 500 when no response was received). `data` carries the
    response body where there is one.
    """

    kind: ErrorKind = ErrorKind.NETWORK

    def __init__(self, status: int, message: str, data: Any = None):
        super().__init__(message, code=self.kind.name, details={"status": status})
        self.status = status
        self.data = data

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.status, "message": self.message, "data": self.data}

    def __str__(self) -> str:
        return f"[{self.status}] {self.message}"


class OdxTimeoutError(OdxTransportError):
    kind = ErrorKind.TIMEOUT

    def __init__(self, timeout_ms: int):
        super().__init__(408, f"Request Timeout: exceeded client limit of {timeout_ms}ms", None)
        self.timeout_ms = timeout_ms


class OdxHttpStatusError(OdxTransportError):
    kind = ErrorKind.HTTP_STATUS


class OdxNetworkError(OdxTransportError):
    kind = ErrorKind.NETWORK


class OdxBadResponseError(OdxTransportError):
    kind = ErrorKind.BAD_RESPONSE


_SENSITIVE_PATTERNS = [
    re.compile(r"(api[_-]?key|token|secret|password|auth)[=:]\s*['\"]?([^\s'\",}]+)['\"]?", re.IGNORECASE),
    re.compile(r"bearer\s+[a-zA-Z0-9\-._~+/]+=*", re.IGNORECASE),
    re.compile(r"[a-zA-Z0-9]{32,}"),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove sensitive information from error messages."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        sanitized = pattern.sub(replacement, sanitized)
    return sanitized


def redact(value: str | None, keep: int = 4) -> str:
    """Mask a secret for display, keeping a short suffix."""
    if not value:
        return ""
    if len(value) <= keep:
        return "*" * len(value)
    return "*" * (len(value) - keep) + value[-keep:]
