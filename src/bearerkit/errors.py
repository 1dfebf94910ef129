# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    HTTP_STATUS = "HTTP_STATUS"
    DECODE_ERROR = "DECODE_ERROR"
    CANCELLED = "CANCELLED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NONE = "NONE"


ACCESS_TOKEN_UNAVAILABLE = "access token not available at this time"
INVALID_TARGET = "request target is missing or malformed"


class BearerkitError(Exception):
    """Base class for errors raised by bearerkit."""


class AuthenticationError(BearerkitError):
    """A request could not be authenticated and was not sent."""


class InvalidRequestTarget(AuthenticationError):
    """The request has no resolvable target path."""

    def __init__(self, message: str = INVALID_TARGET):
        super().__init__(message)


class Unauthenticated(AuthenticationError):
    """No access token is available and the target path requires one."""

    def __init__(self, message: str = ACCESS_TOKEN_UNAVAILABLE):
        super().__init__(message)


class TransportError(BearerkitError):
    """The transport failed before an HTTP status was received."""

    def __init__(self, message: str, *, error_type: str | None = None):
        super().__init__(message)
        self.error_type = error_type


class HttpStatusError(BearerkitError):
    """A response carried a non-success status code."""

    def __init__(self, message: str, *, status_code: int | None = None, reason: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class ResponseDecodeError(BearerkitError):
    """A response body could not be decoded into the expected shape."""


class ProbeCancelled(BearerkitError):
    """A health probe was cancelled; the cached health state was left untouched."""


def categorize_exception(exc: BaseException) -> ErrorCategory:
    """
    Map Python/httpx exceptions to ErrorCategory.
    """
    import json
    import socket
    import ssl as ssl_module

    import httpx

    if isinstance(exc, ProbeCancelled):
        return ErrorCategory.CANCELLED

    if isinstance(exc, HttpStatusError):
        return ErrorCategory.HTTP_STATUS

    if isinstance(exc, httpx.TimeoutException):
        return ErrorCategory.TIMEOUT

    if isinstance(exc, (ssl_module.SSLError, ssl_module.CertificateError)):
        return ErrorCategory.SSL_ERROR

    if isinstance(exc, (socket.gaierror, socket.herror)):
        return ErrorCategory.DNS_ERROR

    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError, httpx.NetworkError, httpx.ProxyError, TransportError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ConnectionError, ConnectionRefusedError, ConnectionResetError)):
        return ErrorCategory.CONNECTION_ERROR

    if isinstance(exc, (ResponseDecodeError, json.JSONDecodeError, UnicodeDecodeError)):
        return ErrorCategory.DECODE_ERROR

    return ErrorCategory.UNKNOWN_ERROR


def describe_exception(exc: BaseException) -> str:
    """Human-readable failure text used in place of a remote status string."""
    message = str(exc).strip()
    if message:
        return message
    return error_category_to_reason(categorize_exception(exc)) or type(exc).__name__


def error_category_to_reason(category: ErrorCategory | None) -> str:
    """User-facing reason string."""
    mapping = {
        ErrorCategory.TIMEOUT: "Network timeout",
        ErrorCategory.SSL_ERROR: "TLS/certificate issue",
        ErrorCategory.CONNECTION_ERROR: "Network connectivity issue",
        ErrorCategory.DNS_ERROR: "DNS resolution failure",
        ErrorCategory.HTTP_STATUS: "Unexpected HTTP status",
        ErrorCategory.DECODE_ERROR: "Malformed response body",
        ErrorCategory.CANCELLED: "Operation cancelled",
        ErrorCategory.UNKNOWN_ERROR: "Unexpected error",
        ErrorCategory.NONE: "",
        None: "",
    }
    return mapping.get(category, "Request failed")
