# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP client exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .headers import header_value, normalize_headers, set_header
from .httpx_client import HttpxClient
from .models import AUTHORIZATION_HEADER, Headers, HttpRequest, HttpResponse
from .paths import normalize_path, paths_equal, request_path
from .response import ensure_success

__all__ = [
    "AUTHORIZATION_HEADER",
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "create_default_http_client",
    "ensure_success",
    "header_value",
    "normalize_headers",
    "normalize_path",
    "paths_equal",
    "request_path",
    "set_header",
]
