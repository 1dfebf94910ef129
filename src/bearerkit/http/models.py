# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models used across bearerkit."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from .headers import header_value

Headers = dict[str, str]

AUTHORIZATION_HEADER = "Authorization"


@dataclass
class HttpRequest:
    """
    Outgoing request consumed by HttpClient implementations.

    ``url`` may be absolute or relative to the client's base URL and may carry a
    query string. ``None`` means the request has no target at all.
    """

    url: str | None
    method: str = "GET"
    headers: Headers | None = None
    body: bytes | str | None = None
    json: Any = None
    timeout: float | None = None
    allow_redirects: bool = True

    @property
    def authorization(self) -> str:
        """Existing Authorization header value, or an empty string."""
        return header_value(self.headers, AUTHORIZATION_HEADER)


@dataclass
class HttpResponse:
    """Normalized HTTP response; ``ok`` reports transport success, not status success."""

    ok: bool
    status_code: int | None = None
    reason: str | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.ok and self.status_code is not None and 200 <= self.status_code < 300

    @property
    def is_no_content(self) -> bool:
        return self.status_code == 204

    def json(self) -> Any:
        """Decode the body as JSON; raises ``json.JSONDecodeError`` on malformed input."""
        if self.text:
            return json.loads(self.text)
        return json.loads(self.content.decode("utf-8"))
