# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory HttpClient implementations."""

from __future__ import annotations

from collections.abc import Callable

from .client import HttpClient
from .models import HttpRequest, HttpResponse

StubReply = HttpResponse | Exception | Callable[[HttpRequest], HttpResponse]


class StubHttpClient(HttpClient):
    """
    Deterministic, programmable HttpClient for tests.

    Replies are keyed by request URL. A reply may be a response, an exception to
    raise, or a callable producing a response from the request.
    """

    def __init__(self, responses: dict[str, StubReply] | None = None):
        self._responses: dict[str, StubReply] = dict(responses or {})
        self.requests: list[HttpRequest] = []
        self.closed = False

    def add(self, url: str, reply: StubReply) -> None:
        self._responses[url] = reply

    def calls_to(self, url: str) -> int:
        return sum(1 for r in self.requests if r.url == url)

    def request(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        reply = self._responses.get(request.url or "")
        if reply is None:
            return HttpResponse(ok=False, status_code=None, error_message="No stubbed response configured")
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(request)
        return reply

    def close(self) -> None:
        self.closed = True
