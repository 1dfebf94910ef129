# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Controller sections: typed request helpers around one HttpClient.

Each successful helper call reports the API as healthy through ``on_healthy``.
AuthenticatedSection runs the bearer authenticator before every send; a request
that fails authentication raises and never reaches the transport.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, ClassVar

from .auth.interceptor import AnonymousPolicy, BearerAuthenticator
from .auth.policy import AnonymousRules
from .auth.tokens import TokenProvider
from .errors import ResponseDecodeError
from .http.client import HttpClient
from .http.models import HttpRequest, HttpResponse
from .http.response import ensure_success

HealthyCallback = Callable[[bool], None]


class ControllerSection:
    """Plain (unauthenticated) section."""

    def __init__(self, client: HttpClient, *, on_healthy: HealthyCallback | None = None):
        self._client = client
        self._on_healthy = on_healthy

    def send(self, request: HttpRequest) -> HttpResponse:
        return self._client.request(request)

    def request(self, request: HttpRequest) -> None:
        """Send and require success; the body is ignored."""
        self._complete(request)

    def request_json(self, request: HttpRequest) -> Any | None:
        """Decoded JSON body, or None on 204."""
        response = self._complete(request)
        if response.is_no_content:
            return None
        return _decode(response)

    def request_many(self, request: HttpRequest) -> list[Any]:
        """Decoded JSON array with null items dropped; empty on 204."""
        return list(self.iter_many(request))

    def iter_many(self, request: HttpRequest) -> Iterator[Any]:
        """
        Yield the items of a JSON array, skipping nulls.

        Nothing is sent until iteration starts; errors surface on the first ``next()``.
        """
        response = self._complete(request)
        if response.is_no_content:
            return
        payload = _decode(response)
        if payload is None:
            return
        if not isinstance(payload, list):
            raise ResponseDecodeError(f"expected a JSON array, got {type(payload).__name__}")
        for item in payload:
            if item is not None:
                yield item

    def request_bytes(self, request: HttpRequest) -> bytes | None:
        """Raw body, or None on 204."""
        response = self._complete(request)
        if response.is_no_content:
            return None
        return response.content

    def _complete(self, request: HttpRequest) -> HttpResponse:
        response = ensure_success(self.send(request))
        if self._on_healthy is not None:
            self._on_healthy(True)
        return response


class AuthenticatedSection(ControllerSection):
    """
    Section whose requests carry a bearer token unless the path is anonymous.

    Subclasses declare their anonymous paths as class attributes; an explicit
    ``rules`` argument replaces them. Rules are fixed once the section exists.
    """

    anonymous_paths: ClassVar[Iterable[str]] = ()
    anonymous_method_paths: ClassVar[Mapping[str, Iterable[str]]] = {}

    def __init__(
        self,
        client: HttpClient,
        tokens: TokenProvider,
        *,
        rules: AnonymousRules | None = None,
        policy: AnonymousPolicy | None = None,
        on_healthy: HealthyCallback | None = None,
    ):
        super().__init__(client, on_healthy=on_healthy)
        if rules is None:
            rules = AnonymousRules.build(self.anonymous_paths, self.anonymous_method_paths)
        self.authenticator = BearerAuthenticator(tokens, rules, policy=policy)

    @property
    def anonymous_rules(self) -> AnonymousRules:
        return self.authenticator.rules

    def send(self, request: HttpRequest) -> HttpResponse:
        self.authenticator.authenticate(request).raise_for_error()
        return super().send(request)


def _decode(response: HttpResponse) -> Any:
    if not (response.text or response.content):
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ResponseDecodeError(f"response body is not valid JSON: {exc}") from exc


__all__ = ["AuthenticatedSection", "ControllerSection", "HealthyCallback"]
