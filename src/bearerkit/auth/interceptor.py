# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Bearer-token request authentication.

Runs once per outgoing request, before transmission:

1. ``HEAD`` requests are never authenticated.
2. A request that already carries an Authorization header is left alone.
3. A request without a resolvable target path is rejected.
4. A non-blank token from the provider is always attached, anonymous path or not.
5. Without a token the request proceeds only if the anonymous-path policy allows it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..errors import ACCESS_TOKEN_UNAVAILABLE, INVALID_TARGET, InvalidRequestTarget, Unauthenticated
from ..http.headers import set_header
from ..http.models import AUTHORIZATION_HEADER, HttpRequest
from ..http.paths import request_path
from ..log import mask_token
from .policy import NO_ANONYMOUS_PATHS, AnonymousRules, is_anonymous
from .tokens import TokenProvider, is_blank

logger = logging.getLogger(__name__)

AnonymousPolicy = Callable[[str, str, AnonymousRules], bool]


class AuthOutcome(str, Enum):
    BEARER_ATTACHED = "BEARER_ATTACHED"
    SKIPPED = "SKIPPED"
    ANONYMOUS = "ANONYMOUS"
    INVALID_REQUEST_TARGET = "INVALID_REQUEST_TARGET"
    UNAUTHENTICATED = "UNAUTHENTICATED"


_FAILURES = {AuthOutcome.INVALID_REQUEST_TARGET, AuthOutcome.UNAUTHENTICATED}


@dataclass(frozen=True)
class AuthResult:
    outcome: AuthOutcome
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome not in _FAILURES

    def raise_for_error(self) -> None:
        """Raise the matching AuthenticationError for failed outcomes."""
        if self.outcome is AuthOutcome.INVALID_REQUEST_TARGET:
            raise InvalidRequestTarget(self.message or INVALID_TARGET)
        if self.outcome is AuthOutcome.UNAUTHENTICATED:
            raise Unauthenticated(self.message or ACCESS_TOKEN_UNAVAILABLE)


class BearerAuthenticator:
    """
    Attaches ``Authorization: Bearer <token>`` to outgoing requests.

    ``policy`` replaces the default anonymous-path decision when callers need
    behavior the declarative rules cannot express.
    """

    def __init__(
        self,
        tokens: TokenProvider,
        rules: AnonymousRules | None = None,
        *,
        policy: AnonymousPolicy | None = None,
    ):
        self.tokens = tokens
        self.rules = rules or NO_ANONYMOUS_PATHS
        self._policy = policy or is_anonymous

    def authenticate(self, request: HttpRequest) -> AuthResult:
        method = (request.method or "").strip().upper()
        if method == "HEAD":
            return AuthResult(AuthOutcome.SKIPPED, "HEAD requests are not authenticated")
        if request.authorization:
            return AuthResult(AuthOutcome.SKIPPED, "request already carries credentials")

        path = request_path(request.url)
        if path is None:
            return AuthResult(AuthOutcome.INVALID_REQUEST_TARGET, f"cannot resolve a path from request target {request.url!r}")

        token = self.tokens.get_token()
        if not is_blank(token):
            headers = request.headers if request.headers is not None else {}
            set_header(headers, AUTHORIZATION_HEADER, f"Bearer {str(token).strip()}")
            request.headers = headers
            logger.debug("Attached bearer %s to %s %s", mask_token(token), method, path)
            return AuthResult(AuthOutcome.BEARER_ATTACHED)

        if self._policy(method, path, self.rules):
            logger.debug("No token available; %s %s allowed anonymously", method, path)
            return AuthResult(AuthOutcome.ANONYMOUS)

        return AuthResult(AuthOutcome.UNAUTHENTICATED, ACCESS_TOKEN_UNAVAILABLE)


__all__ = ["AnonymousPolicy", "AuthOutcome", "AuthResult", "BearerAuthenticator"]
