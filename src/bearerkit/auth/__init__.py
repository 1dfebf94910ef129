# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Request authentication exports."""

from .interceptor import AnonymousPolicy, AuthOutcome, AuthResult, BearerAuthenticator
from .policy import ANY_METHOD, HEALTH_PATH, NO_ANONYMOUS_PATHS, AnonymousRules, is_anonymous
from .tokens import (
    ACCESS_TOKEN_ENV,
    CallableTokenProvider,
    EnvTokenProvider,
    StaticTokenProvider,
    TokenProvider,
)

__all__ = [
    "ACCESS_TOKEN_ENV",
    "ANY_METHOD",
    "AnonymousPolicy",
    "AnonymousRules",
    "AuthOutcome",
    "AuthResult",
    "BearerAuthenticator",
    "CallableTokenProvider",
    "EnvTokenProvider",
    "HEALTH_PATH",
    "NO_ANONYMOUS_PATHS",
    "StaticTokenProvider",
    "TokenProvider",
    "is_anonymous",
]
