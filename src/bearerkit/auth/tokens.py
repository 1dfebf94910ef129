# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Access token sources consumed by the authenticator."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import Protocol

ACCESS_TOKEN_ENV = "BEARERKIT_ACCESS_TOKEN"


class TokenProvider(Protocol):
    """Supplies an opaque bearer token, or ``None``/blank when none is available."""

    def get_token(self) -> str | None: ...


class StaticTokenProvider:
    """Always returns the same token."""

    def __init__(self, token: str | None):
        self.token = token

    def get_token(self) -> str | None:
        return self.token


class CallableTokenProvider:
    """Adapts a zero-argument callable (e.g. a cache lookup) to TokenProvider."""

    def __init__(self, fetch: Callable[[], str | None]):
        self._fetch = fetch

    def get_token(self) -> str | None:
        return self._fetch()


class EnvTokenProvider:
    """Reads the token from the environment at call time."""

    def __init__(self, name: str = ACCESS_TOKEN_ENV):
        self.name = name

    def get_token(self) -> str | None:
        return os.getenv(self.name)


def is_blank(token: str | None) -> bool:
    return token is None or not str(token).strip()


__all__ = [
    "ACCESS_TOKEN_ENV",
    "CallableTokenProvider",
    "EnvTokenProvider",
    "StaticTokenProvider",
    "TokenProvider",
    "is_blank",
]
