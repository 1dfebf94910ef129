# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level bearerkit facade wiring a shared client, token source and health tracker."""

from __future__ import annotations

from contextlib import suppress
from typing import TypeVar

from .auth.interceptor import AnonymousPolicy
from .auth.policy import AnonymousRules
from .auth.tokens import EnvTokenProvider, TokenProvider
from .config import HttpSettings, load_http_settings
from .health import HealthCheckController, HealthState
from .http.client import HttpClient, create_default_http_client
from .section import AuthenticatedSection

SectionT = TypeVar("SectionT", bound=AuthenticatedSection)


class BearerKit:
    """
    Convenience wrapper sharing one HTTP client across sections and the health probe.

    Successful section calls feed the health tracker, so a busy client rarely
    needs to probe ``/health`` at all.
    """

    def __init__(
        self,
        tokens: TokenProvider | None = None,
        *,
        http_client: HttpClient | None = None,
        settings: HttpSettings | None = None,
    ):
        self.http_settings = settings or load_http_settings()
        self.http_client = http_client or create_default_http_client(self.http_settings)
        self.tokens = tokens or EnvTokenProvider()
        self.health = HealthCheckController(
            self.http_client,
            path=self.http_settings.health_path,
            freshness_seconds=self.http_settings.health_freshness_seconds,
        )

    def section(
        self,
        section_cls: type[SectionT] = AuthenticatedSection,  # type: ignore[assignment]
        *,
        rules: AnonymousRules | None = None,
        policy: AnonymousPolicy | None = None,
    ) -> SectionT:
        return section_cls(
            self.http_client,
            self.tokens,
            rules=rules,
            policy=policy,
            on_healthy=self.health.set_health,
        )

    def status(self) -> HealthState:
        """Cached health, probing first when it is missing or stale."""
        return self.health.ensure_fresh()

    def close(self) -> None:
        with suppress(Exception):
            self.http_client.close()

    def __enter__(self) -> BearerKit:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
