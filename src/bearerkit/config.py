# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for bearerkit."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"bearerkit/{__version__}"
DEFAULT_HEALTH_PATH = "/health"
DEFAULT_HEALTH_FRESHNESS_SECONDS = 30 * 60.0


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class HttpSettings:
    """HTTP client and health probe defaults."""

    base_url: str = ""
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True
    max_body_bytes: int = 16 * 1024 * 1024
    health_path: str = DEFAULT_HEALTH_PATH
    health_freshness_seconds: float = DEFAULT_HEALTH_FRESHNESS_SECONDS

    @classmethod
    def from_env(cls) -> "HttpSettings":
        """Create settings from environment variables (evaluated at call time)."""
        max_body_bytes = _int_env("BEARERKIT_HTTP_MAX_BODY_BYTES", cls.max_body_bytes)
        if max_body_bytes <= 0:
            max_body_bytes = cls.max_body_bytes
        freshness = _float_env("BEARERKIT_HEALTH_FRESHNESS", cls.health_freshness_seconds)
        if freshness < 0:
            freshness = cls.health_freshness_seconds
        return cls(
            base_url=os.getenv("BEARERKIT_BASE_URL", cls.base_url),
            timeout=_float_env("BEARERKIT_HTTP_TIMEOUT", cls.timeout),
            user_agent=os.getenv("BEARERKIT_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("BEARERKIT_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("BEARERKIT_HTTP_VERIFY_SSL", cls.verify_ssl),
            max_body_bytes=max_body_bytes,
            health_path=os.getenv("BEARERKIT_HEALTH_PATH", cls.health_path) or cls.health_path,
            health_freshness_seconds=freshness,
        )


def load_http_settings() -> HttpSettings:
    """Load HTTP settings from environment with sensible defaults."""
    return HttpSettings.from_env()
