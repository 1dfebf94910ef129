# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for bearerkit."""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("BEARERKIT_LOG_LEVEL", "WARNING").upper()

# Third-party loggers that echo full request lines (including query strings) at INFO.
_TRANSPORT_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None, *, quiet_transport: bool = True) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = getattr(logging, (level or DEFAULT_LOG_LEVEL).upper(), logging.WARNING)
    logging.basicConfig(
        level=effective_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if quiet_transport and effective_level > logging.DEBUG:
        for name in _TRANSPORT_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def mask_token(token: str | None) -> str:
    """Return a log-safe fingerprint of a bearer token."""
    if not token:
        return "<none>"
    if len(token) <= 8:
        return "***"
    return f"{token[:4]}...{token[-2:]}"


__all__ = ["mask_token", "setup_logging"]
