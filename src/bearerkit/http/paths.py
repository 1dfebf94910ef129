# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Request path matching.

Paths are compared in a canonical form: trimmed, stripped of query string and
fragment, always starting with ``/``, and compared case-insensitively. An empty
or missing path is the root ``/``.
"""

from __future__ import annotations

from urllib.parse import urlsplit

_HTTP_SCHEMES = {"http", "https"}


def normalize_path(path: str | None) -> str:
    """Return the canonical form of ``path``; never fails."""
    raw = str(path or "").strip()
    if "://" in raw:
        try:
            raw = urlsplit(raw).path
        except ValueError:
            pass
    for sep in ("?", "#"):
        raw = raw.split(sep, 1)[0]
    raw = raw.strip()
    if not raw:
        return "/"
    if not raw.startswith("/"):
        raw = f"/{raw}"
    return raw


def paths_equal(a: str | None, b: str | None) -> bool:
    """Case-insensitive comparison of two normalized paths."""
    return normalize_path(a).casefold() == normalize_path(b).casefold()


def request_path(target: object) -> str | None:
    """
    Extract the path component of a request target.

    Absolute http(s) and scheme-relative URLs yield their path; relative
    targets are cut at the query string. Returns ``None`` when the target is missing or cannot be parsed.
    """
    if target is None:
        return None
    if not isinstance(target, str):
        target = str(target)
    raw = target.strip()
    try:
        parts = urlsplit(raw)
    except ValueError:
        return None
    if parts.scheme:
        if parts.scheme.lower() not in _HTTP_SCHEMES or not parts.netloc:
            return None
        return normalize_path(parts.path)
    if parts.netloc:
        # scheme-relative target, e.g. "//api.example.com/admin"
        return normalize_path(parts.path)
    return normalize_path(raw)


__all__ = ["normalize_path", "paths_equal", "request_path"]
