# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header utilities.

HTTP header field names are case-insensitive (RFC 9110), while requests carry headers as
plain dicts. These helpers read and replace entries without caring how callers cased them.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping


def normalize_headers(headers: Mapping[object, object] | None) -> dict[str, str]:
    """Return a lowercase-keyed copy of a header mapping."""
    out: dict[str, str] = {}
    for key, value in (headers or {}).items():
        if key is None:
            continue
        name = str(key).strip().lower()
        if not name:
            continue
        out[name] = "" if value is None else str(value)
    return out


def header_value(headers: Mapping[object, object] | None, name: str, default: str = "") -> str:
    """Return a stripped header value using case-insensitive key matching."""
    if not headers or not name:
        return default

    if name in headers:
        value = headers.get(name)
        return default if value is None else str(value).strip()

    lower = name.lower()
    for key, value in headers.items():
        if key is not None and str(key).lower() == lower:
            return default if value is None else str(value).strip()
    return default


def set_header(headers: MutableMapping[str, str], name: str, value: str) -> None:
    """Set ``name`` to ``value``, dropping any differently-cased duplicates first."""
    lower = name.lower()
    for key in [k for k in headers if str(k).lower() == lower]:
        del headers[key]
    headers[name] = value


__all__ = ["header_value", "normalize_headers", "set_header"]
