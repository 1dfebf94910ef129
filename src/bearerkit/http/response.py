# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Response success checking."""

from __future__ import annotations

from ..errors import HttpStatusError, TransportError
from .models import HttpResponse


def ensure_success(response: HttpResponse) -> HttpResponse:
    """
    Raise unless ``response`` carries a 2xx status.

    Unlike a bare raise-for-status, a non-blank response body becomes the error
    message so server-side explanations reach the caller. Transport failures
    (no status at all) raise ``TransportError``.
    """
    if not response.ok or response.status_code is None:
        raise TransportError(response.error_message or "request failed without a response", error_type=response.error_type)
    if response.is_success:
        return response

    body = (response.text or "").strip()
    if body:
        message = body
    else:
        message = f"{response.status_code} {response.reason or ''}".strip()
    raise HttpStatusError(message, status_code=response.status_code, reason=response.reason)


__all__ = ["ensure_success"]
