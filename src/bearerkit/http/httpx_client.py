# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging

import httpx

from ..config import HttpSettings, load_http_settings
from .client import HttpClient
from .headers import normalize_headers, set_header
from .models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper resolving relative targets against ``base_url``."""

    def __init__(self, settings: HttpSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_http_settings()
        self._client = client or httpx.Client(
            base_url=self.settings.base_url or "",
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        if self.settings.user_agent and not any(k.lower() == "user-agent" for k in headers):
            set_header(headers, "User-Agent", self.settings.user_agent)

        try:
            max_body_bytes = self.settings.max_body_bytes
            if max_body_bytes <= 0:
                max_body_bytes = 16 * 1024 * 1024

            timeout = request.timeout if request.timeout is not None else self.settings.timeout

            with self._client.stream(
                request.method,
                request.url or "",
                headers=headers,
                content=request.body,
                json=request.json,
                timeout=timeout,
                follow_redirects=request.allow_redirects,
            ) as resp:
                content = bytearray()
                truncated = False
                for chunk in resp.iter_bytes():
                    if not chunk:
                        continue
                    remaining = max_body_bytes - len(content)
                    if len(chunk) > remaining:
                        content.extend(chunk[:remaining])
                        truncated = True
                        break
                    content.extend(chunk)

                encoding = resp.encoding or "utf-8"
                try:
                    text = bytes(content).decode(encoding, errors="replace")
                except LookupError:
                    text = bytes(content).decode("utf-8", errors="replace")

            if truncated:
                logger.warning("Response body from %s truncated at %d bytes", resp.url, max_body_bytes)
            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                reason=resp.reason_phrase,
                headers=normalize_headers(resp.headers),
                text=text,
                content=bytes(content),
                url=str(resp.url),
                meta={"body_truncated": truncated},
            )
        except Exception as exc:  # noqa: BLE001
            logger.debug("Transport failure for %s %s: %s", request.method, request.url, exc)
            return HttpResponse(
                ok=False,
                error_message=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
            )

    def close(self) -> None:
        self._client.close()
