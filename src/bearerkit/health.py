# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Cached liveness tracking for a remote API.

HealthCheckController keeps a boolean ``available`` flag fresh without
hammering the remote ``/health`` endpoint: ``ensure_fresh()`` probes only when
the cached result is missing or older than the freshness window, and a single
lock keeps at most one probe in flight. Concurrent callers wait for that probe
and then observe its result. Listeners are notified only when ``available``
flips.

Probe failures are data, not control flow: they produce an unhealthy status
with a descriptive message. Cancellation is the one exception; a cancelled
probe raises ``ProbeCancelled`` and leaves the cached state untouched.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

from .config import DEFAULT_HEALTH_FRESHNESS_SECONDS, DEFAULT_HEALTH_PATH
from .errors import ProbeCancelled, ResponseDecodeError, describe_exception
from .http.client import HttpClient
from .http.models import HttpRequest
from .http.response import ensure_success

logger = logging.getLogger(__name__)

HEALTHY_STATUS = "Healthy"
UNHEALTHY_PREFIX = "UnHealthy"
NEVER_CHECKED = datetime.min.replace(tzinfo=timezone.utc)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HealthStatus(str, Enum):
    UNKNOWN = "UNKNOWN"
    HEALTHY = "HEALTHY"
    UNHEALTHY = "UNHEALTHY"


@dataclass(frozen=True)
class HealthState:
    """Immutable snapshot of the cached health result."""

    available: bool = False
    checked_at: datetime = NEVER_CHECKED
    last_status: str = ""

    @property
    def status(self) -> HealthStatus:
        if self.checked_at == NEVER_CHECKED:
            return HealthStatus.UNKNOWN
        return HealthStatus.HEALTHY if self.available else HealthStatus.UNHEALTHY

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "available": self.available,
            "checked_at": None if self.checked_at == NEVER_CHECKED else self.checked_at.isoformat(),
            "last_status": self.last_status,
        }


@dataclass(frozen=True)
class HealthResponse:
    """Body of the liveness endpoint, or a synthesized failure description."""

    status: str

    @property
    def healthy(self) -> bool:
        return self.status == HEALTHY_STATUS

    @classmethod
    def failure(cls, reason: str) -> HealthResponse:
        return cls(status=f"{UNHEALTHY_PREFIX}: {reason}")

    @classmethod
    def from_payload(cls, payload: Any) -> HealthResponse:
        if not isinstance(payload, dict):
            raise ResponseDecodeError(f"expected a JSON object from the health endpoint, got {type(payload).__name__}")
        # property names match case-insensitively ("status" or "Status")
        for key, value in payload.items():
            if str(key).lower() == "status":
                return cls(status="" if value is None else str(value))
        return cls(status="")


HealthListener = Callable[["HealthCheckController", bool], None]


class HealthCheckController:
    """
    Debounced, cached health probe for one remote API.

    ``client`` is expected to resolve ``path`` against the API's base URL.
    """

    def __init__(
        self,
        client: HttpClient,
        *,
        path: str = DEFAULT_HEALTH_PATH,
        freshness_seconds: float = DEFAULT_HEALTH_FRESHNESS_SECONDS,
        clock: Callable[[], datetime] | None = None,
    ):
        self._client = client
        self.path = path
        self.freshness = timedelta(seconds=freshness_seconds)
        self._clock = clock or _utcnow
        self._state = HealthState()
        self._probe_lock = threading.Lock()
        self._state_lock = threading.Lock()
        self._listeners: list[HealthListener] = []

    @property
    def available(self) -> bool:
        return self._state.available

    @property
    def checked_at(self) -> datetime:
        return self._state.checked_at

    def current_status(self) -> HealthState:
        """Return the cached snapshot; never blocks and never probes."""
        return self._state

    def subscribe(self, listener: HealthListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that unregisters it."""
        with self._state_lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._state_lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def is_stale(self) -> bool:
        state = self._state
        if state.status is HealthStatus.UNKNOWN:
            return True
        return self._clock() - state.checked_at > self.freshness

    def ensure_fresh(self, cancel: threading.Event | None = None) -> HealthState:
        """Probe if the cached result is missing or stale; otherwise return it as is."""
        with self._probe_lock:
            if self.is_stale():
                self._probe(cancel)
        return self._state

    def probe(self, cancel: threading.Event | None = None) -> HealthResponse:
        """Query the liveness endpoint and record the outcome."""
        with self._probe_lock:
            return self._probe(cancel)

    def _probe(self, cancel: threading.Event | None) -> HealthResponse:
        self._raise_if_cancelled(cancel)
        try:
            result = self._fetch()
        except Exception as exc:  # noqa: BLE001
            self._raise_if_cancelled(cancel, exc)
            logger.warning("Health probe of %s failed: %s", self.path, exc)
            result = HealthResponse.failure(describe_exception(exc))
        else:
            self._raise_if_cancelled(cancel)
            if result is None:
                result = HealthResponse.failure("null response")

        logger.debug("Health probe of %s returned %r", self.path, result.status)
        self.set_health(result.healthy, status=result.status)
        return result

    def set_health(self, value: bool = True, *, status: str | None = None) -> None:
        """
        Record a health observation and notify listeners if ``available`` flipped.

        Used by ``probe()``; callers may also invoke it directly (e.g. after a
        successful API call, or to force a value in tests).
        """
        with self._state_lock:
            previous = self._state
            self._state = replace(
                previous,
                available=value,
                checked_at=self._clock(),
                last_status=status if status is not None else (HEALTHY_STATUS if value else UNHEALTHY_PREFIX),
            )
            listeners = list(self._listeners) if previous.available != value else []

        if listeners:
            logger.info("Health of %s changed: available=%s", self.path, value)
        for listener in listeners:
            try:
                listener(self, value)
            except Exception:  # noqa: BLE001
                logger.exception("Health change listener %r failed", listener)

    def _fetch(self) -> HealthResponse | None:
        response = self._client.request(HttpRequest(url=self.path, method="GET", headers={"Accept": "application/json"}))
        ensure_success(response)
        if response.is_no_content or not (response.text or response.content).strip():
            return None
        return HealthResponse.from_payload(response.json())

    @staticmethod
    def _raise_if_cancelled(cancel: threading.Event | None, cause: BaseException | None = None) -> None:
        if cancel is not None and cancel.is_set():
            raise ProbeCancelled("health probe cancelled") from cause


__all__ = [
    "HEALTHY_STATUS",
    "HealthCheckController",
    "HealthListener",
    "HealthResponse",
    "HealthState",
    "HealthStatus",
]
