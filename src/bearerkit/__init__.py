"""
    bearerkit, bearer-token HTTP client toolkit with cached API health tracking.
    Copyright (C) 2025  Theori Inc.

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU Affero General Public License as published
    by the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU Affero General Public License for more details.

    You should have received a copy of the GNU Affero General Public License
    along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

"""
bearerkit package entrypoint.

Outgoing requests pass through a bearer-token authenticator that consults an
anonymous-path policy when no token is available, and a cached, debounced
health probe tracks whether the remote API is up. HTTP behavior is abstracted
behind an injectable client interface.
"""

from .auth import (
    AnonymousRules,
    AuthOutcome,
    AuthResult,
    BearerAuthenticator,
    EnvTokenProvider,
    StaticTokenProvider,
    TokenProvider,
    is_anonymous,
)
from .config import HttpSettings, load_http_settings
from .errors import (
    AuthenticationError,
    BearerkitError,
    ErrorCategory,
    HttpStatusError,
    InvalidRequestTarget,
    ProbeCancelled,
    ResponseDecodeError,
    TransportError,
    Unauthenticated,
)
from .health import HealthCheckController, HealthResponse, HealthState, HealthStatus
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
    ensure_success,
    normalize_path,
    paths_equal,
)
from .log import setup_logging
from .runtime import BearerKit
from .section import AuthenticatedSection, ControllerSection
from .version import __version__

__all__ = [
    "AnonymousRules",
    "AuthOutcome",
    "AuthResult",
    "AuthenticatedSection",
    "AuthenticationError",
    "BearerAuthenticator",
    "BearerKit",
    "BearerkitError",
    "ControllerSection",
    "EnvTokenProvider",
    "ErrorCategory",
    "HealthCheckController",
    "HealthResponse",
    "HealthState",
    "HealthStatus",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpSettings",
    "HttpStatusError",
    "HttpxClient",
    "InvalidRequestTarget",
    "ProbeCancelled",
    "ResponseDecodeError",
    "StaticTokenProvider",
    "StubHttpClient",
    "TokenProvider",
    "TransportError",
    "Unauthenticated",
    "__version__",
    "create_default_http_client",
    "ensure_success",
    "is_anonymous",
    "load_http_settings",
    "normalize_path",
    "paths_equal",
    "setup_logging",
]
