from __future__ import annotations

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

"""bearerkit CLI: probe an API's health endpoint."""

import argparse
import json
import sys
from typing import Any

from ..config import HttpSettings, load_http_settings
from ..health import HealthCheckController, HealthResponse
from ..http import create_default_http_client
from ..log import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Probe the health endpoint of an API")
    parser.add_argument("base_url", help="API base URL, e.g. https://api.example.com")
    parser.add_argument(
        "--path",
        default=None,
        help="Health endpoint path (default: BEARERKIT_HEALTH_PATH or /health)",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of a one-line summary",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: BEARERKIT_LOG_LEVEL or WARNING)")
    return parser


def _report(controller: HealthCheckController, response: HealthResponse) -> dict[str, Any]:
    payload = controller.current_status().to_dict()
    payload["path"] = controller.path
    payload["response_status"] = response.status
    return payload


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings: HttpSettings = load_http_settings()
    settings.base_url = args.base_url
    if args.path:
        settings.health_path = args.path
    if args.timeout is not None:
        settings.timeout = args.timeout
    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    http_client = create_default_http_client(settings)
    try:
        controller = HealthCheckController(http_client, path=settings.health_path)
        response = controller.probe()
    finally:
        http_client.close()

    report = _report(controller, response)
    if args.json:
        json.dump(report, sys.stdout, indent=2, sort_keys=True)
        sys.stdout.write("\n")
    else:
        print(f"[bearerkit] {settings.base_url}{controller.path}: {report['status']} ({response.status})")

    return 0 if controller.available else 1


if __name__ == "__main__":
    raise SystemExit(main())
