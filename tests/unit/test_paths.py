# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from bearerkit.http.paths import normalize_path, paths_equal, request_path


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, "/"),
        ("", "/"),
        ("   ", "/"),
        ("/x?y=1", "/x"),
        ("  /api/users  ", "/api/users"),
        ("api/users", "/api/users"),
        ("/docs#section", "/docs"),
        ("?only=query", "/"),
        ("https://api.example.com/v1/items?page=2", "/v1/items"),
    ],
)
def test_normalize_path(raw, expected):
    assert normalize_path(raw) == expected


@pytest.mark.parametrize("raw", ["", " /A/b ", "x?y", "https://h/Z", "/health", "//double"])
def test_normalize_path_is_idempotent(raw):
    once = normalize_path(raw)
    assert normalize_path(once) == once


def test_paths_equal_ignores_case_and_query():
    assert paths_equal("/Public", "public?x=1")
    assert paths_equal("", "/")
    assert not paths_equal("/public", "/public/more")


def test_request_path_handles_absolute_and_relative_targets():
    assert request_path("https://api.example.com/v1/items?page=2") == "/v1/items"
    assert request_path("http://api.example.com") == "/"
    assert request_path("/v1/items?page=2") == "/v1/items"
    assert request_path("v1/items") == "/v1/items"
    assert request_path("") == "/"


@pytest.mark.parametrize("target", [None, "ftp://files.example.com/x", "http://[::1", "mailto:someone"])
def test_request_path_rejects_unresolvable_targets(target):
    assert request_path(target) is None


def test_request_path_strips_host_from_scheme_relative_targets():
    assert request_path("//api.example.com/admin?x=1") == "/admin"
    assert request_path("//api.example.com") == "/"
