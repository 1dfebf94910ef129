# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from bearerkit.auth.interceptor import AuthOutcome, AuthResult, BearerAuthenticator
from bearerkit.auth.policy import AnonymousRules
from bearerkit.auth.tokens import CallableTokenProvider, EnvTokenProvider, StaticTokenProvider
from bearerkit.errors import InvalidRequestTarget, Unauthenticated
from bearerkit.http.models import HttpRequest


class CountingTokens:
    def __init__(self, token):
        self.token = token
        self.calls = 0

    def get_token(self):
        self.calls += 1
        return self.token


RULES = AnonymousRules.build(["/public"], {"/admin": ["*"], "/reports": ["GET"]})


@pytest.mark.parametrize("token", ["abc123", None, ""])
@pytest.mark.parametrize("url", ["/private", "/public", "/health"])
def test_head_requests_are_never_authenticated(token, url):
    tokens = CountingTokens(token)
    request = HttpRequest(url=url, method="HEAD")
    result = BearerAuthenticator(tokens, RULES).authenticate(request)
    assert result.outcome is AuthOutcome.SKIPPED
    assert request.authorization == ""
    assert tokens.calls == 0


def test_existing_authorization_is_never_overwritten():
    tokens = CountingTokens("fresh")
    request = HttpRequest(url="/private", headers={"authorization": "Basic dXNlcjpwYXNz"})
    result = BearerAuthenticator(tokens).authenticate(request)
    assert result.outcome is AuthOutcome.SKIPPED
    assert request.headers == {"authorization": "Basic dXNlcjpwYXNz"}
    assert tokens.calls == 0


def test_token_is_attached_even_on_anonymous_paths():
    request = HttpRequest(url="https://api.example.com/public?x=1")
    result = BearerAuthenticator(StaticTokenProvider("tok"), RULES).authenticate(request)
    assert result.outcome is AuthOutcome.BEARER_ATTACHED
    assert result.ok
    assert request.headers == {"Authorization": "Bearer tok"}


def test_token_is_attached_to_existing_headers():
    request = HttpRequest(url="/private", method="POST", headers={"Accept": "application/json"})
    BearerAuthenticator(StaticTokenProvider("  tok  ")).authenticate(request)
    assert request.headers == {"Accept": "application/json", "Authorization": "Bearer tok"}


def test_reinvocation_on_authorized_request_is_noop():
    authenticator = BearerAuthenticator(StaticTokenProvider("one"))
    request = HttpRequest(url="/private")
    authenticator.authenticate(request)
    authenticator.tokens = StaticTokenProvider("two")
    assert authenticator.authenticate(request).outcome is AuthOutcome.SKIPPED
    assert request.authorization == "Bearer one"


@pytest.mark.parametrize("token", [None, "", "   "])
def test_blank_token_on_protected_path_fails(token):
    request = HttpRequest(url="/private")
    result = BearerAuthenticator(StaticTokenProvider(token), RULES).authenticate(request)
    assert result.outcome is AuthOutcome.UNAUTHENTICATED
    assert result.ok is False
    assert request.authorization == ""
    with pytest.raises(Unauthenticated, match="access token not available at this time"):
        result.raise_for_error()


@pytest.mark.parametrize(
    ("method", "url"),
    [("GET", "/public"), ("DELETE", "/admin"), ("GET", "/reports?year=2024"), ("POST", "/health")],
)
def test_blank_token_on_anonymous_path_proceeds(method, url):
    request = HttpRequest(url=url, method=method)
    result = BearerAuthenticator(StaticTokenProvider(None), RULES).authenticate(request)
    assert result.outcome is AuthOutcome.ANONYMOUS
    assert request.headers is None
    result.raise_for_error()


def test_method_scoped_rule_rejects_other_methods():
    result = BearerAuthenticator(StaticTokenProvider(None), RULES).authenticate(HttpRequest(url="/reports", method="POST"))
    assert result.outcome is AuthOutcome.UNAUTHENTICATED


@pytest.mark.parametrize("url", [None, "ftp://files.example.com/x"])
def test_unresolvable_target_fails_before_token_lookup(url):
    tokens = CountingTokens("tok")
    result = BearerAuthenticator(tokens).authenticate(HttpRequest(url=url))
    assert result.outcome is AuthOutcome.INVALID_REQUEST_TARGET
    assert tokens.calls == 0
    with pytest.raises(InvalidRequestTarget):
        result.raise_for_error()


def test_custom_policy_replaces_rules():
    seen = []

    def allow_all_gets(method, path, rules):
        seen.append((method, path, rules))
        return method == "GET"

    authenticator = BearerAuthenticator(StaticTokenProvider(None), RULES, policy=allow_all_gets)
    assert authenticator.authenticate(HttpRequest(url="/anything?q=1", method="get")).outcome is AuthOutcome.ANONYMOUS
    assert authenticator.authenticate(HttpRequest(url="/public", method="POST")).outcome is AuthOutcome.UNAUTHENTICATED
    assert seen[0] == ("GET", "/anything", RULES)


def test_auth_result_default_messages():
    with pytest.raises(InvalidRequestTarget, match="missing or malformed"):
        AuthResult(AuthOutcome.INVALID_REQUEST_TARGET).raise_for_error()
    AuthResult(AuthOutcome.BEARER_ATTACHED).raise_for_error()


def test_token_providers(monkeypatch):
    monkeypatch.setenv("BEARERKIT_ACCESS_TOKEN", "from-env")
    assert EnvTokenProvider().get_token() == "from-env"
    monkeypatch.delenv("BEARERKIT_ACCESS_TOKEN")
    assert EnvTokenProvider().get_token() is None
    assert CallableTokenProvider(lambda: "cb").get_token() == "cb"
