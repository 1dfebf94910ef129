# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from bearerkit.auth.policy import NO_ANONYMOUS_PATHS, AnonymousRules, is_anonymous


@pytest.fixture
def rules():
    return AnonymousRules.build(["/public"], {"/admin": ["*"]})


@pytest.mark.parametrize("method", ["GET", "POST", "DELETE", "*"])
def test_health_is_always_anonymous(method):
    deny_health = AnonymousRules.build([], {"/health": []})
    assert is_anonymous(method, "/health", NO_ANONYMOUS_PATHS)
    assert is_anonymous(method, "/HEALTH?verbose=1", deny_health)


def test_wildcard_method_rule(rules):
    assert is_anonymous("DELETE", "/admin", rules)
    assert is_anonymous("get", "/Admin/", rules) is False  # trailing slash is a different path


def test_blanket_rule_applies_to_any_method(rules):
    for method in ("GET", "POST", "PATCH"):
        assert is_anonymous(method, "/public", rules)
    assert is_anonymous("GET", "/PUBLIC?page=1", rules)


def test_unmatched_path_is_not_anonymous(rules):
    assert is_anonymous("GET", "/other", rules) is False
    assert is_anonymous("GET", "/other") is False


def test_empty_method_set_denies_even_when_blanket_allows():
    rules = AnonymousRules.build(["/x"], {"/x": []})
    for method in ("GET", "POST", "*"):
        assert is_anonymous(method, "/x", rules) is False


def test_method_scoped_rule_matches_methods_case_insensitively():
    rules = AnonymousRules.build([], {"/x": ["get"]})
    assert is_anonymous("GET", "/x", rules)
    assert is_anonymous("get", "/X", rules)
    assert is_anonymous("POST", "/x", rules) is False


def test_method_rule_short_circuits_blanket_rule():
    rules = AnonymousRules.build(["/x"], {"/x": ["GET"]})
    assert is_anonymous("GET", "/x", rules)
    assert is_anonymous("POST", "/x", rules) is False


def test_rules_are_normalized_on_construction():
    rules = AnonymousRules.build([" public "], {"Admin?x=1": ["get", " post "]})
    assert rules.blanket_paths == ("/public",)
    assert rules.methods_for("/admin") == frozenset({"GET", "POST"})
    assert rules.methods_for("/missing") is None


def test_first_duplicate_method_rule_wins():
    rules = AnonymousRules(method_paths=(("/x", frozenset({"GET"})), ("/X", frozenset())))
    assert rules.methods_for("/x") == frozenset({"GET"})
    assert rules.allows("GET", "/x")


def test_rules_are_immutable(rules):
    with pytest.raises(AttributeError):
        rules.blanket_paths = ("/new",)


def test_rules_accept_mapping_of_method_paths():
    rules = AnonymousRules(blanket_paths=["/public"], method_paths={"/x": ["GET"], "/admin": ["get", "post"]})
    assert rules.methods_for("/x") == frozenset({"GET"})
    assert rules.methods_for("/admin") == frozenset({"GET", "POST"})
    assert is_anonymous("GET", "/x", rules)
    assert is_anonymous("POST", "/admin", rules)
    assert is_anonymous("DELETE", "/admin", rules) is False


def test_bare_method_string_is_one_method():
    built = AnonymousRules.build([], {"/x": "GET"})
    direct = AnonymousRules(method_paths={"/y": "post"})
    assert built.methods_for("/x") == frozenset({"GET"})
    assert direct.methods_for("/y") == frozenset({"POST"})
    assert is_anonymous("GET", "/x", built)
    assert is_anonymous("POST", "/y", direct)


def test_bare_blanket_path_string_is_one_path():
    rules = AnonymousRules.build("/public")
    assert rules.blanket_paths == ("/public",)
