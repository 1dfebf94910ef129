# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Anonymous-path policy.

Decides whether a request may be sent without a bearer token. Two rule layers
exist: blanket paths exempt for every method, and method-scoped paths listing
the methods (or ``*``) that are exempt. A method-scoped entry for a path wins
over the blanket layer even when its answer is "not anonymous"; an empty method
set is an explicit deny. ``/health`` is always anonymous.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from ..http.paths import normalize_path, paths_equal

HEALTH_PATH = "/health"
ANY_METHOD = "*"


def _path_key(path: str | None) -> str:
    return normalize_path(path).casefold()


def _method_set(methods: str | Iterable[str]) -> frozenset[str]:
    """Upper-cased method names; a bare string is one method, not a sequence of letters."""
    if isinstance(methods, str):
        methods = (methods,)
    return frozenset(str(m).strip().upper() for m in methods)


@dataclass(frozen=True)
class AnonymousRules:
    """
    Declarative anonymous-path configuration, normalized on construction.

    ``method_paths`` may be given as ``(path, methods)`` pairs or as a
    ``{path: methods}`` mapping; a bare method string names one method.
    """

    blanket_paths: tuple[str, ...] = ()
    method_paths: tuple[tuple[str, frozenset[str]], ...] = field(default=())

    def __post_init__(self) -> None:
        blanket = (self.blanket_paths,) if isinstance(self.blanket_paths, str) else self.blanket_paths
        object.__setattr__(self, "blanket_paths", tuple(normalize_path(p) for p in blanket))
        entries = self.method_paths.items() if isinstance(self.method_paths, Mapping) else self.method_paths
        rules: list[tuple[str, frozenset[str]]] = []
        seen: set[str] = set()
        for path, methods in entries:
            key = _path_key(path)
            # first entry for a path wins
            if key in seen:
                continue
            seen.add(key)
            rules.append((normalize_path(path), _method_set(methods)))
        object.__setattr__(self, "method_paths", tuple(rules))

    @classmethod
    def build(
        cls,
        blanket_paths: str | Iterable[str] | None = None,
        method_paths: Mapping[str, str | Iterable[str]] | None = None,
    ) -> AnonymousRules:
        """Build rules from a path list and a ``{path: [methods]}`` mapping."""
        return cls(
            blanket_paths=blanket_paths or (),
            method_paths=method_paths or (),
        )

    def methods_for(self, path: str | None) -> frozenset[str] | None:
        """Allowed methods of the method-scoped entry matching ``path``, or None when absent."""
        for rule_path, methods in self.method_paths:
            if paths_equal(rule_path, path):
                return methods
        return None

    def allows(self, method: str, path: str | None) -> bool:
        return is_anonymous(method, path, self)


NO_ANONYMOUS_PATHS = AnonymousRules()


def is_anonymous(method: str, path: str | None, rules: AnonymousRules = NO_ANONYMOUS_PATHS) -> bool:
    """Return True when ``method path`` may be sent without authentication."""
    if paths_equal(path, HEALTH_PATH):
        return True

    methods = rules.methods_for(path)
    if methods is not None:
        if not methods:
            return False
        return ANY_METHOD in methods or str(method or "").strip().upper() in methods

    return any(paths_equal(p, path) for p in rules.blanket_paths)


__all__ = ["ANY_METHOD", "AnonymousRules", "HEALTH_PATH", "NO_ANONYMOUS_PATHS", "is_anonymous"]
