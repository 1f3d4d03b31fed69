"""Package name matching against comma-separated exact names and globs."""

from __future__ import annotations


def split_patterns(patterns: str) -> list[str]:
    """Split a comma-separated pattern list, dropping blank entries."""
    return [p.strip() for p in patterns.split(",") if p.strip()]


def match_one(name: str, pattern: str) -> bool:
    """Match a name against a single entry.

    Supported forms: ``exact``, ``*suffix``, ``prefix*`` and ``*substring*``.
    Matching is case-sensitive.
    """
    if len(pattern) >= 2 and pattern.startswith("*") and pattern.endswith("*"):
        return pattern[1:-1] in name
    if pattern.startswith("*"):
        return name.endswith(pattern[1:])
    if pattern.endswith("*"):
        return name.startswith(pattern[:-1])
    return name == pattern


def matches(name: str, patterns: str) -> bool:
    """Return True if ``name`` matches any entry of ``patterns``."""
    return any(match_one(name, p) for p in split_patterns(patterns))
