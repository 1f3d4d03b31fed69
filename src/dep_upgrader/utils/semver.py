"""Semantic Versioning 2.0.0 parsing, precedence, diff and bump utilities.

Parsing, precedence and the plain bumps come from the ``semver`` package;
this module adds the leading-``v`` handling, the textual diff and the
pre-release prototype rules on top.
"""

from __future__ import annotations

import re
from typing import Union

import semver

from dep_upgrader.models import BumpKind, DiffKind
from dep_upgrader.models.version import SemanticVersion

VersionLike = Union[SemanticVersion, str]

# Splits a pre-release string into (prefix, trailing digit run).
_TRAILING_NUMBER_RE = re.compile(r"(?P<prefix>.*?)(?P<number>[0-9]*)")

# Prototype meaning "no explicit prototype, keep the previous prefix".
INCREMENT_SENTINEL = "+"

FIELDS = ("major", "minor", "patch", "release", "prerel", "prerelease", "build")


class ParseError(ValueError):
    """Raised when a string is not a valid semantic version."""


class UsageError(ValueError):
    """Raised for invalid combinations of bump/get arguments."""


def _strip_v(text: str) -> str:
    return text[1:] if text[:1] in ("v", "V") else text


def _from_library(v: semver.Version) -> SemanticVersion:
    return SemanticVersion(
        major=v.major,
        minor=v.minor,
        patch=v.patch,
        prerelease=tuple(v.prerelease.split(".")) if v.prerelease else (),
        build=tuple(v.build.split(".")) if v.build else (),
    )


def _to_library(v: SemanticVersion) -> semver.Version:
    return semver.Version(
        v.major,
        v.minor,
        v.patch,
        prerelease=v.prerelease_str or None,
        build=v.build_str or None,
    )


def parse(text: str) -> SemanticVersion:
    """Parse ``text`` into a SemanticVersion.

    A leading ``v`` or ``V`` is accepted and stripped.
    Raises ParseError when the text does not match the semver grammar.
    """
    try:
        return _from_library(semver.Version.parse(_strip_v(text)))
    except ValueError as exc:
        raise ParseError(f"Invalid semantic version: {text!r}") from exc


def is_valid(text: str) -> bool:
    return semver.Version.is_valid(_strip_v(text))


def _coerce(v: VersionLike) -> SemanticVersion:
    return v if isinstance(v, SemanticVersion) else parse(v)


def compare(a: VersionLike, b: VersionLike) -> int:
    """Compare two versions by semver precedence.

    Returns -1, 0 or 1. Build metadata is ignored. Strings are parsed
    first and may raise ParseError.
    """
    return _to_library(_coerce(a)).compare(_to_library(_coerce(b)))


def diff(a: VersionLike, b: VersionLike) -> DiffKind:
    """Return the highest-precedence field that differs between two versions.

    Pre-release and build are compared as whole strings, not by precedence.
    """
    va, vb = _coerce(a), _coerce(b)
    if va.major != vb.major:
        return DiffKind.MAJOR
    if va.minor != vb.minor:
        return DiffKind.MINOR
    if va.patch != vb.patch:
        return DiffKind.PATCH
    if va.prerelease_str != vb.prerelease_str:
        return DiffKind.PRERELEASE
    if va.build_str != vb.build_str:
        return DiffKind.BUILD
    return DiffKind.NONE


def _next_prerelease(previous: str, prototype: str) -> str:
    if not prototype.endswith("."):
        return prototype

    proto = prototype[:-1]
    match = _TRAILING_NUMBER_RE.fullmatch(previous)
    prefix = match.group("prefix")
    number = int(match.group("number")) if match.group("number") else None

    if proto == INCREMENT_SENTINEL:
        return f"{prefix}{number + 1 if number is not None else 1}"
    if proto != prefix:
        return f"{proto}1"
    if number is not None:
        return f"{proto}{number + 1}"
    return f"{proto}1"


def _revalidate(v: semver.Version, prototype: str) -> SemanticVersion:
    # Version.replace does not check the pre-release/build syntax
    text = str(v)
    try:
        return parse(text)
    except ParseError as exc:
        raise UsageError(f"Prototype {prototype!r} yields invalid version {text!r}") from exc


def bump(
    kind: BumpKind | str,
    version: VersionLike,
    prototype: str | None = None,
) -> SemanticVersion:
    """Produce a new version from ``version`` according to ``kind``.

    ``prerelease`` and ``build`` bumps require a ``prototype``; see
    _next_prerelease for how a trailing ``.`` turns the prototype into an
    increment. Raises ParseError for an invalid input version and UsageError
    for a missing or unusable prototype.
    """
    if isinstance(kind, str):
        try:
            kind = BumpKind.from_str(kind)
        except ValueError as exc:
            raise UsageError(str(exc)) from exc
    v = _coerce(version)
    lib = _to_library(v)

    if kind is BumpKind.MAJOR:
        return _from_library(lib.bump_major())
    if kind is BumpKind.MINOR:
        return _from_library(lib.bump_minor())
    if kind is BumpKind.PATCH:
        return _from_library(lib.bump_patch())
    if kind is BumpKind.RELEASE:
        return _from_library(lib.finalize_version())

    if not prototype:
        raise UsageError(f"A prototype is required for a {kind.value} bump")

    if kind is BumpKind.PRERELEASE:
        prerelease = _next_prerelease(v.prerelease_str, prototype)
        return _revalidate(lib.replace(prerelease=prerelease, build=None), prototype)
    return _revalidate(lib.replace(build=prototype), prototype)


def get_field(field: str, version: VersionLike) -> int | str:
    """Extract a single field: major, minor, patch, release, prerel or build."""
    v = _coerce(version)
    if field == "major":
        return v.major
    if field == "minor":
        return v.minor
    if field == "patch":
        return v.patch
    if field == "release":
        return v.release
    if field in ("prerel", "prerelease"):
        return v.prerelease_str
    if field == "build":
        return v.build_str
    raise UsageError(f"Unknown field {field!r}; expected one of: {', '.join(FIELDS)}")
