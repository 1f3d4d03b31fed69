"""Data models for dep-upgrader."""

from __future__ import annotations

import enum


class DiffKind(enum.Enum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRERELEASE = "prerelease"
    BUILD = "build"
    NONE = "none"

    @property
    def label(self) -> str:
        """Text shown to the operator; identical versions print as empty."""
        return "" if self is DiffKind.NONE else self.value


class BumpKind(enum.Enum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    RELEASE = "release"
    PRERELEASE = "prerelease"
    BUILD = "build"

    @classmethod
    def from_str(cls, s: str) -> BumpKind:
        if s == "prerel":
            return cls.PRERELEASE
        for member in cls:
            if member.value == s:
                return member
        raise ValueError(f"Unknown bump kind: {s}")


class UpgradeType(str, enum.Enum):
    """Change types accepted by ``depup upgrade --type``.

    ``release`` accepts any change to major.minor.patch, so it lets major
    upgrades through; ``prerel`` and ``build`` only accept changes confined
    to that part of the version.
    """

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    RELEASE = "release"
    PRERELEASE = "prerel"
    BUILD = "build"
    ALL = "all"

    def accepts(self, kind: DiffKind) -> bool:
        """Return True if a change of ``kind`` passes this type filter.

        ``release`` is satisfied by a major, minor or patch change.
        """
        if self is UpgradeType.ALL:
            return True
        if self is UpgradeType.RELEASE:
            return kind in (DiffKind.MAJOR, DiffKind.MINOR, DiffKind.PATCH)
        if self is UpgradeType.PRERELEASE:
            return kind is DiffKind.PRERELEASE
        return kind.value == self.value


class PackageGroup(str, enum.Enum):
    DEPENDENCIES = "dependencies"
    DEV_DEPENDENCIES = "devDependencies"
    ALL = "all"


class Action(enum.Enum):
    UPGRADE = "upgrade"
    SKIP = "skip"


class SkipReason(enum.Enum):
    GROUP_MISMATCH = "group-mismatch"
    EXCLUDED = "excluded"
    NOT_INCLUDED = "not-included"
    INVALID_VERSION = "invalid-version"
    TYPE_MISMATCH = "type-mismatch"
    NO_OP = "no-op"
