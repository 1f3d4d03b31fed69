"""Semantic version value type."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, eq=False)
class SemanticVersion:
    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = field(default_factory=tuple)
    build: tuple[str, ...] = field(default_factory=tuple)

    @property
    def release(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_str(self) -> str:
        return ".".join(self.prerelease)

    @property
    def build_str(self) -> str:
        return ".".join(self.build)

    def __str__(self) -> str:
        text = self.release
        if self.prerelease:
            text += f"-{self.prerelease_str}"
        if self.build:
            text += f"+{self.build_str}"
        return text

    # Ordering follows semver precedence, so build metadata is ignored here too.
    def _cmp(self, other: SemanticVersion) -> int:
        from dep_upgrader.utils.semver import compare

        return compare(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._cmp(other) == 0

    def __lt__(self, other: SemanticVersion) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._cmp(other) < 0

    def __le__(self, other: SemanticVersion) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._cmp(other) <= 0

    def __gt__(self, other: SemanticVersion) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._cmp(other) > 0

    def __ge__(self, other: SemanticVersion) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._cmp(other) >= 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))
