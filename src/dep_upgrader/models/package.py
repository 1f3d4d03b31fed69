"""Outdated package records, filter configuration and verdicts."""

from __future__ import annotations

from dataclasses import dataclass

from dep_upgrader.models import Action, DiffKind, PackageGroup, SkipReason, UpgradeType


@dataclass(frozen=True)
class PackageRecord:
    name: str
    current_version: str
    target_version: str
    group: str = PackageGroup.DEPENDENCIES.value


@dataclass(frozen=True)
class FilterConfig:
    upgrade_type: UpgradeType = UpgradeType.ALL
    package_group: PackageGroup = PackageGroup.ALL
    exclude_patterns: str = ""
    include_patterns: str = ""

    @classmethod
    def from_options(
        cls,
        upgrade_type: UpgradeType | str = UpgradeType.ALL,
        package_group: PackageGroup | str = PackageGroup.ALL,
        exclude: str | None = None,
        include: str | None = None,
    ) -> FilterConfig:
        """Build the per-run filter configuration from raw option values.

        Raises ValueError for an unknown upgrade type or package group.
        """
        return cls(
            upgrade_type=UpgradeType(upgrade_type),
            package_group=PackageGroup(package_group),
            exclude_patterns=(exclude or "").strip(),
            include_patterns=(include or "").strip(),
        )


@dataclass(frozen=True)
class Verdict:
    action: Action
    package: str
    current_version: str
    target_version: str
    diff_kind: DiffKind | None = None
    reason: SkipReason | None = None
    detail: str = ""

    @classmethod
    def upgrade(cls, record: PackageRecord, target: str, diff_kind: DiffKind) -> Verdict:
        return cls(
            action=Action.UPGRADE,
            package=record.name,
            current_version=record.current_version,
            target_version=target,
            diff_kind=diff_kind,
        )

    @classmethod
    def skip(
        cls,
        record: PackageRecord,
        reason: SkipReason,
        detail: str,
        target: str | None = None,
        diff_kind: DiffKind | None = None,
    ) -> Verdict:
        return cls(
            action=Action.SKIP,
            package=record.name,
            current_version=record.current_version,
            target_version=record.target_version if target is None else target,
            diff_kind=diff_kind,
            reason=reason,
            detail=detail,
        )

    @property
    def is_upgrade(self) -> bool:
        return self.action is Action.UPGRADE


@dataclass
class UpgradeOutcome:
    record: PackageRecord
    verdict: Verdict
    applied: bool = False
    error: str = ""

    @property
    def failed(self) -> bool:
        return bool(self.error)
