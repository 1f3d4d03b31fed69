"""Per-package upgrade decision: filters, version checks and diff classification."""

from __future__ import annotations

import logging

from dep_upgrader.models import PackageGroup, SkipReason
from dep_upgrader.models.package import FilterConfig, PackageRecord, Verdict
from dep_upgrader.utils.name_patterns import matches
from dep_upgrader.utils.semver import ParseError, diff, parse

logger = logging.getLogger(__name__)


def _name_filter(record: PackageRecord, config: FilterConfig) -> Verdict | None:
    if config.package_group is not PackageGroup.ALL and record.group != config.package_group.value:
        return Verdict.skip(
            record,
            SkipReason.GROUP_MISMATCH,
            f"{record.name} is in {record.group}, not {config.package_group.value}",
        )
    if config.exclude_patterns and matches(record.name, config.exclude_patterns):
        return Verdict.skip(
            record,
            SkipReason.EXCLUDED,
            f"{record.name} matches exclude list {config.exclude_patterns!r}",
        )
    if config.include_patterns and not matches(record.name, config.include_patterns):
        return Verdict.skip(
            record,
            SkipReason.NOT_INCLUDED,
            f"{record.name} does not match include list {config.include_patterns!r}",
        )
    return None


def needs_review(record: PackageRecord, config: FilterConfig) -> bool:
    """True if the record passes the group and name filters.

    Used to decide whether the operator should be asked about a record
    before the version checks run.
    """
    return _name_filter(record, config) is None


def decide(
    record: PackageRecord,
    config: FilterConfig,
    override: str | None = None,
) -> Verdict:
    """Decide whether ``record`` should be upgraded.

    Checks run in a fixed order and stop at the first failure: group,
    exclude, include, version validity, change type, no-op. ``override``
    is an operator-supplied target that replaces the listed one.
    """
    skipped = _name_filter(record, config)
    if skipped is not None:
        return skipped

    target = record.target_version
    if override is not None and override.strip():
        target = override.strip()

    for label, value in (("current", record.current_version), ("target", target)):
        try:
            parse(value)
        except ParseError:
            logger.debug("Invalid %s version for %s: %r", label, record.name, value, exc_info=True)
            return Verdict.skip(
                record,
                SkipReason.INVALID_VERSION,
                f"{label} version {value!r} of {record.name} is not a valid semantic version",
                target=target,
            )

    kind = diff(record.current_version, target)
    if not config.upgrade_type.accepts(kind):
        return Verdict.skip(
            record,
            SkipReason.TYPE_MISMATCH,
            f"{record.name} {record.current_version} -> {target} is a "
            f"{kind.label or 'no'} change, not {config.upgrade_type.value}",
            target=target,
            diff_kind=kind,
        )

    if target == record.current_version:
        return Verdict.skip(
            record,
            SkipReason.NO_OP,
            f"{record.name} is already at {target}",
            target=target,
            diff_kind=kind,
        )

    return Verdict.upgrade(record, target, kind)
