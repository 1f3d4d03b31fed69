"""Run the decision pipeline over outdated packages and apply upgrades."""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from dep_upgrader.core.decision_pipeline import decide, needs_review
from dep_upgrader.core.package_manager import PackageManager, PackageManagerError
from dep_upgrader.models.package import FilterConfig, PackageRecord, UpgradeOutcome

logger = logging.getLogger(__name__)

PromptCallback = Callable[[str, str], str]
ProgressCallback = Callable[[int, int, str], None]


def run_upgrades(
    records: Iterable[PackageRecord],
    config: FilterConfig,
    manager: PackageManager | None = None,
    dry_run: bool = False,
    prompt: PromptCallback | None = None,
    on_progress: ProgressCallback | None = None,
) -> list[UpgradeOutcome]:
    """Decide and apply upgrades for each record, in listing order.

    ``prompt`` is only asked about records that pass the group and name
    filters; its answer replaces the listed target. The package manager
    is never called in dry-run mode or for skipped records, and a failed
    upgrade is recorded without stopping the run.
    """
    records = list(records)
    outcomes: list[UpgradeOutcome] = []
    total = len(records)

    for i, record in enumerate(records, 1):
        if on_progress:
            on_progress(i, total, record.name)

        override = None
        if prompt is not None and needs_review(record, config):
            override = prompt(record.name, record.target_version)

        verdict = decide(record, config, override=override)
        outcome = UpgradeOutcome(record=record, verdict=verdict)
        outcomes.append(outcome)

        if not verdict.is_upgrade:
            logger.info("Skipping %s (%s): %s", record.name, verdict.reason.value, verdict.detail)
            continue
        if dry_run:
            logger.info("Would upgrade %s to %s", record.name, verdict.target_version)
            continue
        if manager is None:
            logger.warning("No package manager given; %s left at %s", record.name, record.current_version)
            continue

        try:
            manager.upgrade(record.name, verdict.target_version, group=record.group)
            outcome.applied = True
        except PackageManagerError as exc:
            logger.debug("Upgrade of %s failed", record.name, exc_info=True)
            outcome.error = str(exc)

    return outcomes
