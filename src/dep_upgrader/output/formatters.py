"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from dep_upgrader.models.package import UpgradeOutcome

console = Console()


def _outcome_to_dict(o: UpgradeOutcome) -> dict[str, Any]:
    v = o.verdict
    return {
        "package": o.record.name,
        "group": o.record.group,
        "current_version": v.current_version,
        "target_version": v.target_version,
        "change": v.diff_kind.value if v.diff_kind else None,
        "action": v.action.value,
        "reason": v.reason.value if v.reason else None,
        "detail": v.detail,
        "applied": o.applied,
        "error": o.error or None,
    }


def summarize(outcomes: list[UpgradeOutcome], dry_run: bool = False) -> str:
    upgrades = [o for o in outcomes if o.verdict.is_upgrade]
    failed = [o for o in upgrades if o.failed]
    skipped = len(outcomes) - len(upgrades)
    if not upgrades:
        return f"[green]Nothing to upgrade[/green] [dim]({skipped} skipped)[/dim]"
    if dry_run:
        return (
            f"[yellow]{len(upgrades)} package(s) would be upgraded[/yellow], "
            f"[dim]{skipped} skipped[/dim]"
        )
    applied = [o for o in upgrades if o.applied]
    pending = len(upgrades) - len(applied) - len(failed)
    text = f"[yellow]{len(applied)} package(s) upgraded[/yellow], [dim]{skipped} skipped[/dim]"
    if pending:
        text += f", [yellow]{pending} not applied[/yellow]"
    if failed:
        text += f", [red]{len(failed)} failed[/red]"
    return text


def output_outcomes(outcomes: list[UpgradeOutcome], fmt: str, dry_run: bool = False) -> None:
    if fmt == "json":
        data = [_outcome_to_dict(o) for o in outcomes]
        console.print_json(json.dumps(data, indent=2))
    elif fmt == "yaml":
        data = [_outcome_to_dict(o) for o in outcomes]
        console.print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    else:
        from dep_upgrader.output.tables import upgrade_table
        console.print(upgrade_table(outcomes, dry_run=dry_run))
        console.print(f"\n{summarize(outcomes, dry_run=dry_run)}")
