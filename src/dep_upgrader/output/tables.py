"""Rich table builders."""

from __future__ import annotations

from rich.table import Table

from dep_upgrader.models.package import UpgradeOutcome
from dep_upgrader.output.themes import styled_action, styled_diff


def upgrade_table(outcomes: list[UpgradeOutcome], dry_run: bool = False) -> Table:
    title = "Package Upgrades (dry run)" if dry_run else "Package Upgrades"
    table = Table(title=title, expand=True)
    table.add_column("Package", style="bold white", no_wrap=True)
    table.add_column("Group", style="blue", no_wrap=True)
    table.add_column("Current", style="dim")
    table.add_column("Target", style="bold")
    table.add_column("Change", no_wrap=True)
    table.add_column("Action", no_wrap=True)
    table.add_column("Detail", style="dim", max_width=50)

    for o in outcomes:
        v = o.verdict
        table.add_row(
            o.record.name,
            o.record.group,
            v.current_version,
            v.target_version,
            styled_diff(v.diff_kind),
            styled_action(v, o.applied, o.error),
            o.error or v.detail,
        )
    return table
