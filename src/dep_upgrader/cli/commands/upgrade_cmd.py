"""depup upgrade - Upgrade outdated packages that pass the filters."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.prompt import Prompt

from dep_upgrader.cli.options import ManagerOption, OutputOption
from dep_upgrader.core.package_manager import PackageManager, PackageManagerError
from dep_upgrader.core.upgrade_runner import run_upgrades
from dep_upgrader.models import PackageGroup, UpgradeType
from dep_upgrader.models.package import FilterConfig
from dep_upgrader.output.formatters import output_outcomes

app = typer.Typer()
console = Console()


def _ask_target(name: str, target: str) -> str:
    return Prompt.ask(f"Upgrade [bold]{name}[/bold] to", default=target, console=console)


@app.callback(invoke_without_command=True)
def upgrade(
    upgrade_type: UpgradeType = typer.Option(
        UpgradeType.ALL, "--type", "-t",
        help="Only apply upgrades of this change type (release means any major, minor or patch change)",
    ),
    group: PackageGroup = typer.Option(
        PackageGroup.ALL, "--group", "-g", help="Only consider packages in this dependency group",
    ),
    exclude: Optional[str] = typer.Option(
        None, "--exclude", "-x", help="Comma-separated names or globs to leave alone",
    ),
    include: Optional[str] = typer.Option(
        None, "--include", "-i", help="Comma-separated names or globs to restrict upgrades to",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", "-d", help="Decide but do not upgrade"),
    confirm: bool = typer.Option(False, "--confirm", "-c", help="Confirm or edit each target version"),
    manager: Optional[str] = ManagerOption,
    cwd: Optional[Path] = typer.Option(None, "--cwd", help="Project directory (default: current)"),
    output: str = OutputOption,
) -> None:
    """Upgrade outdated packages, filtered by change type, group and name."""
    config = FilterConfig.from_options(upgrade_type, group, exclude=exclude, include=include)

    try:
        pm = PackageManager(manager, cwd=cwd)
        with console.status(f"[bold cyan]Listing outdated packages ({pm.manager})…"):
            records = pm.outdated()
    except PackageManagerError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    if not records:
        console.print("[green]All packages are up to date.[/green]")
        return

    if confirm:
        # The prompt needs the terminal, so no spinner
        outcomes = run_upgrades(records, config, manager=pm, dry_run=dry_run, prompt=_ask_target)
    else:
        with console.status("[bold cyan]Upgrading…") as status:

            def on_progress(i: int, total: int, name: str) -> None:
                status.update(f"[bold cyan]Upgrading… [dim]({i}/{total})[/dim] {name}")

            outcomes = run_upgrades(
                records, config, manager=pm, dry_run=dry_run, on_progress=on_progress,
            )
    output_outcomes(outcomes, output, dry_run=dry_run)

    if any(o.failed for o in outcomes):
        raise typer.Exit(code=1)
