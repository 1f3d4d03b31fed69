"""Diff-kind and verdict color maps."""

from dep_upgrader.models import DiffKind, SkipReason
from dep_upgrader.models.package import Verdict

DIFF_COLORS: dict[DiffKind, str] = {
    DiffKind.MAJOR: "red bold",
    DiffKind.MINOR: "yellow",
    DiffKind.PATCH: "green",
    DiffKind.PRERELEASE: "magenta",
    DiffKind.BUILD: "cyan",
    DiffKind.NONE: "dim",
}

SKIP_COLORS: dict[SkipReason, str] = {
    SkipReason.INVALID_VERSION: "red",
    SkipReason.TYPE_MISMATCH: "yellow",
}


def styled_diff(kind: DiffKind | None) -> str:
    if kind is None:
        return "[dim]-[/dim]"
    color = DIFF_COLORS.get(kind, "white")
    return f"[{color}]{kind.label or 'none'}[/{color}]"


def styled_action(verdict: Verdict, applied: bool, error: str) -> str:
    if error:
        return "[red bold]failed[/red bold]"
    if verdict.is_upgrade:
        return "[green bold]upgraded[/green bold]" if applied else "[green]upgrade[/green]"
    color = SKIP_COLORS.get(verdict.reason, "dim")
    return f"[{color}]skip: {verdict.reason.value}[/{color}]"
