"""depup semver - Standalone semantic version utilities."""

from __future__ import annotations

from typing import List

import typer

from dep_upgrader.models import BumpKind
from dep_upgrader.utils.semver import (
    INCREMENT_SENTINEL,
    ParseError,
    UsageError,
    bump,
    compare,
    diff,
    get_field,
    is_valid,
)

app = typer.Typer(no_args_is_help=True)

_BUMP_USAGE = {
    BumpKind.PRERELEASE: "[PROTOTYPE] VERSION",
    BumpKind.BUILD: "PROTOTYPE VERSION",
}


def _fail(exc: Exception) -> None:
    typer.echo(f"Error: {exc}", err=True)
    code = 2 if isinstance(exc, UsageError) else 1
    raise typer.Exit(code=code)


@app.command("validate")
def validate_cmd(version: str = typer.Argument(help="Version to check")) -> None:
    """Print 'valid' or 'invalid'."""
    typer.echo("valid" if is_valid(version) else "invalid")


@app.command("compare")
def compare_cmd(
    v1: str = typer.Argument(help="First version"),
    v2: str = typer.Argument(help="Second version"),
) -> None:
    """Print -1, 0 or 1 as V1 is lower than, equal to or higher than V2."""
    try:
        typer.echo(compare(v1, v2))
    except ParseError as exc:
        _fail(exc)


@app.command("diff")
def diff_cmd(
    v1: str = typer.Argument(help="First version"),
    v2: str = typer.Argument(help="Second version"),
) -> None:
    """Print the most significant differing field, or nothing if identical."""
    try:
        typer.echo(diff(v1, v2).label)
    except ParseError as exc:
        _fail(exc)


@app.command("bump")
def bump_cmd(
    kind: str = typer.Argument(help="major, minor, patch, release, prerel or build"),
    args: List[str] = typer.Argument(help="[PROTOTYPE] VERSION"),
) -> None:
    """Print VERSION bumped by KIND.

    prerel takes an optional prototype (default '+.', which increments the
    trailing number of the current pre-release); build requires one.
    """
    try:
        bump_kind = BumpKind.from_str(kind)
    except ValueError as exc:
        _fail(UsageError(str(exc)))

    takes_prototype = bump_kind in (BumpKind.PRERELEASE, BumpKind.BUILD)
    if len(args) == 1 and bump_kind is not BumpKind.BUILD:
        prototype = f"{INCREMENT_SENTINEL}." if takes_prototype else None
        version = args[0]
    elif len(args) == 2 and takes_prototype:
        prototype, version = args
    else:
        usage = _BUMP_USAGE.get(bump_kind, "VERSION")
        _fail(UsageError(f"bump {kind} expects {usage}, got {len(args)} argument(s)"))

    try:
        typer.echo(str(bump(bump_kind, version, prototype)))
    except (ParseError, UsageError) as exc:
        _fail(exc)


@app.command("get")
def get_cmd(
    field: str = typer.Argument(help="major, minor, patch, release, prerel or build"),
    version: str = typer.Argument(help="Version to read"),
) -> None:
    """Print a single field of VERSION."""
    try:
        typer.echo(get_field(field, version))
    except (ParseError, UsageError) as exc:
        _fail(exc)
