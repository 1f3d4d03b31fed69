"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="depup",
    help="dep-upgrader - Selective, semver-aware dependency upgrades.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _register_commands() -> None:
    from dep_upgrader.cli.commands.upgrade_cmd import app as upgrade_app
    from dep_upgrader.cli.commands.semver_cmd import app as semver_app

    app.add_typer(upgrade_app, name="upgrade", help="Upgrade outdated packages that pass the filters")
    app.add_typer(semver_app, name="semver", help="Validate, compare, diff and bump semantic versions")


_register_commands()


def main() -> None:
    app()
