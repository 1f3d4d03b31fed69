"""Shared CLI options."""

from __future__ import annotations

import typer

from dep_upgrader.config.settings import settings

OutputOption = typer.Option(settings.default_output, "--output", "-o", help="Output format: table, json, yaml")
ManagerOption = typer.Option(None, "--manager", "-m", help="Package manager: yarn or npm (default: auto-detect)")
