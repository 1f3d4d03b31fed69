"""yarn / npm wrapper: list outdated packages and apply upgrades."""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path
from typing import Iterator

from dep_upgrader.config.settings import SUPPORTED_MANAGERS, detect_package_manager, settings
from dep_upgrader.models import PackageGroup
from dep_upgrader.models.package import PackageRecord

logger = logging.getLogger(__name__)

# Package, Current, Wanted, Latest, Package Type, URL
_YARN_ROW_FIELDS = 6
_YARN_GROUPS = frozenset({
    "dependencies",
    "devDependencies",
    "optionalDependencies",
    "peerDependencies",
})


class PackageManagerError(RuntimeError):
    """Raised when the package manager cannot be run or its output read."""


def parse_yarn_outdated(output: str) -> Iterator[PackageRecord]:
    """Scan the table printed by ``yarn outdated``.

    Only rows with exactly six whitespace-separated fields and a known
    "Package Type" column are records; the banner, color legend, header
    and "Done" footer are skipped.
    """
    for line in output.splitlines():
        fields = line.split()
        if len(fields) != _YARN_ROW_FIELDS or fields[4] not in _YARN_GROUPS:
            if fields:
                logger.debug("Skipping yarn outdated line: %r", line)
            continue
        name, current, _wanted, latest, group, _url = fields
        yield PackageRecord(name=name, current_version=current, target_version=latest, group=group)


def parse_npm_outdated(output: str) -> Iterator[PackageRecord]:
    """Read the JSON object printed by ``npm outdated --json --long``."""
    if not output.strip():
        return
    try:
        data = json.loads(output)
    except json.JSONDecodeError as exc:
        raise PackageManagerError(f"Could not parse npm outdated output: {exc}") from exc
    if not isinstance(data, dict):
        raise PackageManagerError("Unexpected npm outdated output: expected a JSON object")
    error = data.get("error")
    if isinstance(error, dict) and "code" in error:
        raise PackageManagerError(f"npm outdated failed: {error.get('summary') or error['code']}")

    for name, entry in data.items():
        # Workspaces report a list of entries per package
        entries = entry if isinstance(entry, list) else [entry]
        for e in entries:
            if not isinstance(e, dict):
                logger.debug("Skipping npm outdated entry %s: %r", name, e)
                continue
            current, latest = e.get("current"), e.get("latest")
            if not current or not latest:
                logger.debug("Skipping npm outdated entry %s without current/latest", name)
                continue
            yield PackageRecord(
                name=name,
                current_version=current,
                target_version=latest,
                group=e.get("type", PackageGroup.DEPENDENCIES.value),
            )


class PackageManager:
    """Thin wrapper around the yarn and npm command-line tools."""

    def __init__(self, manager: str | None = None, cwd: Path | None = None):
        self.manager = manager or settings.package_manager or detect_package_manager(cwd)
        if self.manager not in SUPPORTED_MANAGERS:
            raise PackageManagerError(
                f"Unsupported package manager {self.manager!r}; "
                f"expected one of: {', '.join(SUPPORTED_MANAGERS)}"
            )
        self.cwd = cwd
        self.executable = settings.executable_for(self.manager)

    def _run(self, *args: str) -> subprocess.CompletedProcess[str]:
        cmd = [self.executable, *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            return subprocess.run(
                cmd, capture_output=True, text=True, check=False, cwd=self.cwd,
            )
        except FileNotFoundError as exc:
            raise PackageManagerError(f"{self.executable} not found on PATH") from exc

    def outdated(self) -> list[PackageRecord]:
        """List outdated packages.

        Both tools exit non-zero when something is outdated, so the exit
        code alone is not treated as failure.
        """
        if self.manager == "yarn":
            result = self._run("outdated")
            records = list(parse_yarn_outdated(result.stdout))
            # yarn also exits 1 on failure; errors only show up on stderr
            errors = [line for line in result.stderr.splitlines() if line.startswith("error ")]
            if not records and errors:
                raise PackageManagerError(f"yarn outdated failed: {errors[0][len('error '):]}")
        else:
            result = self._run("outdated", "--json", "--long")
            records = list(parse_npm_outdated(result.stdout))

        if not records and result.returncode not in (0, 1):
            raise PackageManagerError(
                f"{self.manager} outdated failed ({result.returncode}): {result.stderr.strip()}"
            )
        return records

    def upgrade(self, name: str, version: str, group: str = PackageGroup.DEPENDENCIES.value) -> None:
        """Install ``name@version``. Raises PackageManagerError on failure."""
        spec = f"{name}@{version}"
        if self.manager == "yarn":
            result = self._run("upgrade", spec)
        elif group == PackageGroup.DEV_DEPENDENCIES.value:
            result = self._run("install", spec, "--save-dev")
        else:
            result = self._run("install", spec)

        if result.returncode != 0:
            raise PackageManagerError(
                f"{self.manager} failed to upgrade {spec} ({result.returncode}): "
                f"{result.stderr.strip()}"
            )
