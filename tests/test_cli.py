"""Tests for the depup command line."""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest
import typer
from typer.testing import CliRunner

from dep_upgrader.cli.app import app
from dep_upgrader.core.package_manager import PackageManagerError
from dep_upgrader.models.package import PackageRecord

runner = CliRunner()


class TestSemverCommands:
    def test_validate(self) -> None:
        assert runner.invoke(app, ["semver", "validate", "1.2.3-rc.1"]).stdout.strip() == "valid"
        assert runner.invoke(app, ["semver", "validate", "1.2"]).stdout.strip() == "invalid"

    @pytest.mark.parametrize(
        ("v1", "v2", "expected"),
        [("1.0.0-alpha", "1.0.0-alpha.1", "-1"), ("1.0.0", "1.0.0-0", "1"), ("1.0.0+a", "1.0.0+b", "0")],
    )
    def test_compare(self, v1: str, v2: str, expected: str) -> None:
        result = runner.invoke(app, ["semver", "compare", v1, v2])
        assert result.exit_code == 0
        assert result.stdout.strip() == expected

    def test_compare_invalid(self) -> None:
        result = runner.invoke(app, ["semver", "compare", "1.0", "1.0.0"])
        assert result.exit_code == 1

    def test_diff(self) -> None:
        assert runner.invoke(app, ["semver", "diff", "1.2.3", "2.0.0"]).stdout.strip() == "major"
        result = runner.invoke(app, ["semver", "diff", "1.2.3", "1.2.3"])
        assert result.exit_code == 0
        assert result.stdout.strip() == ""

    @pytest.mark.parametrize(
        ("args", "expected"),
        [
            (["major", "1.2.3"], "2.0.0"),
            (["minor", "1.2.3"], "1.3.0"),
            (["patch", "1.2.3"], "1.2.4"),
            (["release", "1.2.3-rc.1"], "1.2.3"),
            (["prerel", "1.2.3"], "1.2.3-1"),
            (["prerel", "1.2.3-1"], "1.2.3-2"),
            (["prerel", "beta.", "1.2.3-beta4"], "1.2.3-beta5"),
            (["prerel", "beta.", "1.2.3-alpha.4"], "1.2.3-beta1"),
            (["prerel", "rc.1", "1.2.3"], "1.2.3-rc.1"),
            (["build", "sha.1", "1.2.3"], "1.2.3+sha.1"),
        ],
    )
    def test_bump(self, args: list[str], expected: str) -> None:
        result = runner.invoke(app, ["semver", "bump", *args])
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == expected

    @pytest.mark.parametrize(
        "args",
        [
            ["major", "x", "1.2.3"],
            ["build", "1.2.3"],
            ["prerel", "a", "b", "1.2.3"],
            ["epoch", "1.2.3"],
        ],
    )
    def test_bump_usage_errors(self, args: list[str]) -> None:
        result = runner.invoke(app, ["semver", "bump", *args])
        assert result.exit_code == 2

    def test_get(self) -> None:
        assert runner.invoke(app, ["semver", "get", "minor", "1.2.3"]).stdout.strip() == "2"
        assert runner.invoke(app, ["semver", "get", "prerel", "1.2.3-rc.1"]).stdout.strip() == "rc.1"
        assert runner.invoke(app, ["semver", "get", "epoch", "1.2.3"]).exit_code == 2


class TestUpgradeCommand:
    RECORDS = [
        PackageRecord("foo", "1.2.3", "1.3.0", "dependencies"),
        PackageRecord("bar", "1.0.0", "2.0.0", "dependencies"),
    ]

    @patch("dep_upgrader.cli.commands.upgrade_cmd.PackageManager")
    def test_dry_run_json(self, mock_pm_cls: MagicMock) -> None:
        pm = mock_pm_cls.return_value
        pm.manager = "yarn"
        pm.outdated.return_value = self.RECORDS

        result = runner.invoke(app, ["upgrade", "--type", "minor", "--dry-run", "-o", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [(d["package"], d["action"], d["reason"]) for d in data] == [
            ("foo", "upgrade", None),
            ("bar", "skip", "type-mismatch"),
        ]
        pm.upgrade.assert_not_called()

    @patch("dep_upgrader.cli.commands.upgrade_cmd.PackageManager")
    def test_applies_upgrades(self, mock_pm_cls: MagicMock) -> None:
        pm = mock_pm_cls.return_value
        pm.manager = "npm"
        pm.outdated.return_value = self.RECORDS

        result = runner.invoke(app, ["upgrade", "--exclude", "bar"])

        assert result.exit_code == 0, result.output
        pm.upgrade.assert_called_once_with("foo", "1.3.0", group="dependencies")
        assert "foo" in result.stdout

    @patch("dep_upgrader.cli.commands.upgrade_cmd.PackageManager")
    def test_failed_upgrade_sets_exit_code(self, mock_pm_cls: MagicMock) -> None:
        pm = mock_pm_cls.return_value
        pm.manager = "npm"
        pm.outdated.return_value = self.RECORDS[:1]
        pm.upgrade.side_effect = PackageManagerError("ERESOLVE")

        result = runner.invoke(app, ["upgrade", "-o", "yaml"])

        assert result.exit_code == 1
        assert "ERESOLVE" in result.stdout

    @patch("dep_upgrader.cli.commands.upgrade_cmd.PackageManager")
    def test_listing_failure(self, mock_pm_cls: MagicMock) -> None:
        mock_pm_cls.return_value.outdated.side_effect = PackageManagerError("yarn not found on PATH")
        mock_pm_cls.return_value.manager = "yarn"

        result = runner.invoke(app, ["upgrade"])

        assert result.exit_code == 1

    @patch("dep_upgrader.cli.commands.upgrade_cmd.PackageManager")
    def test_nothing_outdated(self, mock_pm_cls: MagicMock) -> None:
        mock_pm_cls.return_value.outdated.return_value = []
        mock_pm_cls.return_value.manager = "yarn"

        result = runner.invoke(app, ["upgrade"])

        assert result.exit_code == 0
        assert "up to date" in result.stdout

    def test_rejects_unknown_type(self) -> None:
        result = runner.invoke(app, ["upgrade", "--type", "huge"])
        assert result.exit_code == 2

    @patch("dep_upgrader.cli.commands.upgrade_cmd.run_upgrades", return_value=[])
    @patch("dep_upgrader.cli.commands.upgrade_cmd.PackageManager")
    def test_reports_progress(self, mock_pm_cls: MagicMock, mock_run: MagicMock) -> None:
        mock_pm_cls.return_value.outdated.return_value = self.RECORDS
        mock_pm_cls.return_value.manager = "yarn"

        result = runner.invoke(app, ["upgrade", "--dry-run"])

        assert result.exit_code == 0, result.output
        on_progress = mock_run.call_args.kwargs["on_progress"]
        on_progress(1, 2, "foo")

    def test_type_help_describes_release(self) -> None:
        command = typer.main.get_command(app).commands["upgrade"]
        option = next(p for p in command.params if p.name == "upgrade_type")
        assert "release means any major, minor or patch change" in option.help
