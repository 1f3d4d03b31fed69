"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

SUPPORTED_MANAGERS = ("yarn", "npm")


def detect_package_manager(project_dir: Path | None = None) -> str:
    """Pick yarn when the project has a yarn.lock, npm otherwise."""
    root = project_dir or Path.cwd()
    if (root / "yarn.lock").exists():
        return "yarn"
    return "npm"


@dataclass
class Settings:
    # Empty means auto-detect per project directory
    package_manager: str = field(default_factory=lambda: os.environ.get("DEPUP_PACKAGE_MANAGER", ""))
    default_output: str = field(default_factory=lambda: os.environ.get("DEPUP_OUTPUT", "table"))
    yarn_bin: str = field(default_factory=lambda: os.environ.get("DEPUP_YARN_BIN", "yarn"))
    npm_bin: str = field(default_factory=lambda: os.environ.get("DEPUP_NPM_BIN", "npm"))

    def executable_for(self, manager: str) -> str:
        return self.yarn_bin if manager == "yarn" else self.npm_bin


# Global singleton
settings = Settings()
