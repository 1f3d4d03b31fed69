"""Shared test fixtures."""

from __future__ import annotations

import json

import pytest

from dep_upgrader.models.package import FilterConfig, PackageRecord


@pytest.fixture
def foo_record() -> PackageRecord:
    return PackageRecord(
        name="foo",
        current_version="1.2.3",
        target_version="1.3.0",
        group="dependencies",
    )


@pytest.fixture
def default_config() -> FilterConfig:
    return FilterConfig()


@pytest.fixture
def yarn_outdated_output() -> str:
    """Captured ``yarn outdated`` output (yarn classic, no TTY)."""
    return """\
yarn outdated v1.22.19
info Color legend :
 "<red>"    : Major Update backward-incompatible updates
 "<yellow>" : Minor Update backward-compatible features
 "<green>"  : Patch Update backward-compatible bug fixes
Package    Current Wanted Latest Package Type     URL
@babel/core 7.22.0 7.22.5 7.24.0 devDependencies https://babel.dev/docs/en/next/babel-core
lodash     4.17.20 4.17.21 4.17.21 dependencies   https://lodash.com/
react      17.0.2  17.0.2  18.2.0  dependencies   https://reactjs.org/
Done in 1.42s.
"""


@pytest.fixture
def npm_outdated_output() -> str:
    """Captured ``npm outdated --json --long`` output."""
    return json.dumps({
        "lodash": {
            "current": "4.17.20",
            "wanted": "4.17.21",
            "latest": "4.17.21",
            "dependent": "app",
            "location": "node_modules/lodash",
            "type": "dependencies",
        },
        "jest": {
            "current": "29.0.0",
            "wanted": "29.7.0",
            "latest": "29.7.0",
            "dependent": "app",
            "location": "node_modules/jest",
            "type": "devDependencies",
        },
        "left-pad": {
            "wanted": "1.3.0",
            "latest": "1.3.0",
            "dependent": "app",
            "location": "",
            "type": "dependencies",
        },
    })
