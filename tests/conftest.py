"""Shared pytest fixtures for condperiod tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from condperiod.config.settings import CondperiodSettings
from condperiod.domain.collection import ConditionalCollection


@pytest.fixture(autouse=True)
def _isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no CONDPERIOD_* overrides."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "CONDPERIOD_CONFIG",
        "CONDPERIOD_JSON_OUTPUT",
        "CONDPERIOD_VERBOSE",
        "CONDPERIOD_LOG_JSON",
        "CONDPERIOD_RULES__TABLE",
        "CONDPERIOD_RULES__KIND",
        "CONDPERIOD_OUTPUT__JSON",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("condperiod")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> CondperiodSettings:
    """Default settings with no config file."""
    return CondperiodSettings.from_cli()


@pytest.fixture
def category_rules() -> ConditionalCollection:
    """Three adjacent category tiers."""
    return ConditionalCollection.parse("C3-5P10D,C6-8P20D,C9-11P30D")


@pytest.fixture
def duration_rules() -> ConditionalCollection:
    """Two duration tiers, the last one open-ended."""
    return ConditionalCollection.parse("DP1DP2DP1Y,DP3DP0DP2Y")
