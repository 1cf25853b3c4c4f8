"""Shared pytest fixtures for ordinaldate tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

_ENV_VARS = (
    "ORDINALDATE_CONFIG",
    "ORDINALDATE_JSON_OUTPUT",
    "ORDINALDATE_QUIET",
    "ORDINALDATE_VERBOSE",
    "ORDINALDATE_LOG_JSON",
    "ORDINALDATE_BATCH__FAIL_FAST",
    "ORDINALDATE_BATCH__SKIP_BLANK",
    "ORDINALDATE_BATCH__COMMENT_PREFIX",
)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no ordinaldate env vars."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("ordinaldate")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
