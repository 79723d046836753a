"""Shared pytest fixtures for netd3 tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from netd3.domain.inputs import TableInput


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def links() -> TableInput:
    """Integer-coded links into the ``nodes`` fixture, with a weight column."""
    return TableInput.from_records(
        [
            {"source": 1, "target": 0, "value": 1},
            {"source": 2, "target": 0, "value": 8},
            {"source": 3, "target": 0, "value": 10},
            {"source": 3, "target": 2, "value": 6},
        ]
    )


@pytest.fixture
def nodes() -> TableInput:
    return TableInput.from_records(
        [
            {"name": "Myriel", "group": 1, "size": 15},
            {"name": "Napoleon", "group": 1, "size": 20},
            {"name": "Mlle.Baptistine", "group": 1, "size": 23},
            {"name": "Mme.Magloire", "group": 1, "size": 30},
        ]
    )


@pytest.fixture
def canada() -> dict[str, Any]:
    return {
        "name": "Canada",
        "children": [
            {"name": "Newfoundland", "children": [{"name": "St. John's"}]},
            {"name": "Quebec", "children": [{"name": "Montreal"}, {"name": "Quebec City"}]},
            {"name": "Yukon", "children": [{"name": "Whitehorse"}]},
        ],
    }


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty directory with no inherited netd3 config."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NETD3_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None]:
    """CLI invocations install a stderr handler bound to the runner's stream."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
