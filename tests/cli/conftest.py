"""
CLI test fixtures for flicks.

Provides a runner for CLI commands using Typer's CliRunner.
"""

from __future__ import annotations

import logging

import pytest
from typer.testing import CliRunner

from flicks.cli.main import app


@pytest.fixture
def run_cli():
    """Invoke the CLI and return (exit_code, stdout)."""
    runner = CliRunner()

    def _run(args: list[str]) -> tuple[int, str]:
        result = runner.invoke(app, args)
        return result.exit_code, result.stdout

    return _run


@pytest.fixture(autouse=True)
def _drop_cli_log_handlers():
    """The CLI binds a handler to the runner's stderr; detach it afterwards."""
    yield
    logging.getLogger().handlers.clear()
