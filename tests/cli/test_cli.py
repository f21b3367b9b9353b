"""
CLI contract tests.

Exit codes and JSON payloads of the derive, verify, convert and motivation
commands.
"""

from __future__ import annotations

import json

import pytest
import typer

from flicks.cli.main import router
from flicks.cli.router import get_router


def test_help_lists_commands(run_cli):
    exit_code, output = run_cli(["--help"])
    assert exit_code == 0
    for name in ("derive", "verify", "convert", "motivation"):
        assert name in output


def test_router_registers_convert_group():
    assert router.list_registered_groups() == ["convert"]


def test_router_refuses_duplicate_group():
    local = get_router(typer.Typer())
    local.register("convert", typer.Typer(), help_text="first")
    with pytest.raises(ValueError):
        local.register("convert", typer.Typer())
    assert local.list_registered_groups() == ["convert"]


def test_derive_prints_table(run_cli):
    exit_code, output = run_cli(["derive"])
    assert exit_code == 0
    assert "Value = 705600000" in output
    assert "1001/30000 (~29.970) fps frame:     23543520 flicks" in output


def test_derive_json(run_cli):
    exit_code, output = run_cli(["derive", "--json"])
    assert exit_code == 0
    payload = json.loads(output)
    assert payload["status"] == "ok"
    assert payload["denominator"] == 705_600_000
    assert len(payload["rows"]) == 23


def test_derive_under_tight_bound_fails(run_cli):
    exit_code, _ = run_cli(["derive", "--upper-bound", "1000"])
    assert exit_code == 1


def test_verify_json(run_cli):
    exit_code, output = run_cli(["verify", "--json"])
    assert exit_code == 0
    payload = json.loads(output)
    assert payload["test_passed"] is True
    assert payload["solved"] == payload["smallest_scan"] == payload["largest_scan"] == 705_600_000
    assert payload["errors"] == []


def test_verify_human(run_cli):
    exit_code, output = run_cli(["verify"])
    assert exit_code == 0
    assert "705600000 flicks per second verified" in output


def test_verify_under_tight_bound_fails(run_cli):
    exit_code, output = run_cli(["verify", "-b", "1000"])
    assert exit_code == 1
    assert "verification failed" in output


def test_convert_seconds(run_cli):
    exit_code, output = run_cli(["convert", "seconds", "1"])
    assert exit_code == 0
    assert output.strip() == "705600000 flicks"


def test_convert_flicks_json(run_cli):
    exit_code, output = run_cli(["convert", "flicks", "29400000", "--json"])
    assert exit_code == 0
    payload = json.loads(output)
    assert payload["seconds"] == pytest.approx(1 / 24)


@pytest.mark.parametrize(
    "args,flicks_per_frame,exact",
    [
        (["30000", "--den", "1001"], 23_543_520, True),
        (["48000"], 14_700, True),
        (["7"], 100_800_000, True),
        (["11"], 64_145_455, False),
    ],
)
def test_convert_rate(run_cli, args, flicks_per_frame, exact):
    exit_code, output = run_cli(["convert", "rate", *args, "--json"])
    assert exit_code == 0
    payload = json.loads(output)
    assert payload["flicks_per_frame"] == flicks_per_frame
    assert payload["exact"] is exact


def test_convert_rate_rejects_zero(run_cli):
    exit_code, _ = run_cli(["convert", "rate", "0"])
    assert exit_code == 1


def test_motivation_json(run_cli):
    exit_code, output = run_cli(["motivation", "--json"])
    assert exit_code == 0
    nanos, flicks = json.loads(output)
    assert nanos["exact"] is False
    assert flicks["exact"] is True
    assert flicks["iterations"] == 144


def test_motivation_human(run_cli):
    exit_code, output = run_cli(["motivation", "--fps", "30", "--seconds", "2"])
    assert exit_code == 0
    assert "✓ flicks" in output
    assert "✗ nanoseconds" in output


def test_log_level_override(run_cli):
    exit_code, _ = run_cli(["--log-level", "error", "derive"])
    assert exit_code == 0
