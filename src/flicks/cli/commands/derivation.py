"""
Derivation commands.

``derive`` prints the ticks-per-frame table behind the flick constant.
``verify`` re-derives the constant with both the LCM solver and the
exhaustive scan and checks they agree with ``FLICKS_PER_SECOND``.
"""

from __future__ import annotations

import json

import typer

from ...constraints import DESIGN_CONSTRAINTS
from ...derivation import derive as derive_constraints
from ...duration import FLICKS_PER_SECOND
from ...infra.exceptions import FlicksError
from ...infra.logging import get_logger
from ...infra.settings import settings
from ...solver import scan_denominator, solve


def _format_json_output(result: dict) -> str:
    return json.dumps(result, indent=2)


def derive(
    upper_bound: int = typer.Option(
        None, "--upper-bound", "-b", min=1, help="Largest acceptable ticks per second"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Solve the design constraint set and print ticks per frame for each rate."""
    bound = upper_bound if upper_bound is not None else settings.upper_bound
    try:
        result = derive_constraints(DESIGN_CONSTRAINTS, bound)
    except FlicksError as e:
        if json_output:
            typer.echo(_format_json_output({"status": "error", "errors": [str(e)]}))
        else:
            typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if json_output:
        payload = {"status": "ok", **result.to_dict()}
        typer.echo(_format_json_output(payload))
    else:
        for line in result.lines():
            typer.echo(line)


def verify(
    upper_bound: int = typer.Option(
        None, "--upper-bound", "-b", min=1, help="Largest acceptable ticks per second"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """
    Cross-check the flick constant.

    Runs the LCM solver and the ascending and descending exhaustive scans,
    then compares all three against the published constant.
    """
    bound = upper_bound if upper_bound is not None else settings.upper_bound
    errors: list[str] = []
    results: dict[str, int | None] = {"solved": None, "smallest_scan": None, "largest_scan": None}
    try:
        results["solved"] = solve(DESIGN_CONSTRAINTS, bound)
        results["smallest_scan"] = scan_denominator(DESIGN_CONSTRAINTS, bound)
        results["largest_scan"] = scan_denominator(DESIGN_CONSTRAINTS, bound, descending=True)
    except FlicksError as e:
        errors.append(str(e))

    for name, value in results.items():
        if value is not None and value != FLICKS_PER_SECOND:
            errors.append(f"{name} = {value}, expected {FLICKS_PER_SECOND}")

    passed = not errors
    get_logger(__name__).info("verification_complete", passed=passed, upper_bound=bound, **results)
    if json_output:
        typer.echo(
            _format_json_output(
                {
                    "status": "ok" if passed else "error",
                    "test_passed": passed,
                    "flicks_per_second": FLICKS_PER_SECOND,
                    "upper_bound": bound,
                    **results,
                    "errors": errors,
                }
            )
        )
    elif passed:
        typer.echo(f"✓ {FLICKS_PER_SECOND} flicks per second verified")
    else:
        typer.echo("✗ verification failed")
        for error in errors:
            typer.echo(f"  Error: {error}")

    raise typer.Exit(0 if passed else 1)
