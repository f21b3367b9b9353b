"""
Conversion command group.

Converts between seconds, flicks and frame rates from the command line.
"""

from __future__ import annotations

import json
from fractions import Fraction

import typer

from ...duration import FLICKS_PER_SECOND, Flicks, frame_duration, to_flicks, to_seconds

app = typer.Typer(name="convert", help="Convert between seconds, flicks and frame rates")


def _emit(payload: dict, json_output: bool, human: str) -> None:
    if json_output:
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(human)


@app.command("seconds")
def seconds_to_flicks(
    value: float = typer.Argument(..., help="Duration in seconds"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Convert seconds to flicks (rounded to the nearest tick)."""
    try:
        result = to_flicks(value)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    _emit({"seconds": value, "flicks": result.count}, json_output, f"{result.count} flicks")


@app.command("flicks")
def flicks_to_seconds(
    count: int = typer.Argument(..., help="Duration in flicks"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Convert a flick count to seconds."""
    seconds = to_seconds(Flicks(count))
    _emit({"flicks": count, "seconds": seconds}, json_output, f"{seconds!r} seconds")


@app.command("rate")
def rate_to_flicks(
    numerator: int = typer.Argument(..., help="Rate numerator, e.g. 30000 for 29.97 fps"),
    denominator: int = typer.Option(1, "--den", "-d", help="Rate denominator, e.g. 1001 for NTSC"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Print the length of one frame at numerator/denominator frames per second."""
    if numerator <= 0 or denominator <= 0:
        typer.echo("Error: rate numerator and denominator must be positive", err=True)
        raise typer.Exit(1)
    rate = Fraction(numerator, denominator)
    result = frame_duration(rate)
    exact = result.count * rate == FLICKS_PER_SECOND
    _emit(
        {
            "rate": f"{rate.numerator}/{rate.denominator}",
            "flicks_per_frame": result.count,
            "exact": exact,
        },
        json_output,
        f"{result.count} flicks per frame" + ("" if exact else " (rounded)"),
    )
