"""Nanosecond versus flick frame-stepping comparison."""

from __future__ import annotations

import json

import typer

from ...motivation import IterationReport, compare


def _format_human_output(report: IterationReport) -> str:
    mark = "✓" if report.exact else "✗"
    return (
        f"{mark} {report.unit}: {report.units_per_frame} per frame, "
        f"{report.iterations} iterations (expected {report.expected_iterations}), "
        f"{report.second_boundaries} whole seconds hit (expected {report.seconds})"
    )


def motivation(
    fps: int = typer.Option(24, "--fps", help="Frames per second to step at"),
    seconds: int = typer.Option(6, "--seconds", help="Length of the walk in seconds"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Step a timeline frame by frame in nanoseconds and in flicks."""
    try:
        reports = compare(fps, seconds)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps([report.to_dict() for report in reports], indent=2))
    else:
        for report in reports:
            typer.echo(_format_human_output(report))
