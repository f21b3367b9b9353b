"""
Main CLI application using Typer with router-based command dispatch.

Top-level commands cover the derivation of the flick constant; conversion
commands are registered as a group through the CliRouter.
"""

from __future__ import annotations

import typer

from ..infra.logging import configure_logging
from ..infra.settings import settings
from .commands import convert
from .commands import derivation as derivation_cmd
from .commands import motivation as motivation_cmd
from .router import get_router

app = typer.Typer(help="Flicks: exact integer frame timing", no_args_is_help=True)

router = get_router(app)

router.register(
    "convert",
    convert.app,
    help_text="Convert between seconds, flicks and frame rates",
)

app.command("derive")(derivation_cmd.derive)
app.command("verify")(derivation_cmd.verify)
app.command("motivation")(motivation_cmd.motivation)


@app.callback()
def main(
    log_level: str = typer.Option(None, "--log-level", help="Override FLICKS_LOG_LEVEL"),
):
    """Flicks - a time unit that divides every common frame and sample rate."""
    config = settings
    if log_level:
        config = settings.model_copy(update={"log_level": log_level.upper()})
    configure_logging(config)


def cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
