"""reelsync CLI entry point."""

from typing import Annotated, Optional

import typer
from dotenv import load_dotenv

from reelsync import __version__
from reelsync.cli.build import build
from reelsync.cli.filters import filters
from reelsync.cli.timing import timing

app = typer.Typer(
    name="reelsync",
    help="reelsync: scene timing and synchronized subtitles for narrated videos.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"reelsync {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """reelsync: scene timing and synchronized subtitles for narrated videos."""
    # REELSYNC_* settings may live in a .env file; shell exports take precedence
    load_dotenv(override=False)


app.command("timing")(timing)
app.command("build")(build)
app.command("filters")(filters)
