"""reelsync timing command: print the scene timeline for a list of durations."""

from __future__ import annotations

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from reelsync.cli.utils import parse_durations
from reelsync.core.config import load_config
from reelsync.timing.calculator import calculate_video_timing, timing_table, total_duration
from reelsync.utils.console import console as err_console

console = Console()


def timing(
    durations: Annotated[
        list[str],
        typer.Argument(help="Scene durations in seconds, in playback order."),
    ],
    transitions: Annotated[
        Optional[bool],
        typer.Option("--transitions/--no-transitions", help="Pad scene boundaries for transitions."),
    ] = None,
    transition_duration: Annotated[
        Optional[float],
        typer.Option("--transition-duration", "-t", help="Seconds per transition."),
    ] = None,
    subtitle_delay: Annotated[
        Optional[float],
        typer.Option("--delay", "-d", help="Seconds before audio begins in each scene."),
    ] = None,
    early_start: Annotated[
        Optional[float],
        typer.Option("--early-start", "-e", help="Seconds subtitles appear before audio."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print per-scene timing lines."),
    ] = False,
) -> None:
    """Show audio and subtitle windows for each scene, scene-relative and global."""
    try:
        config = load_config(
            **{
                "timing.has_transitions": transitions,
                "timing.transition_duration": transition_duration,
                "timing.subtitle_delay": subtitle_delay,
                "timing.subtitle_early_start": early_start,
            }
        )
        timings = calculate_video_timing(
            parse_durations(durations), config.timing.to_settings(), verbose=verbose
        )
    except ValueError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(timing_table(timings))
    console.print(f"\n[bold]Total duration:[/bold] {total_duration(timings):g}s")
