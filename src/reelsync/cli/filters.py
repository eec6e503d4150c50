"""reelsync filters command: print per-scene FFmpeg filter arguments."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from reelsync.cli.utils import load_scene_plan
from reelsync.core.config import load_config
from reelsync.subtitles.filters import audio_delay_filter, drawtext_filter
from reelsync.timing.calculator import calculate_video_timing
from reelsync.utils.console import console as err_console

console = Console(soft_wrap=True)


def filters(
    scene_file: Annotated[
        Path,
        typer.Argument(help="Scene plan (.json or .toml) with narration and duration per scene."),
    ],
    transitions: Annotated[
        Optional[bool],
        typer.Option("--transitions/--no-transitions", help="Pad scene boundaries for transitions."),
    ] = None,
    transition_duration: Annotated[
        Optional[float],
        typer.Option("--transition-duration", "-t", help="Seconds per transition."),
    ] = None,
    width: Annotated[
        Optional[int],
        typer.Option("--width", help="Video width in pixels."),
    ] = None,
    height: Annotated[
        Optional[int],
        typer.Option("--height", help="Video height in pixels."),
    ] = None,
) -> None:
    """Print the adelay and drawtext filter for every scene."""
    try:
        _, scenes = load_scene_plan(scene_file)
        config = load_config(
            **{
                "timing.has_transitions": transitions,
                "timing.transition_duration": transition_duration,
                "video.width": width,
                "video.height": height,
            }
        )
        timings = calculate_video_timing(
            [s.duration for s in scenes], config.timing.to_settings()
        )
    except (FileNotFoundError, ValueError) as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    for scene, t in zip(scenes, timings):
        console.rule(f"[bold]Scene {t.scene_index + 1}[/bold]")
        console.print(audio_delay_filter(t), markup=False, highlight=False)
        drawtext = drawtext_filter(scene.narration, t, config.subtitles, config.video)
        if drawtext:
            console.print(drawtext, markup=False, highlight=False)
