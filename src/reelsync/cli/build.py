"""reelsync build command: subtitle files and filter arguments from a scene plan."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from reelsync.cli.utils import load_scene_plan
from reelsync.core.config import load_config
from reelsync.utils.console import console


def build(
    scene_file: Annotated[
        Path,
        typer.Argument(help="Scene plan (.json or .toml) with narration and duration per scene."),
    ],
    fmt: Annotated[
        Optional[list[str]],
        typer.Option("--format", "-f", help="Subtitle format: srt, vtt, ass. Repeatable."),
    ] = None,
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
    position: Annotated[
        Optional[str],
        typer.Option("--position", help="Subtitle position: bottom, top, center."),
    ] = None,
    workspace: Annotated[
        Optional[Path],
        typer.Option("--workspace", "-o", help="Base workspace directory."),
    ] = None,
    title: Annotated[
        Optional[str],
        typer.Option("--title", help="Workspace title. Default: plan title or file name."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print per-scene timing lines."),
    ] = False,
) -> None:
    """Build synchronized subtitles and per-scene FFmpeg filters for a scene plan."""
    from reelsync.core.pipeline import build_subtitles

    try:
        plan_title, scenes = load_scene_plan(scene_file)
        config = load_config(
            **{
                "subtitles.formats": fmt or None,
                "subtitles.position": position,
                "timing.has_transitions": transitions,
                "timing.transition_duration": transition_duration,
                "timing.subtitle_delay": subtitle_delay,
                "workspace_dir": workspace,
            }
        )
        result = build_subtitles(scenes, config, title=title or plan_title, verbose=verbose)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(
        f"\n[bold green]Done:[/bold green] {len(result.timings)} scenes, "
        f"{result.total_duration:g}s total"
    )
    console.print(f"[bold]Workspace:[/bold] {result.workspace}")
