"""Subtitle build orchestrator: timing, then subtitle files and FFmpeg filter arguments."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from reelsync.core.config import ReelSyncConfig
from reelsync.core.events import EventCallback, PipelineEvent
from reelsync.core.models import Scene, SceneTimingInfo
from reelsync.subtitles.filters import audio_delay_filter, drawtext_filter
from reelsync.subtitles.srt import generate_subtitle_entries, save_subtitles
from reelsync.timing.calculator import calculate_video_timing, total_duration
from reelsync.utils.console import console
from reelsync.utils.paths import create_workspace, save_metadata, workspace_paths


@dataclass
class SceneFilters:
    """Per-scene FFmpeg arguments for compositing."""

    scene_index: int
    audio_delay: str
    drawtext: str


@dataclass
class SubtitlePlan:
    """Everything produced by one subtitle build."""

    workspace: Path
    timings: list[SceneTimingInfo]
    total_duration: float
    subtitle_paths: dict[str, Path] = field(default_factory=dict)
    filters: list[SceneFilters] = field(default_factory=list)


def build_subtitles(
    scenes: Sequence[Scene],
    config: ReelSyncConfig,
    title: str = "untitled",
    on_event: EventCallback | None = None,
    verbose: bool = False,
) -> SubtitlePlan:
    """Compute scene timing and write subtitle files into a new workspace.

    Args:
        scenes: Narrated scenes in playback order.
        config: Full application config.
        title: Used to name the workspace directory.
        on_event: Optional callback for streaming progress events.
        verbose: Print per-scene timing lines.

    Returns:
        The build result, including the workspace path.
    """

    def emit(stage: str, progress: float, message: str, data: dict | None = None) -> None:
        if on_event:
            on_event(PipelineEvent(stage=stage, progress=progress, message=message, data=data))

    settings = config.timing.to_settings()
    durations = [scene.duration for scene in scenes]

    # Step 1: Timing
    emit("timing", 0.0, f"Timing {len(scenes)} scenes")
    timings = calculate_video_timing(durations, settings, verbose=verbose)
    total = total_duration(timings)
    emit("timing", 1.0, f"Total duration {total:.2f}s", {"total_duration": total})

    # Step 2: Workspace
    workspace = create_workspace(title, base_dir=config.workspace_dir)
    formats = config.subtitles.formats
    paths = workspace_paths(workspace, formats)
    console.print(f"[bold]Workspace:[/bold] {workspace}")

    # Step 3: Subtitle files
    plan = SubtitlePlan(workspace=workspace, timings=timings, total_duration=total)
    if config.subtitles.enabled:
        entries = generate_subtitle_entries([s.narration for s in scenes], durations, settings)
        for i, fmt in enumerate(formats):
            emit("subtitles", i / len(formats), f"Writing {fmt.upper()}...")
            path = save_subtitles(entries, paths[f"subtitles_{fmt}"], fmt=fmt)
            plan.subtitle_paths[fmt] = path
            console.print(f"[green]Saved:[/green] {path}")
        emit("subtitles", 1.0, "Subtitles written")
    else:
        console.print("[dim]Subtitles disabled, skipping.[/dim]")

    # Step 4: Per-scene filter arguments
    emit("filters", 0.0, "Building FFmpeg filters...")
    for scene, timing in zip(scenes, timings):
        plan.filters.append(
            SceneFilters(
                scene_index=timing.scene_index,
                audio_delay=audio_delay_filter(timing),
                drawtext=drawtext_filter(scene.narration, timing, config.subtitles, config.video),
            )
        )
    paths["filters"].write_text(
        json.dumps(
            [
                {"scene": f.scene_index + 1, "adelay": f.audio_delay, "drawtext": f.drawtext}
                for f in plan.filters
            ],
            indent=2,
            ensure_ascii=False,
        ),
        encoding="utf-8",
    )
    emit("filters", 1.0, "Filters ready")

    # Step 5: Metadata
    emit("save", 0.0, "Saving metadata...")
    save_metadata(
        workspace,
        title=title,
        scene_count=len(scenes),
        total_duration=total,
        timing=config.timing.model_dump(),
        scene_durations=durations,
    )
    emit("save", 1.0, "Done", {"workspace": str(workspace)})

    return plan
