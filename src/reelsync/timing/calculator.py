"""Unified scene timing for audio and subtitles.

Every consumer (subtitle files, FFmpeg audio delays, burned-in drawtext
cues) derives its offsets from the same per-scene timeline, so audio and
subtitles cannot drift apart across scene boundaries.

Per scene, with transitions enabled, the scene is padded by one transition
on each side. Audio enters after one transition on the first scene and after
two on every later scene, plus the subtitle delay. Subtitles start
``subtitle_early_start`` seconds before their audio (never before 0) and end
with it.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from reelsync.core.models import SceneTimingInfo, SubtitleWindow, TimingSettings
from reelsync.utils.console import console as _shared_console

# Allowed drift between computed audio length and scene duration.
DURATION_TOLERANCE = 0.1


def _check_durations(scene_durations: Sequence[float]) -> None:
    for i, duration in enumerate(scene_durations):
        if not math.isfinite(duration) or duration <= 0:
            raise ValueError(f"Scene {i + 1} duration must be a positive number, got {duration}")


def calculate_video_timing(
    scene_durations: Sequence[float],
    settings: TimingSettings,
    console: Console | None = None,
    verbose: bool = False,
) -> list[SceneTimingInfo]:
    """Calculate the timeline of every scene in playback order.

    Args:
        scene_durations: Narration length of each scene, in seconds.
        settings: Transition and subtitle offsets.
        console: Where diagnostics go. Defaults to the shared stderr console.
        verbose: Print a line per scene.

    Returns:
        One SceneTimingInfo per scene. An empty input yields an empty list.

    Raises:
        ValueError: If any duration is not a positive finite number.
    """
    out = console or _shared_console
    _check_durations(scene_durations)

    transition = settings.transition_duration if settings.has_transitions else 0.0
    timings: list[SceneTimingInfo] = []
    position = 0.0

    if verbose:
        out.print(
            f"[bold]Timing {len(scene_durations)} scenes[/bold] "
            f"[dim](transitions={settings.has_transitions}, "
            f"transition={settings.transition_duration}s, "
            f"delay={settings.subtitle_delay}s, "
            f"early_start={settings.subtitle_early_start}s)[/dim]"
        )

    for i, duration in enumerate(scene_durations):
        extended = duration + transition * 2

        if settings.has_transitions:
            # Scene 0 has no incoming transition to wait out
            entry = transition if i == 0 else transition * 2
            audio_start = entry + settings.subtitle_delay
        else:
            audio_start = settings.subtitle_delay
        audio_end = audio_start + duration

        subtitle_start = max(0.0, audio_start - settings.subtitle_early_start)
        subtitle_end = audio_end

        video_start = position
        video_end = position + extended

        timing = SceneTimingInfo(
            scene_index=i,
            scene_duration=duration,
            global_video_start=video_start,
            global_video_end=video_end,
            audio_start_time=audio_start,
            audio_end_time=audio_end,
            subtitle_start_time=subtitle_start,
            subtitle_end_time=subtitle_end,
            global_audio_start=video_start + audio_start,
            global_audio_end=video_start + audio_end,
            global_subtitle_start=video_start + subtitle_start,
            global_subtitle_end=video_start + subtitle_end,
        )
        timings.append(timing)

        if verbose:
            out.print(
                f"  [dim]Scene {i + 1}/{len(scene_durations)}:[/dim] "
                f"video {video_start:.2f}-{video_end:.2f}s, "
                f"audio {audio_start:.2f}-{audio_end:.2f}s, "
                f"subtitle {subtitle_start:.2f}-{subtitle_end:.2f}s"
            )

        position = video_end

    validate_timings(timings, scene_durations, console=out)

    if verbose:
        out.print(f"[bold]Total duration:[/bold] {position:.2f}s")

    return timings


def validate_timings(
    timings: Sequence[SceneTimingInfo],
    scene_durations: Sequence[float],
    console: Console | None = None,
) -> list[str]:
    """Report timing inconsistencies without changing anything.

    Returns:
        Human-readable issue descriptions, also printed as warnings.
    """
    out = console or _shared_console
    issues = []
    for timing, expected in zip(timings, scene_durations):
        n = timing.scene_index + 1
        audio_duration = timing.audio_end_time - timing.audio_start_time
        if abs(audio_duration - expected) > DURATION_TOLERANCE:
            issues.append(
                f"Scene {n} audio duration mismatch: expected {expected}s, got {audio_duration}s"
            )
        if timing.subtitle_start_time > timing.audio_start_time:
            issues.append(f"Scene {n} subtitle starts after its audio")

    for issue in issues:
        out.print(f"[yellow]Warning:[/yellow] {issue}")
    return issues


def total_duration(timings: Sequence[SceneTimingInfo]) -> float:
    """Length of the concatenated video, 0.0 when there are no scenes."""
    if not timings:
        return 0.0
    return timings[-1].global_video_end


def get_scene_timing(
    scene_index: int,
    scene_durations: Sequence[float],
    settings: TimingSettings,
) -> SceneTimingInfo:
    """Timing for a single scene, computed against the whole sequence."""
    if not 0 <= scene_index < len(scene_durations):
        raise IndexError(f"Scene {scene_index} not found in timing calculations")
    return calculate_video_timing(scene_durations, settings)[scene_index]


def audio_delay_for_scene(timing: SceneTimingInfo) -> float:
    """Seconds of leading silence before the scene's narration."""
    return timing.audio_start_time


def subtitle_window_for_scene(timing: SceneTimingInfo) -> SubtitleWindow:
    return SubtitleWindow(
        start_time=timing.subtitle_start_time,
        end_time=timing.subtitle_end_time,
        duration=timing.subtitle_end_time - timing.subtitle_start_time,
    )


def seconds_to_srt_time(seconds: float) -> str:
    """Format seconds as an SRT timestamp (HH:MM:SS,mmm).

    Milliseconds are truncated, not rounded. Hours may exceed two digits.
    Negative values clamp to zero.
    """
    # epsilon absorbs float error so 2.3 formats as ,300 rather than ,299
    total_ms = math.floor(max(0.0, seconds) * 1000 + 1e-6)
    total_s, ms = divmod(total_ms, 1000)
    total_m, s = divmod(total_s, 60)
    h, m = divmod(total_m, 60)
    return f"{h:02d}:{m:02d}:{s:02d},{ms:03d}"


def timing_table(timings: Sequence[SceneTimingInfo], title: str | None = None) -> Table:
    """Build a Rich table comparing audio and subtitle windows per scene."""
    table = Table(title=title or f"Scene Timing ({len(timings)} scenes)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Duration", justify="right")
    table.add_column("Audio", justify="right")
    table.add_column("Subtitle", justify="right")
    table.add_column("Global Audio", justify="right", style="cyan")
    table.add_column("Global Subtitle", justify="right", style="cyan")
    table.add_column("Lead", justify="right", style="green")

    for t in timings:
        table.add_row(
            str(t.scene_index + 1),
            f"{t.scene_duration:g}s",
            f"{t.audio_start_time:g}-{t.audio_end_time:g}s",
            f"{t.subtitle_start_time:g}-{t.subtitle_end_time:g}s",
            f"{t.global_audio_start:g}-{t.global_audio_end:g}s",
            f"{t.global_subtitle_start:g}-{t.global_subtitle_end:g}s",
            f"{t.global_audio_start - t.global_subtitle_start:.2f}s",
        )
    return table
