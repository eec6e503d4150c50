"""Subtitle file generation from unified scene timing.

SRT is written directly so timestamps keep the calculator's truncating
``HH:MM:SS,mmm`` format. Other formats (VTT, ASS) go through pysubs2.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pysubs2

from reelsync.core.models import SubtitleEntry, TimingSettings
from reelsync.timing.calculator import calculate_video_timing, seconds_to_srt_time


def generate_subtitle_entries(
    scene_texts: Sequence[str],
    scene_durations: Sequence[float],
    settings: TimingSettings,
) -> list[SubtitleEntry]:
    """Build one cue per scene on the global timeline.

    Scenes without a matching text get an empty cue.
    """
    timings = calculate_video_timing(scene_durations, settings)
    entries = []
    for i, timing in enumerate(timings):
        text = scene_texts[i] if i < len(scene_texts) else ""
        entries.append(
            SubtitleEntry(
                index=i + 1,
                start_time=seconds_to_srt_time(timing.global_subtitle_start),
                end_time=seconds_to_srt_time(timing.global_subtitle_end),
                text=text or "",
                global_start=timing.global_subtitle_start,
                global_end=timing.global_subtitle_end,
            )
        )
    return entries


def generate_srt_content(entries: Sequence[SubtitleEntry]) -> str:
    """Render entries as SRT blocks separated by blank lines."""
    return "\n".join(
        f"{entry.index}\n{entry.start_time} --> {entry.end_time}\n{entry.text}\n"
        for entry in entries
    )


def write_srt(entries: Sequence[SubtitleEntry], path: Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_srt_content(entries), encoding="utf-8")
    return path


def save_subtitles(entries: Sequence[SubtitleEntry], path: Path, fmt: str = "srt") -> Path:
    """Save subtitle entries to a file.

    Args:
        entries: Subtitle entries with global start/end seconds.
        path: Output file path.
        fmt: Format, one of "srt", "vtt", or "ass".

    Returns:
        The path the file was written to.
    """
    if fmt == "srt":
        return write_srt(entries, path)
    if fmt not in ("vtt", "ass"):
        raise ValueError(f"Unsupported subtitle format: {fmt}")

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    subs = pysubs2.SSAFile()
    for entry in entries:
        event = pysubs2.SSAEvent(
            start=pysubs2.make_time(s=entry.global_start),
            end=pysubs2.make_time(s=entry.global_end),
        )
        event.plaintext = entry.text
        subs.events.append(event)
    subs.save(str(path), format_=fmt)
    return path


def load_subtitles(path: Path) -> list[SubtitleEntry]:
    """Load an SRT, VTT or ASS file back into numbered entries."""
    subs = pysubs2.load(str(path))
    entries = []
    for event in subs.events:
        if event.is_comment:
            continue
        start = event.start / 1000.0
        end = event.end / 1000.0
        entries.append(
            SubtitleEntry(
                index=len(entries) + 1,
                start_time=seconds_to_srt_time(start),
                end_time=seconds_to_srt_time(end),
                text=event.plaintext,
                global_start=start,
                global_end=end,
            )
        )
    return entries
