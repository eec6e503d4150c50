"""Shared data models for reelsync."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimingSettings:
    """Transition and subtitle offsets applied to every scene.

    Defaults are applied here, once, rather than at each use site.
    """

    has_transitions: bool = False
    transition_duration: float = 0.0  # seconds, per transition
    subtitle_delay: float = 0.0  # seconds before audio begins
    subtitle_early_start: float = 0.5  # subtitle lead time before audio

    def __post_init__(self) -> None:
        for name in ("transition_duration", "subtitle_delay", "subtitle_early_start"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")


@dataclass(frozen=True)
class SceneTimingInfo:
    """Scene-relative and global timeline offsets for one scene."""

    scene_index: int
    scene_duration: float

    # Concatenated video timeline
    global_video_start: float
    global_video_end: float

    # Within the scene
    audio_start_time: float
    audio_end_time: float
    subtitle_start_time: float
    subtitle_end_time: float

    # Global audio/subtitle positions
    global_audio_start: float
    global_audio_end: float
    global_subtitle_start: float
    global_subtitle_end: float

    @property
    def extended_duration(self) -> float:
        """Scene length including transition padding."""
        return self.global_video_end - self.global_video_start


@dataclass(frozen=True)
class SubtitleWindow:
    start_time: float
    end_time: float
    duration: float


@dataclass
class SubtitleEntry:
    """A numbered subtitle cue with formatted timestamps."""

    index: int
    start_time: str  # HH:MM:SS,mmm
    end_time: str
    text: str
    global_start: float = 0.0
    global_end: float = 0.0


@dataclass
class Scene:
    """One narrated segment of a video."""

    narration: str
    duration: float  # seconds
